import pytest

from mcukit.gpio import ClockControl, GpioPin, PinState, Port
from mcukit.safety_sensor import SafetySensor


def make_sensor(max_filter=10, level1=PinState.RESET, level2=PinState.RESET):
    pin1 = GpioPin(Port.G, 6, level1)
    pin2 = GpioPin(Port.G, 7, level2)
    sensor = SafetySensor("curtain", pin1, PinState.RESET, pin2, PinState.RESET, max_filter)
    return sensor, pin1, pin2


def test_init_configures_both_pins():
    sensor, pin1, pin2 = make_sensor()
    clocks = ClockControl()
    sensor.init(clocks)
    assert pin1.configured and pin2.configured
    assert clocks.is_gpio_enabled(Port.G)


def test_both_channels_changed_are_accepted():
    sensor, _, _ = make_sensor()
    assert sensor.filter_state(5) is True
    assert (sensor.curr_state1, sensor.curr_state2) == (True, True)
    assert (sensor.ossd1, sensor.ossd2) == (True, True)
    assert sensor.filtering == sensor.max_filter


def test_single_channel_change_is_rejected():
    sensor, _, _ = make_sensor(level2=PinState.SET)
    assert sensor.filter_state(5) is False
    assert (sensor.curr_state1, sensor.curr_state2) == (False, False)
    assert sensor.ossd1 is False


def test_return_to_idle_after_change():
    sensor, pin1, pin2 = make_sensor()
    sensor.filter_state(3)
    pin1.write(PinState.SET)
    pin2.write(PinState.SET)
    assert sensor.filter_state(3) is True
    assert (sensor.ossd1, sensor.ossd2) == (False, False)


def test_zero_check_time_changes_nothing():
    sensor, _, _ = make_sensor()
    assert sensor.filter_state(0) is False
    assert sensor.curr_state1 is False


def test_check_time_over_filter_raises():
    sensor, _, _ = make_sensor(max_filter=10)
    with pytest.raises(ValueError):
        sensor.filter_state(11)
    assert sensor.curr_state1 is False