import pytest

from mcukit.dip_switch import DipSwitch
from mcukit.gpio import ClockControl, GpioPin, PinState, Port


def make_switch(max_filter=20):
    pins = [GpioPin(Port.E, n) for n in (2, 3, 4)]
    on_states = [PinState.SET] * 3
    return DipSwitch("addr", pins, on_states, max_filter), pins


def test_init_configures_all_pins():
    sw, pins = make_switch()
    clocks = ClockControl()
    sw.init(clocks)
    assert all(pin.configured for pin in pins)
    assert clocks.is_gpio_enabled(Port.E)


def test_read_value_all_off_and_all_on():
    sw, pins = make_switch()
    assert sw.read_value() == 0
    for pin in pins:
        pin.write(PinState.SET)
    assert sw.read_value() == 7
    assert sw.read_value(reverse=True) == 0


def test_read_value_single_bits():
    sw, pins = make_switch()
    for bit, pin in enumerate(pins):
        pin.write(PinState.SET)
        assert sw.read_value() == 1 << bit
        pin.write(PinState.RESET)


def test_reverse_complements_value():
    sw, pins = make_switch()
    pins[1].write(PinState.SET)
    assert sw.read_value() + sw.read_value(reverse=True) == (1 << sw.bits) - 1


def test_detect_value_confirms_after_filter():
    sw, pins = make_switch(max_filter=20)
    pins[0].write(PinState.SET)
    assert sw.detect_value(10) == 0
    assert sw.detect_value(10) == 1
    assert sw.prev_value == 1
    assert sw.detect_value(10) == 1
    assert sw.filtering == 20


def test_detect_value_restarts_on_bounce():
    sw, pins = make_switch(max_filter=20)
    pins[2].write(PinState.SET)
    sw.detect_value(10)
    pins[2].write(PinState.RESET)
    assert sw.detect_value(10) == 0
    assert sw.filtering == 20


def test_mismatched_on_states_rejected():
    with pytest.raises(ValueError):
        DipSwitch("x", [GpioPin(Port.A, 0)], [PinState.SET, PinState.SET])


def test_empty_switch_rejected():
    with pytest.raises(ValueError):
        DipSwitch("x", [], [])