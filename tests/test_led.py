from mcukit.gpio import ClockControl, GpioPin, PinState, Port
from mcukit.led import Led


def make_led(on=PinState.SET, off=PinState.RESET, initial=PinState.SET):
    return Led("status", GpioPin(Port.D, 12, initial), on, off)


def test_init_turns_led_off_and_enables_clock():
    clocks = ClockControl()
    led = make_led()
    led.init(clocks)
    assert led.pin.read() == PinState.RESET
    assert not led.is_on
    assert clocks.is_gpio_enabled(Port.D)


def test_on_off():
    led = make_led()
    led.turn_on()
    assert led.pin.read() == PinState.SET
    assert led.is_on
    led.turn_off()
    assert led.pin.read() == PinState.RESET
    assert not led.is_on


def test_active_low_led():
    led = make_led(on=PinState.RESET, off=PinState.SET, initial=PinState.RESET)
    led.init(ClockControl())
    assert led.pin.read() == PinState.SET
    led.turn_on()
    assert led.pin.read() == PinState.RESET
    assert led.is_on


def test_toggle_twice_restores():
    led = make_led()
    led.turn_on()
    led.toggle()
    assert not led.is_on
    led.toggle()
    assert led.is_on