from mcukit.digital_output import DigitalOutput
from mcukit.gpio import ClockControl, GpioPin, PinState, Port


def make_output(on=PinState.SET, off=PinState.RESET, initial=PinState.RESET):
    return DigitalOutput("valve", GpioPin(Port.E, 3, initial), on, off)


def test_init_drives_on_level():
    clocks = ClockControl()
    out = make_output()
    out.init(clocks)
    assert out.pin.read() == PinState.SET
    assert out.is_on
    assert clocks.is_gpio_enabled(Port.E)
    assert out.pin.configured


def test_on_off():
    out = make_output()
    out.turn_on()
    assert out.pin.read() == PinState.SET
    out.turn_off()
    assert out.pin.read() == PinState.RESET
    assert not out.is_on


def test_inverted_levels():
    out = make_output(on=PinState.RESET, off=PinState.SET, initial=PinState.SET)
    out.init(ClockControl())
    assert out.pin.read() == PinState.RESET
    out.turn_off()
    assert out.pin.read() == PinState.SET


def test_toggle_inverts():
    out = make_output()
    out.turn_off()
    out.toggle()
    assert out.is_on
    out.toggle()
    assert not out.is_on