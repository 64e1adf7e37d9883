"""Digital output driven by one GPIO pin."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState


class DigitalOutput:
    """A digital output whose active and idle levels are ``on`` and ``off``."""

    def __init__(
        self,
        name: str,
        pin: GpioPin,
        on: PinState = PinState.SET,
        off: PinState = PinState.RESET,
    ) -> None:
        self.name = name
        self.pin = pin
        self.on = PinState(on)
        self.off = PinState(off)

    def init(self, clocks: ClockControl) -> None:
        """Configure the pin and drive it to the ``on`` level."""
        self.pin.configure(clocks)
        self.pin.write(self.on)

    def turn_on(self) -> None:
        """Drive the output to its ``on`` level."""
        self.pin.write(self.on)

    def turn_off(self) -> None:
        """Drive the output to its ``off`` level."""
        self.pin.write(self.off)

    def toggle(self) -> None:
        """Invert the output."""
        self.pin.toggle()

    @property
    def is_on(self) -> bool:
        """Whether the pin is at the ``on`` level."""
        return self.pin.read() == self.on