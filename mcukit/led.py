"""LED driven by one GPIO pin."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState


class Led:
    """An LED whose lit and dark levels are given by ``on`` and ``off``."""

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
        """Configure the pin and switch the LED off."""
        self.pin.configure(clocks)
        self.pin.write(self.off)

    def turn_on(self) -> None:
        """Light the LED."""
        self.pin.write(self.on)

    def turn_off(self) -> None:
        """Switch the LED off."""
        self.pin.write(self.off)

    def toggle(self) -> None:
        """Invert the LED."""
        self.pin.toggle()

    @property
    def is_on(self) -> bool:
        """Whether the pin is at the lit level."""
        return self.pin.read() == self.on