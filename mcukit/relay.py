"""Relay driven by one GPIO pin."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState


class Relay:
    """A relay that tracks whether it is energised.

    The wiring inverts the pin levels: switching on drives the pin to ``off``
    and switching off drives it to ``on``.
    """

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
        self.state = False

    def init(self, clocks: ClockControl) -> None:
        """Configure the pin and leave the relay switched off."""
        self.pin.configure(clocks)
        self.pin.write(self.on)
        self.state = False

    def turn_on(self) -> None:
        """Energise the relay."""
        self.pin.write(self.off)
        self.state = True

    def turn_off(self) -> None:
        """Release the relay."""
        self.pin.write(self.on)
        self.state = False

    def toggle(self) -> None:
        """Invert the pin and the recorded state."""
        self.pin.toggle()
        self.state = not self.state