"""External watchdog strobed through one GPIO pin."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState


class Watchdog:
    """A watchdog kept alive by toggling its pin; a locked watchdog is not strobed."""

    def __init__(self, name: str, pin: GpioPin) -> None:
        self.name = name
        self.pin = pin
        self.locked = False

    def init(self, clocks: ClockControl) -> None:
        """Configure the pin and drive it low."""
        self.pin.configure(clocks)
        self.pin.write(PinState.RESET)

    def toggle(self) -> None:
        """Strobe the watchdog unless it is locked."""
        if not self.locked:
            self.pin.toggle()

    def lock(self) -> None:
        """Stop strobing the watchdog."""
        self.locked = True

    def unlock(self) -> None:
        """Resume strobing the watchdog."""
        self.locked = False