"""Digital input on one GPIO pin with a debounce filter."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState

_U32 = 0xFFFFFFFF


class DigitalInput:
    """A digital input whose state is confirmed only after staying put for ``max_filter`` ms.

    ``filtering`` counts down the time left before a changed reading is accepted.
    It is an unsigned 32-bit counter, so a tick that does not divide it evenly
    wraps it around instead of reaching zero.
    """

    def __init__(
        self,
        name: str,
        pin: GpioPin,
        on: PinState = PinState.SET,
        off: PinState = PinState.RESET,
        max_filter: int = 0,
    ) -> None:
        if not 0 <= max_filter <= _U32:
            raise ValueError(f"max_filter out of unsigned 32-bit range: {max_filter}")
        self.name = name
        self.pin = pin
        self.on = PinState(on)
        self.off = PinState(off)
        self.max_filter = max_filter
        self.filtering = max_filter
        self.curr_state = False

    def init(self, clocks: ClockControl) -> None:
        """Configure the pin."""
        self.pin.configure(clocks)

    def read_state(self) -> bool:
        """Raw reading: True when the pin sits at the ``off`` level."""
        return self.pin.read() == self.off

    def filter_state(self, tick_msec: int) -> bool:
        """Advance the debounce filter by ``tick_msec`` and return the confirmed state.

        Raises ValueError when the tick is longer than ``max_filter``.
        """
        if tick_msec < 0:
            raise ValueError(f"tick must not be negative: {tick_msec}")
        if tick_msec > self.max_filter:
            raise ValueError(
                f"Filtering Tick is not valid ({tick_msec}msec) [ > {self.max_filter}]"
            )
        state = self.read_state()
        if self.curr_state != state:
            self.filtering = (self.filtering - tick_msec) & _U32
            if self.filtering == 0:
                self.curr_state = state
                self.filtering = self.max_filter
        else:
            self.filtering = self.max_filter
        return self.curr_state