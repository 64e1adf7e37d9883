"""DIP switch read from several GPIO pins, with a debounce filter."""

from __future__ import annotations

from collections.abc import Sequence

from mcukit.gpio import ClockControl, GpioPin, PinState

_U32 = 0xFFFFFFFF
_MAX_BITS = 8


class DipSwitch:
    """A DIP switch whose bit ``i`` is set when ``pins[i]`` reads ``on_states[i]``.

    ``value`` holds the last confirmed setting; ``prev_value`` the reading it
    was confirmed from. ``filtering`` is an unsigned 32-bit countdown.
    """

    def __init__(
        self,
        name: str,
        pins: Sequence[GpioPin],
        on_states: Sequence[PinState],
        max_filter: int = 0,
    ) -> None:
        if len(pins) != len(on_states):
            raise ValueError("each pin needs exactly one on-state")
        if not 1 <= len(pins) <= _MAX_BITS:
            raise ValueError(f"a DIP switch has 1 to {_MAX_BITS} bits, got {len(pins)}")
        if not 0 <= max_filter <= _U32:
            raise ValueError(f"max_filter out of unsigned 32-bit range: {max_filter}")
        self.name = name
        self.pins = list(pins)
        self.on_states = [PinState(state) for state in on_states]
        self.max_filter = max_filter
        self.filtering = max_filter
        self.value = 0
        self.prev_value = 0

    @property
    def bits(self) -> int:
        """Number of switch positions."""
        return len(self.pins)

    def init(self, clocks: ClockControl) -> None:
        """Configure every pin of the switch."""
        for pin in self.pins:
            pin.configure(clocks)

    def read_value(self, reverse: bool = False) -> int:
        """Read the pins into a number; ``reverse`` inverts every bit."""
        value = sum(
            1 << bit
            for bit, (pin, on) in enumerate(zip(self.pins, self.on_states))
            if pin.read() == on
        )
        if reverse:
            value = ((1 << self.bits) - 1) - value
        return value & 0xFF

    def detect_value(self, tick_msec: int, reverse: bool = False) -> int:
        """Advance the debounce filter by ``tick_msec`` and return the confirmed value."""
        if tick_msec < 0:
            raise ValueError(f"tick must not be negative: {tick_msec}")
        value = self.read_value(reverse)
        if self.prev_value != value:
            self.filtering = (self.filtering - tick_msec) & _U32
            if self.filtering == 0:
                self.value = value
                self.prev_value = value
        else:
            self.filtering = self.max_filter
        return self.value