"""Two-channel safety sensor (OSSD outputs) read from two GPIO pins."""

from __future__ import annotations

from mcukit.gpio import ClockControl, GpioPin, PinState

_U32 = 0xFFFFFFFF


class SafetySensor:
    """A safety sensor with two output channels that must change together.

    A channel reads True when its pin is at its ``off`` level. The confirmed
    channel states are kept in ``curr_state1``/``curr_state2`` and mirrored in
    ``ossd1``/``ossd2``.
    """

    def __init__(
        self,
        name: str,
        pin1: GpioPin,
        off1: PinState,
        pin2: GpioPin,
        off2: PinState,
        max_filter: int = 0,
    ) -> None:
        if not 0 <= max_filter <= _U32:
            raise ValueError(f"max_filter out of unsigned 32-bit range: {max_filter}")
        self.name = name
        self.pin1 = pin1
        self.off1 = PinState(off1)
        self.pin2 = pin2
        self.off2 = PinState(off2)
        self.max_filter = max_filter
        self.filtering = max_filter
        self.curr_state1 = False
        self.curr_state2 = False
        self.ossd1 = False
        self.ossd2 = False

    def init(self, clocks: ClockControl) -> None:
        """Configure both channel pins."""
        self.pin1.configure(clocks)
        self.pin2.configure(clocks)

    def _read(self) -> tuple[bool, bool]:
        return self.pin1.read() == self.off1, self.pin2.read() == self.off2

    def filter_state(self, check_time: int) -> bool:
        """Sample both channels up to ``check_time`` times; return whether the state changed.

        The new states are accepted when both channels differ from their
        confirmed states on every sample. A sample where they do not ends the
        check and resets the filter. Raises ValueError when ``check_time`` is
        longer than ``max_filter``.
        """
        if check_time < 0:
            raise ValueError(f"check time must not be negative: {check_time}")
        if check_time > self.max_filter:
            raise ValueError(
                f"Filtering Tick is not valid ({check_time}msec) [ > {self.max_filter}]"
            )
        while check_time:
            state1, state2 = self._read()
            if self.curr_state1 == state1 or self.curr_state2 == state2:
                self.filtering = self.max_filter
                return False
            check_time -= 1
            if check_time == 0:
                self.ossd1 = self.curr_state1 = state1
                self.ossd2 = self.curr_state2 = state2
                self.filtering = self.max_filter
                return True
        return False