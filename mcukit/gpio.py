"""Simulated STM32F4 GPIO pins, peripheral clock gating and the console printer."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, IntEnum

_MAX_PIN = 15


class PinState(IntEnum):
    """Logic level of a GPIO pin."""

    RESET = 0
    SET = 1


class Port(IntEnum):
    """GPIO ports; each has its own enable bit in the AHB1 clock register."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741

    @property
    def clock_bit(self) -> int:
        """Mask of this port's bit in the AHB1 enable register."""
        return 1 << self.value


class Uart(Enum):
    """UART peripherals with the clock bus and enable bit that gate them."""

    USART1 = ("apb2", 4)
    USART2 = ("apb1", 17)
    USART3 = ("apb1", 18)
    UART4 = ("apb1", 19)
    UART5 = ("apb1", 20)
    USART6 = ("apb2", 5)

    @property
    def bus(self) -> str:
        """Name of the enable register, ``"apb1"`` or ``"apb2"``."""
        return self.value[0]

    @property
    def clock_bit(self) -> int:
        """Mask of this peripheral's bit in its bus enable register."""
        return 1 << self.value[1]


class ClockControl:
    """Clock enable registers of the reset and clock controller."""

    def __init__(self) -> None:
        self.ahb1enr = 0
        self.apb1enr = 0
        self.apb2enr = 0

    def control_gpio(self, port: Port | int, enabled: bool) -> None:
        """Enable or disable the clock of ``port``; unknown ports are ignored."""
        try:
            port = Port(port)
        except ValueError:
            return
        if enabled:
            self.ahb1enr |= port.clock_bit
        else:
            self.ahb1enr &= ~port.clock_bit

    def control_uart(self, uart: Uart, enabled: bool) -> None:
        """Enable or disable the clock of ``uart``."""
        if not isinstance(uart, Uart):
            raise ValueError(f"unknown UART: {uart!r}")
        register = f"{uart.bus}enr"
        value = getattr(self, register)
        if enabled:
            value |= uart.clock_bit
        else:
            value &= ~uart.clock_bit
        setattr(self, register, value)

    def is_gpio_enabled(self, port: Port) -> bool:
        """Whether the clock of ``port`` is running."""
        return bool(self.ahb1enr & Port(port).clock_bit)

    def is_uart_enabled(self, uart: Uart) -> bool:
        """Whether the clock of ``uart`` is running."""
        if not isinstance(uart, Uart):
            raise ValueError(f"unknown UART: {uart!r}")
        return bool(getattr(self, f"{uart.bus}enr") & uart.clock_bit)


class GpioPin:
    """One pin of a GPIO port holding a logic level."""

    def __init__(self, port: Port, number: int, state: PinState = PinState.RESET) -> None:
        if not 0 <= number <= _MAX_PIN:
            raise ValueError(f"pin number must be between 0 and {_MAX_PIN}: {number}")
        self.port = Port(port)
        self.number = number
        self.state = PinState(state)
        self.configured = False

    @property
    def mask(self) -> int:
        """Bit mask of the pin within its port."""
        return 1 << self.number

    def configure(self, clocks: ClockControl) -> None:
        """Start the port clock and mark the pin as initialised."""
        clocks.control_gpio(self.port, True)
        self.configured = True

    def read(self) -> PinState:
        """Current level of the pin."""
        return self.state

    def write(self, state: PinState) -> None:
        """Drive the pin to ``state``."""
        self.state = PinState(state)

    def toggle(self) -> None:
        """Invert the pin level."""
        self.state = PinState.RESET if self.state == PinState.SET else PinState.SET


class Console:
    """Debug console that turns text into terminal bytes.

    Every line feed is preceded by a carriage return and every carriage return
    by a line feed. Output stops at a NUL or after ``limit`` characters.
    """

    def __init__(self, sink: Callable[[bytes], object], limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must not be negative: {limit}")
        self._sink = sink
        self._limit = limit

    def write(self, text: str) -> int:
        """Send ``text``; return the number of characters consumed."""
        out = bytearray()
        consumed = 0
        for ch in text:
            if ch == "\0" or (self._limit is not None and consumed >= self._limit):
                break
            if ch == "\n":
                out.append(0x0D)
            elif ch == "\r":
                out.append(0x0A)
            out.extend(ch.encode("latin-1"))
            consumed += 1
        if out:
            self._sink(bytes(out))
        return consumed

    def send(self, data: bytes) -> None:
        """Send ``data`` unchanged."""
        self._sink(bytes(data))