"""Interrupt-driven RS-232 port with ring-buffered transmission."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Flag, auto

from mcukit.gpio import ClockControl, GpioPin, Uart

_U32 = 0xFFFFFFFF


class Interrupt(Flag):
    """UART interrupt sources."""

    PE = auto()
    ERR = auto()
    RXNE = auto()
    TC = auto()
    TXE = auto()


_RECEIVE = Interrupt.PE | Interrupt.ERR | Interrupt.RXNE
_ALL = _RECEIVE | Interrupt.TC | Interrupt.TXE


class Rs232:
    """A UART used as an RS-232 port.

    Outgoing bytes go through a ring buffer of ``tx_size`` slots, one of which
    always stays free. Incoming bytes land in ``rx_buf`` at ``rx_count``,
    which wraps around at ``rx_size``. Bytes pushed to the data register by
    the transmit interrupt are collected in ``transmitted``.
    """

    def __init__(
        self,
        name: str,
        tx_pin: GpioPin,
        rx_pin: GpioPin,
        uart: Uart,
        tx_size: int,
        rx_size: int,
        use_irq: bool = True,
    ) -> None:
        if tx_size < 2:
            raise ValueError(f"transmit buffer needs at least 2 slots: {tx_size}")
        if rx_size < 1:
            raise ValueError(f"receive buffer needs at least 1 slot: {rx_size}")
        self.name = name
        self.tx_pin = tx_pin
        self.rx_pin = rx_pin
        self.uart = uart
        self.tx_size = tx_size
        self.tx_buf = bytearray(tx_size)
        self.tx_count_in = 0
        self.tx_count_out = 0
        self.tx_ing = False
        self.rx_size = rx_size
        self.rx_buf = bytearray(rx_size)
        self.rx_count = 0
        self.rx_tick = 0
        self.rx_complete = False
        self.use_irq = use_irq
        self.irq_enabled = False
        self.interrupts = Interrupt(0)
        self.initialized = False
        self.transmitted = bytearray()

    def init(self, clocks: ClockControl) -> None:
        """Configure the pins, start the UART clock and enable its IRQ if used."""
        self.tx_pin.configure(clocks)
        self.rx_pin.configure(clocks)
        clocks.control_uart(self.uart, True)
        self.initialized = True
        if self.use_irq:
            self.irq_enabled = True

    def disable_irq(self) -> None:
        """Mask every UART interrupt source and the UART IRQ line."""
        self.interrupts &= ~_ALL
        self.irq_enabled = False

    def enable_receiving(self) -> None:
        """Unmask the parity, error and receive interrupts."""
        self.interrupts |= _RECEIVE

    def handle_rxne(self, data: int) -> None:
        """Store the low byte of ``data`` as a received byte."""
        self.rx_complete = False
        self.rx_buf[self.rx_count] = data & 0xFF
        self.rx_count += 1
        if self.rx_count >= self.rx_size:
            self.rx_count = 0

    def set_receive_tick(self, tick: int) -> None:
        """Arm the receive-complete timer with ``tick`` milliseconds."""
        if not 0 <= tick <= _U32:
            raise ValueError(f"tick out of unsigned 32-bit range: {tick}")
        self.rx_tick = tick

    def countdown_receive_tick(self) -> None:
        """Count the receive timer down; mark reception complete when it expires."""
        if self.rx_tick != 0:
            self.rx_tick -= 1
            if self.rx_tick == 0:
                self.rx_complete = True

    def receive_timeout(self) -> None:
        """Mark reception complete."""
        self.rx_complete = True

    def restore_rx(self) -> None:
        """Clear the receive buffer, its count and the completion flag."""
        self.rx_buf[:] = bytes(self.rx_size)
        self.rx_count = 0
        self.rx_complete = False

    def transmit(self, data: Iterable[int]) -> None:
        """Queue every byte of ``data`` for transmission."""
        for byte in data:
            self.send_byte(byte)

    def send_byte(self, byte: int) -> None:
        """Queue one byte and start the transmit interrupt if idle.

        When the ring is full the transmit interrupt is serviced until a slot
        frees up; if that interrupt is masked the byte can never be queued and
        BufferError is raised.
        """
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte value out of range: {byte}")
        following = (self.tx_count_in + 1) % self.tx_size
        while following == self.tx_count_out:
            if Interrupt.TXE not in self.interrupts:
                raise BufferError("transmit buffer is full and the transmitter is stopped")
            self.handle_txe()
        self.tx_buf[self.tx_count_in] = byte
        self.tx_count_in = following
        if not self.tx_ing:
            self.tx_ing = True
            self.interrupts |= Interrupt.TXE

    def handle_txe(self) -> int | None:
        """Send the next queued byte; return it, or None once the ring is empty."""
        if self.tx_count_out != self.tx_count_in:
            byte = self.tx_buf[self.tx_count_out]
            self.transmitted.append(byte)
            self.tx_count_out = (self.tx_count_out + 1) % self.tx_size
            self.tx_ing = True
            return byte
        self.tx_ing = False
        self.interrupts &= ~Interrupt.TXE
        return None