"""Interrupt-driven RS-485 port with a transmit-enable line and ring-buffered transmission."""

from __future__ import annotations

from collections.abc import Iterable

from mcukit.gpio import ClockControl, GpioPin, PinState, Uart
from mcukit.rs232 import Interrupt

_U32 = 0xFFFFFFFF
_RECEIVE = Interrupt.PE | Interrupt.ERR | Interrupt.RXNE
_ALL = _RECEIVE | Interrupt.TC | Interrupt.TXE


class Rs485:
    """A UART used as a half-duplex RS-485 port.

    The driver is switched to transmit by putting ``txe_pin`` at ``on_txe``
    when a transmission starts. It goes back to ``off_txe`` once the
    transmission-complete interrupt finds the ring empty. Outgoing bytes go
    through a ring buffer of ``tx_size`` slots, one of which always stays free.
    Bytes pushed to the data register are collected in ``transmitted``.
    """

    def __init__(
        self,
        name: str,
        tx_pin: GpioPin,
        rx_pin: GpioPin,
        txe_pin: GpioPin,
        on_txe: PinState,
        off_txe: PinState,
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
        self.txe_pin = txe_pin
        self.on_txe = PinState(on_txe)
        self.off_txe = PinState(off_txe)
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
        """Configure the pins, release the transmit line, start the UART and its IRQ."""
        self.tx_pin.configure(clocks)
        self.rx_pin.configure(clocks)
        self.txe_pin.configure(clocks)
        self.txe_pin.write(self.off_txe)
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
        """Clear the received bytes below ``rx_count``, the count and the completion flag."""
        self.rx_buf[: self.rx_count] = bytes(self.rx_count)
        self.rx_count = 0
        self.rx_complete = False

    def transmit(self, data: Iterable[int]) -> None:
        """Queue every byte of ``data`` for transmission."""
        for byte in data:
            self.send_byte(byte)

    def send_byte(self, byte: int) -> None:
        """Queue one byte; when idle, enable the driver and the transmit interrupts.

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
            self.txe_pin.write(self.on_txe)
            self.tx_ing = True
            self.interrupts |= Interrupt.TXE | Interrupt.TC

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

    def handle_tc(self) -> None:
        """Release the transmit line once every queued byte has been sent."""
        if self.tx_count_out == self.tx_count_in:
            self.txe_pin.write(self.off_txe)