import pytest

from mcukit.gpio import ClockControl, GpioPin, PinState, Port, Uart
from mcukit.rs232 import Interrupt
from mcukit.rs485 import Rs485


def make_port(tx_size=8, rx_size=4, use_irq=True):
    return Rs485(
        "rs485",
        GpioPin(Port.A, 9),
        GpioPin(Port.A, 10),
        GpioPin(Port.D, 4, PinState.SET),
        PinState.SET,
        PinState.RESET,
        Uart.USART1,
        tx_size,
        rx_size,
        use_irq,
    )


def test_init_releases_driver_and_starts_clocks():
    port = make_port()
    clocks = ClockControl()
    port.init(clocks)
    assert port.txe_pin.read() == PinState.RESET
    assert clocks.is_gpio_enabled(Port.A)
    assert clocks.is_gpio_enabled(Port.D)
    assert clocks.is_uart_enabled(Uart.USART1)
    assert port.irq_enabled is True


def test_init_without_irq():
    port = make_port(use_irq=False)
    port.init(ClockControl())
    assert port.irq_enabled is False
    assert port.initialized is True


def test_send_byte_enables_driver_and_interrupts():
    port = make_port()
    port.init(ClockControl())
    port.send_byte(0x41)
    assert port.txe_pin.read() == PinState.SET
    assert Interrupt.TXE in port.interrupts
    assert Interrupt.TC in port.interrupts
    assert port.tx_ing is True


def test_transmit_and_drain_round_trip():
    port = make_port()
    port.init(ClockControl())
    port.transmit(b"hi!")
    sent = []
    while (byte := port.handle_txe()) is not None:
        sent.append(byte)
    assert bytes(sent) == b"hi!"
    assert port.transmitted == bytearray(b"hi!")
    assert port.tx_ing is False
    assert Interrupt.TXE not in port.interrupts


def test_tc_keeps_driver_while_bytes_pending():
    port = make_port()
    port.init(ClockControl())
    port.transmit(b"ab")
    port.handle_tc()
    assert port.txe_pin.read() == PinState.SET


def test_tc_releases_driver_when_empty():
    port = make_port()
    port.init(ClockControl())
    port.transmit(b"ab")
    port.handle_txe()
    port.handle_txe()
    port.handle_tc()
    assert port.txe_pin.read() == PinState.RESET


def test_full_ring_is_serviced_by_transmit_interrupt():
    port = make_port(tx_size=2)
    port.init(ClockControl())
    port.transmit(b"xyz")
    assert port.transmitted == bytearray(b"xy")
    assert port.handle_txe() == ord("z")


def test_full_ring_with_masked_transmitter_raises():
    port = make_port(tx_size=2)
    port.init(ClockControl())
    port.send_byte(1)
    port.disable_irq()
    with pytest.raises(BufferError):
        port.send_byte(2)


def test_send_byte_rejects_out_of_range():
    port = make_port()
    with pytest.raises(ValueError):
        port.send_byte(256)


def test_receive_wraps_and_restore_clears_counted_bytes():
    port = make_port(rx_size=4)
    for byte in (0x101, 0x02, 0x03):
        port.handle_rxne(byte)
    assert port.rx_buf == bytearray([0x01, 0x02, 0x03, 0x00])
    assert port.rx_count == 3
    port.receive_timeout()
    assert port.rx_complete is True
    port.restore_rx()
    assert port.rx_buf == bytearray(4)
    assert port.rx_count == 0
    assert port.rx_complete is False


def test_restore_after_wrap_leaves_bytes_above_count():
    port = make_port(rx_size=2)
    port.handle_rxne(7)
    port.handle_rxne(8)
    assert port.rx_count == 0
    port.restore_rx()
    assert port.rx_buf == bytearray([7, 8])


def test_receive_tick_countdown():
    port = make_port()
    port.set_receive_tick(2)
    port.countdown_receive_tick()
    assert port.rx_complete is False
    port.countdown_receive_tick()
    assert port.rx_complete is True
    assert port.rx_tick == 0


def test_enable_and_disable_receiving():
    port = make_port()
    port.enable_receiving()
    assert port.interrupts == Interrupt.PE | Interrupt.ERR | Interrupt.RXNE
    port.disable_irq()
    assert port.interrupts == Interrupt(0)


def test_bad_sizes_rejected():
    with pytest.raises(ValueError):
        make_port(tx_size=1)
    with pytest.raises(ValueError):
        make_port(rx_size=0)