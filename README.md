# mcukit

Software models of small microcontroller peripherals and the drivers and
utilities built on them. Pins, clock-enable registers and UART interrupt
flags are plain Python objects, so driver logic such as debouncing, ring
buffered transmission and a line-editing serial console can be run and tested
on a desktop.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `mcukit.gpio`: `PinState`, `Port` (A to I), `Uart` (USART1 to USART6),
  `GpioPin` (holds a level; `configure`, `read`, `write`, `toggle`),
  `ClockControl` (the `ahb1enr`, `apb1enr` and `apb2enr` enable registers,
  with `control_gpio`, `control_uart`, `is_gpio_enabled`, `is_uart_enabled`)
  and `Console`, which writes text to a byte sink, putting a carriage return
  before each line feed and a line feed before each carriage return, and
  stopping at a NUL or after an optional character limit.
- `mcukit.led.Led` and `mcukit.digital_output.DigitalOutput`: one pin with
  `init`, `turn_on`, `turn_off`, `toggle` and `is_on`. `Led.init` leaves the
  pin at its off level, `DigitalOutput.init` at its on level.
- `mcukit.relay.Relay`: like the above, but wired inverted (`turn_on` drives
  the pin to `off`, `turn_off` to `on`) and it records `state`.
- `mcukit.watchdog.Watchdog`: `toggle` strobes the pin unless `lock` has been
  called; `unlock` resumes strobing.
- `mcukit.digital_input.DigitalInput`: `read_state` and `filter_state(tick_msec)`,
  a debounce filter that accepts a changed reading after `max_filter`
  milliseconds. A tick longer than `max_filter` raises `ValueError`.
- `mcukit.dip_switch.DipSwitch`: 1 to 8 pins read as a number with
  `read_value(reverse)`, debounced by `detect_value(tick_msec, reverse)`.
- `mcukit.safety_sensor.SafetySensor`: two channels that must change together;
  `filter_state(check_time)` samples them and reports whether the confirmed
  state changed.
- `mcukit.rs232.Rs232` and `mcukit.rs485.Rs485`: UART ports with a transmit
  ring buffer (`send_byte`, `transmit`, `handle_txe`), a wrapping receive
  buffer (`handle_rxne`, `restore_rx`), a receive-complete timer
  (`set_receive_tick`, `countdown_receive_tick`, `receive_timeout`) and
  `Interrupt` flags (`enable_receiving`, `disable_irq`). Bytes sent by the
  transmit interrupt collect in `transmitted`. `Rs485` also drives a
  transmit-enable pin, released by `handle_tc` once the ring is empty.
- `mcukit.tmp117`: `Register` and `read_temperature(bus, address)`, which reads
  two bytes from any object with a `receive(address, length, timeout_ms)`
  method and returns the raw big-endian word as a float.
- `mcukit.strings`: `format_thousands`, `to_integer`, `integer_to_string`,
  `char_to_hex`, `string_to_hex`, `extract_word`, `compare`,
  `char_compare_nocase`, `compare_nocase`, `compare_nocase_length`,
  `string_length`. These keep the fixed limits of small firmware helpers:
  `string_length` never reports more than 51, and word scanning and
  case-insensitive comparison stop after about 30 characters.
- `mcukit.buffers`: `copy_bytes`, `copy_until_zero`, `fill_bytes`, working in
  place on mutable byte sequences.
- `mcukit.command`: `CommandShell`, a serial console with echo, backspace,
  escape, up/down history of the last 8 commands and case-insensitive
  dispatch to a list of `Command(name, handler)` entries. `CmdInput` names
  the kinds of input `parse_input` recognises and `AsciiCtrl` the control
  characters.

## Example

```python
from mcukit.gpio import ClockControl, GpioPin, PinState, Port
from mcukit.led import Led

clocks = ClockControl()
led = Led("status", GpioPin(Port.A, 5), PinState.SET, PinState.RESET)
led.init(clocks)
led.turn_on()
assert led.is_on
assert clocks.is_gpio_enabled(Port.A)
```

A command shell:

```python
from mcukit.command import Command, CommandShell

calls, output = [], []
shell = CommandShell([Command("HELLO", calls.append)], write=output.append, prompt="SHALOM>")
shell.parse_command(b"hello world")
assert calls == ["world"]
assert output[-1] == b"SHALOM>"
```

## What it does not do

Nothing here talks to real hardware: pins, clocks, interrupts and the I2C bus
are models, and a serial line or sensor must be supplied by the caller as a
byte sink or a bus object. `read_temperature` does not convert the raw word
to degrees. The package has no command-line program.