"""Line editor and command dispatcher for a serial debug console."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from dataclasses import dataclass
from enum import IntEnum

from mcukit.buffers import copy_until_zero
from mcukit.strings import compare_nocase_length, extract_word, string_length

HISTORY_ENTRY_SIZE = 128
"""Largest number of bytes kept for one command in the history."""

HISTORY_DEPTH = 8
"""Number of commands the history remembers."""

DEFAULT_PROMPT = "SHALOM>"

_CSI = (0x1B, 0x5B)
_CLEAR_LINE = bytes((0x1B, 0x5B, 0x32, 0x4B))
_KEY_UP = 0x41
_KEY_DOWN = 0x42
_KEY_RIGHT = 0x43
_KEY_LEFT = 0x44


class CmdInput(IntEnum):
    """Kind of input recognised by :meth:`CommandShell.parse_input`."""

    ASCII_CHAR = 0
    ASCII_CTRL = 1
    COMMAND = 2
    KEY_CODE = 3
    ESCAPE_KEY = 4


class AsciiCtrl(IntEnum):
    """ASCII control characters."""

    SOH = 0x01
    STX = 0x02
    ETX = 0x03
    EOT = 0x04
    ENQ = 0x05
    ACK = 0x06
    CEL = 0x07
    BS = 0x08
    HT = 0x09
    LF = 0x0A
    VT = 0x0B
    FF = 0x0C
    CR = 0x0D
    SO = 0x0E
    SI = 0x0F
    DLE = 0x10
    DC1 = 0x11
    DC2 = 0x12
    DC3 = 0x13
    DC4 = 0x14
    NAK = 0x15
    SYN = 0x16
    ETB = 0x17
    CAN = 0x18
    EM = 0x19
    SUB = 0x1A
    ESC = 0x1B
    FS = 0x1C
    GS = 0x1D
    RS = 0x1E
    US = 0x1F
    SPACE = 0x20
    DEL = 0x7F


@dataclass(frozen=True)
class Command:
    """A console command: its name and the handler that receives its arguments."""

    name: str
    handler: Callable[[str], object]


class CommandShell:
    """Interactive console: echoes keystrokes, keeps a history and dispatches commands.

    ``write`` receives every byte string sent back to the terminal.
    """

    def __init__(
        self,
        commands: Iterable[Command],
        write: Callable[[bytes], object],
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._commands = list(commands)
        self._write = write
        self._prompt = prompt
        self._history: list[bytes] = [b""] * HISTORY_DEPTH
        self._in = 0
        self._out = 0
        self._count = 0

    def _print(self, text: str) -> None:
        self._write(text.encode("latin-1"))

    def parse_input(self, buf: bytearray) -> CmdInput:
        """Interpret the newest input in ``buf``, edit ``buf`` in place and echo.

        ``buf`` holds everything received for the current line, the newest byte last.
        """
        if not buf:
            raise ValueError("input buffer is empty")
        if len(buf) > 2 and (buf[-3], buf[-2]) == _CSI:
            return self._direction_key(buf)
        return self._last_char(buf)

    def parse_command(self, line: str | bytes) -> None:
        """Run the command named by the first word of ``line``, then print the prompt."""
        raw = line.encode("latin-1") if isinstance(line, str) else bytes(line)
        raw = raw.split(b"\0", 1)[0]
        text = raw.decode("latin-1")
        word, rest = extract_word(text, " ")
        length = string_length(word)

        matched = False
        if word:
            for command in self._commands:
                if string_length(command.name) != length:
                    continue
                if compare_nocase_length(command.name, word, length) == 0:
                    self._remember(raw)
                    command.handler(rest)
                    matched = True
                    break

        if not matched and (word or not self._commands):
            self._print(f"{word} is not Command\n")
        self._print(self._prompt)

    def show_history(self) -> None:
        """Print every history slot followed by the input and output indexes."""
        for index, entry in enumerate(self._history):
            self._print(f"{index} : ")
            self._write(entry + b"\n")
        self._print(f"InputIndex = {self._in}, OutputIndex = {self._out}\n")

    def _remember(self, raw: bytes) -> None:
        self._history[self._in] = raw[:HISTORY_ENTRY_SIZE]
        self._in = (self._in + 1) % HISTORY_DEPTH
        self._out = self._in
        self._count = min(self._count + 1, HISTORY_DEPTH)

    def _send_previous_line(self) -> None:
        self._print("\r")
        self._write(_CLEAR_LINE)
        self._print(self._prompt)
        self._write(self._history[self._out])

    def _direction_key(self, buf: bytearray) -> CmdInput:
        key = buf[-1]
        if key == _KEY_UP:
            del buf[-3:]
            self._up_key(buf)
            return CmdInput.ASCII_CHAR
        if key == _KEY_DOWN:
            del buf[-3:]
            self._down_key(buf)
            return CmdInput.ASCII_CHAR
        if key in (_KEY_RIGHT, _KEY_LEFT):
            del buf[-3:]
            self._write(bytes((*_CSI, key)))
        return CmdInput.KEY_CODE

    def _up_key(self, buf: bytearray) -> None:
        if self._count == 0:
            return
        if self._out == self._in and buf:
            self._history[self._out] = bytes(buf[:HISTORY_ENTRY_SIZE])
            buf.append(0)

        self._out = (self._out - 1) % HISTORY_DEPTH
        if self._out >= self._count or self._out == self._in:
            self._out = (self._out + 1) % HISTORY_DEPTH
            return
        self._send_previous_line()
        recalled = bytearray(len(self._history[self._out]))
        copy_until_zero(recalled, self._history[self._out])
        buf[:] = recalled

    def _down_key(self, buf: MutableSequence[int]) -> None:
        if self._out == self._in:
            return
        self._out = (self._out + 1) % HISTORY_DEPTH
        self._send_previous_line()
        buf[:] = self._history[self._out]
        if self._out == self._in:
            self._history[self._out] = b""

    def _last_char(self, buf: bytearray) -> CmdInput:
        last = buf[-1]
        if last == AsciiCtrl.ETX:
            return CmdInput.ASCII_CTRL
        if last in (AsciiCtrl.BS, AsciiCtrl.DEL):
            del buf[-1]
            if buf:
                del buf[-1]
                self._write(bytes((AsciiCtrl.BS, AsciiCtrl.SPACE, AsciiCtrl.BS)))
            return CmdInput.ASCII_CTRL
        if last == AsciiCtrl.ESC:
            buf.clear()
            self._write(bytes((AsciiCtrl.CR, AsciiCtrl.LF)))
            self._print(self._prompt)
            return CmdInput.ESCAPE_KEY
        if last == AsciiCtrl.CR:
            del buf[-1]
            self._write(bytes((AsciiCtrl.CR, AsciiCtrl.LF)))
            return CmdInput.COMMAND
        self._write(bytes((last,)))
        return CmdInput.ASCII_CHAR