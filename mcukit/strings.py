"""String helpers for the debug console: conversions, word extraction and comparison."""

from __future__ import annotations

SAME = 0
"""Result of a comparison whose operands match."""

DIFF = 1
"""Result of a comparison where a non-alphabetic character differs."""

INVALID_HEX = ord("z")
"""Value returned by :func:`char_to_hex` for a character that is not a hex digit."""

MAX_LENGTH = 51
"""Longest string length that :func:`string_length` reports."""

_WORD_SCAN_LIMIT = 30
_NOCASE_INDEX_LIMIT = 30
_CASE_GAP = ord("a") - ord("A")
_U32 = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


def _char_at(text: str, index: int) -> str:
    """Character at ``index``, or NUL past the end of ``text``."""
    return text[index] if index < len(text) else "\0"


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & _U32) - 0x80000000


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def format_thousands(num: int) -> str:
    """Format an unsigned 64-bit integer in decimal with comma separators."""
    if not 0 <= num <= _U64_MAX:
        raise ValueError(f"value out of unsigned 64-bit range: {num}")
    groups = []
    while num >= 1000:
        num, rest = divmod(num, 1000)
        groups.append(f"{rest:03d}")
    groups.append(str(num))
    return ",".join(reversed(groups))


def string_length(text: str) -> int:
    """Length of ``text`` up to its first NUL, never more than :data:`MAX_LENGTH`."""
    return min(len(text.split("\0", 1)[0]), MAX_LENGTH)


def to_integer(text: str) -> int:
    """Convert a signed decimal string to a 32-bit integer.

    Each digit is weighted by its distance from the end of the whole string,
    and scanning stops at the first character that is neither a sign nor a digit.
    """
    length = string_length(text)
    total = 0
    negative = False
    for index, ch in enumerate(text[:length]):
        if ch == "-":
            negative = True
        elif ch == "+":
            negative = False
        elif "0" <= ch <= "9":
            total += (ord(ch) - ord("0")) * 10 ** (length - index - 1)
        else:
            break
    return _to_int32(-total if negative else total)


def integer_to_string(integer: int, digit: int, firstzero: bool) -> str:
    """Render ``integer`` as exactly ``digit`` decimal characters.

    With ``firstzero`` the leading zeros are dropped; a value made only of
    zeros then renders as a single ``"0"``.
    """
    if not 0 <= integer <= _U32:
        raise ValueError(f"value out of unsigned 32-bit range: {integer}")
    if not 0 <= digit <= 10:
        raise ValueError(f"digit count must be between 0 and 10: {digit}")
    divider = 10 ** max(digit - 1, 0)
    chars = []
    for _ in range(digit):
        quotient, integer = divmod(integer, divider)
        chars.append(chr((ord("0") + quotient) & 0xFF))
        divider //= 10
    rendered = "".join(chars)
    if firstzero:
        stripped = rendered.lstrip("0")
        return stripped if stripped or not rendered else "0"
    return rendered


def char_to_hex(ch: str | int) -> int:
    """Value of a hex digit, or :data:`INVALID_HEX` if ``ch`` is not one."""
    code = ord(ch) if isinstance(ch, str) else ch
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    if ord("a") <= code <= ord("f"):
        return 10 + code - ord("a")
    if ord("A") <= code <= ord("F"):
        return 10 + code - ord("A")
    return INVALID_HEX


def string_to_hex(text: str) -> int:
    """Parse a ``0x``-prefixed hex string with an even number of digits."""
    if not text.startswith("0x"):
        raise ValueError(f"hex value must start with '0x': {text!r}")
    digits = text[2:]
    length = string_length(digits)
    if length % 2:
        raise ValueError(f"hex value must have an even number of digits: {text!r}")
    value = 0
    for index, ch in enumerate(digits[:length]):
        value |= char_to_hex(ch) << ((length - 1 - index) * 4)
    return value & _U32


def extract_word(text: str, separator: str) -> tuple[str, str]:
    """Split off the first word of ``text``.

    Leading spaces are skipped, the word ends at ``separator`` or at the end
    of the text, and a run of separators after it is consumed. Returns the
    word and the remainder. Scanning stops at index 30; if that lands inside
    a word, the word runs on to the end of the text.
    """
    if not text:
        return "", ""
    index = len(text) - len(text.lstrip(" "))
    start = index
    while index < len(text) and text[index] != separator:
        index += 1
        if index >= _WORD_SCAN_LIMIT:
            break
    end = index
    while index < len(text) and text[index] == separator:
        index += 1
    if end < len(text) and text[end] != separator:
        word = text[start:]
    else:
        word = text[start:end]
    return word, text[index:]


def compare(first: str, second: str) -> int:
    """Compare ``first`` against ``second`` over the length of ``first``.

    Returns 0 on a match, otherwise the difference of the first mismatching
    character codes as an unsigned 32-bit value.
    """
    for index, ch in enumerate(first.split("\0", 1)[0]):
        other = _char_at(second, index)
        if ch != other:
            return (ord(ch) - ord(other)) & _U32
    return 0


def char_compare_nocase(first: str, second: str) -> int:
    """Compare two characters ignoring the case of letters.

    Returns :data:`SAME` on a match, :data:`DIFF` when either is not a letter,
    or the unsigned 32-bit difference of two unrelated letters.
    """
    if first == second:
        return SAME
    if not (_is_alpha(first) and _is_alpha(second)):
        return DIFF
    high, low = (first, second) if first > second else (second, first)
    if chr(ord(high) - _CASE_GAP) == low:
        return SAME
    return (ord(first) - ord(second)) & _U32


def _compare_nocase_steps(first: str, second: str, steps: int) -> int:
    result = SAME
    for index in range(steps):
        result = char_compare_nocase(_char_at(first, index), _char_at(second, index))
        if result != SAME or index > _NOCASE_INDEX_LIMIT:
            break
    return result


def compare_nocase(first: str, second: str) -> int:
    """Compare two strings ignoring case over the length of ``first``."""
    return _compare_nocase_steps(first, second, len(first.split("\0", 1)[0]))


def compare_nocase_length(first: str, second: str, length: int) -> int:
    """Compare the first ``length`` characters of two strings ignoring case.

    With ``length`` 0 the result is :data:`DIFF` when either string's length
    differs from 0, and :data:`SAME` otherwise.
    """
    if length == 0:
        if string_length(first) != 0 or string_length(second) != 0:
            return DIFF
        return SAME
    return _compare_nocase_steps(first, second, length)