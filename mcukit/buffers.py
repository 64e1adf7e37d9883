"""Helpers that copy and fill byte buffers in place."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_room(name: str, buffer: Sequence[int], length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if length > len(buffer):
        raise IndexError(f"{name} holds {len(buffer)} bytes, {length} needed")


def copy_bytes(dst: MutableSequence[int], src: Sequence[int], length: int) -> None:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    _check_room("src", src, length)
    _check_room("dst", dst, length)
    dst[:length] = src[:length]


def copy_until_zero(dst: MutableSequence[int], src: Sequence[int]) -> int:
    """Copy ``src`` into ``dst`` up to its first zero byte; return the count copied."""
    try:
        count = list(src).index(0)
    except ValueError:
        count = len(src)
    _check_room("dst", dst, count)
    dst[:count] = src[:count]
    return count


def fill_bytes(dst: MutableSequence[int], value: int, length: int) -> None:
    """Set the first ``length`` bytes of ``dst`` to ``value``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    _check_room("dst", dst, length)
    dst[:length] = [value] * length