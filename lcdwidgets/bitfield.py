"""Helpers for reading and writing bit fields in integers."""

from __future__ import annotations

__all__ = [
    "bit",
    "flip",
    "bitmask",
    "mask",
    "prep",
    "get_field",
    "set_field",
    "bit_get",
    "single_bit_get",
]


def bit(n: int) -> int:
    """The value with only bit ``n`` set."""
    if n < 0:
        raise ValueError(f"bit index must not be negative: {n}")
    return 1 << n


def flip(y: int, mask: int) -> int:
    """``y`` with the bits of ``mask`` inverted."""
    return y ^ mask


def bitmask(length: int) -> int:
    """A mask of ``length`` low bits."""
    return bit(length) - 1


def mask(start: int, length: int) -> int:
    """A mask of ``length`` bits starting at bit ``start``."""
    if start < 0:
        raise ValueError(f"start bit must not be negative: {start}")
    return bitmask(length) << start


def prep(x: int, start: int, length: int) -> int:
    """The low ``length`` bits of ``x`` moved to bit ``start``."""
    if start < 0:
        raise ValueError(f"start bit must not be negative: {start}")
    return (x & bitmask(length)) << start


def get_field(y: int, start: int, length: int) -> int:
    """Extract ``length`` bits of ``y`` starting at bit ``start``."""
    if start < 0:
        raise ValueError(f"start bit must not be negative: {start}")
    return (y >> start) & bitmask(length)


def set_field(to: int, value: int, start: int, length: int) -> int:
    """``to`` with ``length`` bits at ``start`` replaced by the low bits of ``value``."""
    return (to & ~mask(start, length)) | prep(value, start, length)


def bit_get(y: int, mask: int) -> int:
    """The bits of ``y`` selected by ``mask``."""
    return y & mask


def single_bit_get(y: int, i: int) -> int:
    """Bit ``i`` of ``y``, left in place."""
    return bit_get(y, bit(i))