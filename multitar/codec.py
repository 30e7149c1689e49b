from __future__ import annotations

from .constants import BLOCK_SIZE, NUL
from .errors import OctalOverflowError


def to_octal_padded(value: int, width: int) -> str:
    """Render ``value`` as base-8 text left-padded with '0' to ``width``."""
    if value < 0:
        raise OctalOverflowError(f"Negative value {value} cannot be encoded as octal")
    octal = format(value, "o")
    if len(octal) > width:
        raise OctalOverflowError(f"Value {value} needs {len(octal)} octal digits; field holds {width}")
    return octal.rjust(width, "0")


def null_padding(count: int) -> str:
    """Return ``count - 1`` NUL characters.

    The count is one past the number of characters produced; callers
    wanting N padding characters ask for N + 1.
    """
    return NUL * max(count - 1, 0)


def block_pad(length: int) -> int:
    """Smallest multiple of BLOCK_SIZE not smaller than ``length`` (at least one block)."""
    blocks = max(1, -(-length // BLOCK_SIZE))
    return blocks * BLOCK_SIZE


def pad_data(data: bytes) -> bytes:
    total = block_pad(len(data))
    return data + null_padding(total - len(data) + 1).encode("ascii")
