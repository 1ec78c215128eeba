"""Byte-order handling for values stored in ELF files."""

from __future__ import annotations

import enum
import struct
import sys

_SWAPPABLE_SIZES = (2, 4, 8)


def swap_bytes(value: int, size: int) -> int:
    """Return ``value`` with the order of its ``size`` bytes reversed.

    Only 16-, 32- and 64-bit quantities are supported.
    """
    if size not in _SWAPPABLE_SIZES:
        raise ValueError(f"cannot swap a value of {size} bytes")
    try:
        raw = value.to_bytes(size, "little", signed=False)
    except OverflowError as exc:
        raise ValueError(f"value {value:#x} does not fit in {size} bytes") from exc
    return int.from_bytes(raw, "big", signed=False)


class Endianness(enum.Enum):
    """Byte order of the data in a file."""

    LITTLE = "little"
    BIG = "big"

    @property
    def struct_prefix(self) -> str:
        return "<" if self is Endianness.LITTLE else ">"

    def unpack(self, fmt: str, data: bytes, offset: int = 0) -> tuple:
        """Unpack ``fmt`` from ``data`` at ``offset`` in this byte order."""
        try:
            return struct.unpack_from(self.struct_prefix + fmt, data, offset)
        except struct.error as exc:
            raise ValueError(f"cannot unpack {fmt!r} at offset {offset}: {exc}") from exc

    def to_host(self, value: int, size: int) -> int:
        """Convert a value loaded in host byte order to its meaning in this order."""
        if self.value == sys.byteorder:
            if size not in _SWAPPABLE_SIZES:
                raise ValueError(f"cannot convert a value of {size} bytes")
            return value
        return swap_bytes(value, size)