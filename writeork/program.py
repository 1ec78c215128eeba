"""ELF program headers (segments)."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import BinaryIO

from writeork.endian import Endianness
from writeork.header import ElfHeader
from writeork.ident import ElfFormatError


class SegmentType(enum.IntEnum):
    PT_NULL = 0
    PT_LOAD = 1
    PT_DYNAMIC = 2
    PT_INTERP = 3
    PT_NOTE = 4
    PT_SHLIB = 5
    PT_PHDR = 6
    PT_TLS = 7
    PT_NUM = 8
    PT_LOOS = 0x60000000
    PT_GNU_EH_FRAME = 0x6474E550
    PT_GNU_STACK = 0x6474E551
    PT_GNU_RELRO = 0x6474E552
    PT_LOSUNW = 0x6FFFFFFA
    PT_SUNWSTACK = 0x6FFFFFFB
    PT_HISUNW = 0x6FFFFFFF
    PT_LOPROC = 0x70000000


_SEGMENT_NAMES = {
    SegmentType.PT_NULL: "NULL",
    SegmentType.PT_LOAD: "LOAD",
    SegmentType.PT_DYNAMIC: "DYNAMIC",
    SegmentType.PT_INTERP: "INTERP",
    SegmentType.PT_NOTE: "NOTE",
    SegmentType.PT_SHLIB: "SHLIB",
    SegmentType.PT_PHDR: "PHDR",
    SegmentType.PT_TLS: "TLS",
    SegmentType.PT_NUM: "NUM",
    SegmentType.PT_LOOS: "LOOS",
    SegmentType.PT_GNU_EH_FRAME: "EH_FRAME",
    SegmentType.PT_GNU_STACK: "GNU_STACK",
    SegmentType.PT_GNU_RELRO: "GNU_RELRO",
    SegmentType.PT_LOSUNW: "LOSUNW",
    SegmentType.PT_SUNWSTACK: "SUNWBSS",
    SegmentType.PT_HISUNW: "HISUNW",
    SegmentType.PT_LOPROC: "LOPROC",
}

# Field order differs between the two classes; each entry names the
# position of every field in the unpacked tuple.
_FIELDS = ("segment_type", "flags", "offset", "vaddr", "paddr", "filesz", "memsz", "align")
_LAYOUTS = {
    32: ("IIIIIIII", ("segment_type", "offset", "vaddr", "paddr", "filesz", "memsz", "flags", "align")),
    64: ("IIQQQQQQ", _FIELDS),
}

PROGRAM_HEADER_SIZES = {bits: struct.calcsize("<" + fmt) for bits, (fmt, _) in _LAYOUTS.items()}


def segment_type_name(value: int) -> str:
    """Describe a ``p_type`` value."""
    value = int(value)
    return _SEGMENT_NAMES.get(value, f"{value:#x}")


def format_flags(flags: int) -> str:
    """Render segment permission bits as three columns: R, W and E."""
    return "".join(
        letter if flags & bit else " "
        for letter, bit in (("R", 0b100), ("W", 0b010), ("E", 0b001))
    )


@dataclass(frozen=True)
class ProgramHeader:
    """One program header entry."""

    segment_type: int
    flags: int
    offset: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    align: int

    @classmethod
    def from_bytes(cls, data: bytes, bits: int, endianness: Endianness) -> ProgramHeader:
        """Parse one entry of the given bitness from the start of ``data``."""
        try:
            fmt, names = _LAYOUTS[bits]
        except KeyError:
            raise ValueError(f"unsupported ELF bitness: {bits}") from None
        size = PROGRAM_HEADER_SIZES[bits]
        if len(data) < size:
            raise ElfFormatError(
                f"program header too short: {len(data)} of {size} bytes"
            )
        values = dict(zip(names, endianness.unpack(fmt, data)))
        return cls(**values)

    def format(self) -> str:
        """One table row describing this segment."""
        return (
            f"{segment_type_name(self.segment_type):<15}"
            f"{self.offset:#08x} "
            f"{self.vaddr:#018x} "
            f"{self.paddr:#018x} "
            f"{self.filesz:#08x} "
            f"{self.memsz:#08x} "
            f"{format_flags(self.flags):<3} "
            f"{self.align:#x}"
        )


def read_program_headers(header: ElfHeader, reader: BinaryIO) -> list[ProgramHeader]:
    """Read every program header that ``header`` describes from a stream."""
    if header.phnum == 0:
        return []
    entry_size = header.phentsize
    needed = PROGRAM_HEADER_SIZES[header.bits]
    if entry_size < needed:
        raise ElfFormatError(
            f"program header entry size {entry_size} is smaller than {needed}"
        )
    total = entry_size * header.phnum
    reader.seek(header.phoff)
    data = reader.read(total)
    if len(data) < total:
        raise ElfFormatError(
            f"file too short for program headers: {len(data)} of {total} bytes"
        )
    endianness = header.endianness
    return [
        ProgramHeader.from_bytes(data[start:start + entry_size], header.bits, endianness)
        for start in range(0, total, entry_size)
    ]