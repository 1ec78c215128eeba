"""The ELF file header, in its 32-bit and 64-bit variants."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from writeork.endian import Endianness
from writeork.ident import EI_NIDENT, ElfFormatError, ElfIdent
from writeork.machine import machine_name, type_name

# Fields after e_ident: type, machine, version, entry, phoff, shoff, flags,
# ehsize, phentsize, phnum, shentsize, shnum, shstrndx.
_LAYOUTS = {
    32: "HHIIIIIHHHHHH",
    64: "HHIQQQIHHHHHH",
}

HEADER_SIZES = {bits: EI_NIDENT + struct.calcsize("<" + fmt) for bits, fmt in _LAYOUTS.items()}


def _layout(bits: int) -> str:
    try:
        return _LAYOUTS[bits]
    except KeyError:
        raise ValueError(f"unsupported ELF bitness: {bits}") from None


@dataclass(frozen=True)
class ElfHeader:
    """An ELF file header with its values in their numeric meaning."""

    bits: int
    ident: ElfIdent
    file_type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    @classmethod
    def from_bytes(cls, data: bytes, bits: int) -> ElfHeader:
        """Parse a header of the given bitness from the start of ``data``."""
        layout = _layout(bits)
        size = HEADER_SIZES[bits]
        if len(data) < size:
            raise ElfFormatError(
                f"file too short for an ELF{bits} header: {len(data)} of {size} bytes"
            )
        ident = ElfIdent.from_bytes(data)
        values = ident.endianness().unpack(layout, data, EI_NIDENT)
        return cls(bits, ident, *values)

    @property
    def endianness(self) -> Endianness:
        return self.ident.endianness()

    def format(self) -> str:
        """The header as a readable multi-line report."""
        return (
            "ELF Header:\n"
            f"  Magic:   {self.ident.magic_hex()}\n"
            f"{self.ident.describe()}"
            f"  Type:                              {type_name(self.file_type)}\n"
            f"  Machine:                           {machine_name(self.machine)}\n"
            f"  Version:                           {self.version:#x}\n"
            f"  Entry point address:               {self.entry:#x}\n"
            f"  Start of program headers:          {self.phoff} (bytes into file)\n"
            f"  Start of section headers:          {self.shoff} (bytes into file)\n"
            f"  Flags:                             {self.flags:#x}\n"
            f"  Size of this header:               {self.ehsize} (bytes)\n"
            f"  Size of program headers:           {self.phentsize} (bytes)\n"
            f"  Number of program headers:         {self.phnum}\n"
            f"  Size of section headers:           {self.shentsize} (bytes)\n"
            f"  Number of section headers:         {self.shnum}\n"
            f"  Section header string table index: {self.shstrndx}\n"
        )


def read_header(reader: BinaryIO, bits: int) -> ElfHeader:
    """Read an ELF header of the given bitness from the start of a stream."""
    size = HEADER_SIZES.get(bits)
    if size is None:
        raise ValueError(f"unsupported ELF bitness: {bits}")
    reader.seek(0)
    return ElfHeader.from_bytes(reader.read(size), bits)


def read_elf32_header(reader: BinaryIO) -> ElfHeader:
    return read_header(reader, 32)


def read_elf64_header(reader: BinaryIO) -> ElfHeader:
    return read_header(reader, 64)