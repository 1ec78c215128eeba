"""The ELF identification bytes (``e_ident``) and their fields."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import BinaryIO, TypeVar

from writeork.endian import Endianness

EI_NIDENT = 16
EI_MAGIC_SIZE = 4
ELF_MAGIC = b"\x7fELF"

EI_CLASS = 4
EI_DATA = 5
EI_VERSION = 6
EI_OSABI = 7
EI_ABIVERSION = 8


class ElfFormatError(ValueError):
    """The data is not a well-formed ELF file."""


class ElfClass(enum.IntEnum):
    ELFCLASSNONE = 0
    ELFCLASS32 = 1
    ELFCLASS64 = 2

    def label(self) -> str:
        return _CLASS_LABELS[self]


_CLASS_LABELS = {
    ElfClass.ELFCLASSNONE: "None",
    ElfClass.ELFCLASS32: "ELF32",
    ElfClass.ELFCLASS64: "ELF64",
}


class ElfData(enum.IntEnum):
    ELFDATANONE = 0
    ELFDATA2LSB = 1
    ELFDATA2MSB = 2

    def label(self) -> str:
        return _DATA_LABELS[self]

    def endianness(self) -> Endianness:
        if self is ElfData.ELFDATA2LSB:
            return Endianness.LITTLE
        if self is ElfData.ELFDATA2MSB:
            return Endianness.BIG
        raise ElfFormatError("Unknown data format")


_DATA_LABELS = {
    ElfData.ELFDATANONE: "None",
    ElfData.ELFDATA2LSB: "2's complement, little endian",
    ElfData.ELFDATA2MSB: "2's complement, big endian",
}


class ElfVersion(enum.IntEnum):
    EV_NONE = 0
    EV_CURRENT = 1

    def label(self) -> str:
        return _VERSION_LABELS[self]


_VERSION_LABELS = {
    ElfVersion.EV_NONE: "None",
    ElfVersion.EV_CURRENT: "1 (current)",
}


class ElfOsAbi(enum.IntEnum):
    ELFOSABI_NONE = 0
    ELFOSABI_SYSV = 0
    ELFOSABI_HPUX = 1
    ELFOSABI_NETBSD = 2
    ELFOSABI_GNU = 3
    ELFOSABI_LINUX = 3
    ELFOSABI_SOLARIS = 6
    ELFOSABI_AIX = 7
    ELFOSABI_IRIX = 8
    ELFOSABI_FREEBSD = 9
    ELFOSABI_TRU64 = 10
    ELFOSABI_MODESTO = 11
    ELFOSABI_OPENBSD = 12
    ELFOSABI_ARM_AEABI = 64
    ELFOSABI_ARM = 97
    ELFOSABI_STANDALONE = 255

    def label(self) -> str:
        return _OSABI_LABELS[self]


_OSABI_LABELS = {
    ElfOsAbi.ELFOSABI_NONE: "UNIX - System V",
    ElfOsAbi.ELFOSABI_HPUX: "HP-UX",
    ElfOsAbi.ELFOSABI_NETBSD: "NetBSD",
    ElfOsAbi.ELFOSABI_GNU: "GNU ELF",
    ElfOsAbi.ELFOSABI_SOLARIS: "Sun Solaris",
    ElfOsAbi.ELFOSABI_AIX: "IBM AIX",
    ElfOsAbi.ELFOSABI_IRIX: "SGI Irix",
    ElfOsAbi.ELFOSABI_FREEBSD: "FreeBSD",
    ElfOsAbi.ELFOSABI_TRU64: "Compaq TRU64 UNIX",
    ElfOsAbi.ELFOSABI_MODESTO: "Novell Modesto",
    ElfOsAbi.ELFOSABI_OPENBSD: "OpenBSD",
    ElfOsAbi.ELFOSABI_ARM_AEABI: "ARM EABI",
    ElfOsAbi.ELFOSABI_ARM: "ARM",
    ElfOsAbi.ELFOSABI_STANDALONE: "Standalone (embedded) application",
}

_E = TypeVar("_E", ElfClass, ElfData, ElfVersion, ElfOsAbi)


def _lookup(enum_cls: type[_E], value: int, what: str) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ElfFormatError(f"unknown ELF {what} {value:#x}") from None


def _label(enum_cls: type[_E], value: int) -> str:
    try:
        return enum_cls(value).label()
    except ValueError:
        return f"Unknown ({value:#x})"


def validate_magic(data: bytes) -> None:
    """Raise ElfFormatError unless ``data`` starts with the ELF magic."""
    if bytes(data[:EI_MAGIC_SIZE]) != ELF_MAGIC:
        raise ElfFormatError("not an ELF file: bad magic")


def read_class(reader: BinaryIO) -> ElfClass:
    """Read the file class byte from the start of a seekable stream."""
    reader.seek(0)
    head = reader.read(EI_MAGIC_SIZE + 1)
    if len(head) < EI_MAGIC_SIZE + 1:
        raise ElfFormatError("file too short to hold an ELF class")
    return _lookup(ElfClass, head[EI_CLASS], "class")


@dataclass(frozen=True)
class ElfIdent:
    """The sixteen identification bytes at the start of an ELF file."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != EI_NIDENT:
            raise ElfFormatError(f"ELF ident must be {EI_NIDENT} bytes, got {len(self.raw)}")
        validate_magic(self.raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> ElfIdent:
        if len(data) < EI_NIDENT:
            raise ElfFormatError("file too short to hold an ELF ident")
        return cls(bytes(data[:EI_NIDENT]))

    @property
    def elf_class(self) -> ElfClass:
        return _lookup(ElfClass, self.raw[EI_CLASS], "class")

    @property
    def data_encoding(self) -> ElfData:
        return _lookup(ElfData, self.raw[EI_DATA], "data encoding")

    @property
    def version(self) -> ElfVersion:
        return _lookup(ElfVersion, self.raw[EI_VERSION], "version")

    @property
    def osabi(self) -> ElfOsAbi:
        return _lookup(ElfOsAbi, self.raw[EI_OSABI], "OS/ABI")

    @property
    def abi_version(self) -> int:
        return self.raw[EI_ABIVERSION]

    def magic_hex(self) -> str:
        """All ident bytes as two-digit hex, each followed by a space."""
        return "".join(f"{b:02x} " for b in self.raw)

    def describe(self) -> str:
        """The named ident fields, one indented line each."""
        return (
            f"  Class:                             {_label(ElfClass, self.raw[EI_CLASS])}\n"
            f"  Data:                              {_label(ElfData, self.raw[EI_DATA])}\n"
            f"  Version:                           {_label(ElfVersion, self.raw[EI_VERSION])}\n"
            f"  OS/ABI:                            {_label(ElfOsAbi, self.raw[EI_OSABI])}\n"
            f"  ABI Version:                       {self.abi_version}\n"
        )

    def endianness(self) -> Endianness:
        return self.data_encoding.endianness()