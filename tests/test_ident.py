import io

import pytest

from writeork.endian import Endianness
from writeork.ident import (
    ElfClass,
    ElfData,
    ElfFormatError,
    ElfIdent,
    ElfOsAbi,
    ElfVersion,
    read_class,
    validate_magic,
)


def make_ident(cls=2, data=1, version=1, osabi=0, abiversion=0):
    return b"\x7fELF" + bytes([cls, data, version, osabi, abiversion]) + bytes(7)


def parse_describe(text):
    fields = {}
    for line in text.splitlines():
        key, value = line.split(":", 1)
        fields[key.strip()] = value.strip()
    return fields


def test_describe_fields():
    ident = ElfIdent.from_bytes(make_ident())
    assert parse_describe(ident.describe()) == {
        "Class": "ELF64",
        "Data": "2's complement, little endian",
        "Version": "1 (current)",
        "OS/ABI": "UNIX - System V",
        "ABI Version": "0",
    }


def test_describe_layout():
    text = ElfIdent.from_bytes(make_ident()).describe()
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == 5
    assert all(line.startswith("  ") for line in lines)


def test_magic_hex():
    text = ElfIdent.from_bytes(make_ident()).magic_hex()
    assert text.endswith(" ")
    assert text.split() == ["7f", "45", "4c", "46", "02", "01", "01"] + ["00"] * 9


def test_fields_are_decoded():
    ident = ElfIdent.from_bytes(make_ident(cls=1, data=2, osabi=3, abiversion=5))
    assert ident.elf_class is ElfClass.ELFCLASS32
    assert ident.data_encoding is ElfData.ELFDATA2MSB
    assert ident.version is ElfVersion.EV_CURRENT
    assert ident.osabi is ElfOsAbi.ELFOSABI_GNU
    assert ident.abi_version == 5


def test_from_bytes_takes_only_ident():
    ident = ElfIdent.from_bytes(make_ident() + b"trailing data")
    assert ident.raw == make_ident()


def test_endianness():
    assert ElfIdent.from_bytes(make_ident(data=1)).endianness() is Endianness.LITTLE
    assert ElfIdent.from_bytes(make_ident(data=2)).endianness() is Endianness.BIG


def test_endianness_none_raises():
    with pytest.raises(ElfFormatError):
        ElfIdent.from_bytes(make_ident(data=0)).endianness()


def test_from_bytes_short_raises():
    with pytest.raises(ElfFormatError):
        ElfIdent.from_bytes(make_ident()[:10])


def test_from_bytes_bad_magic_raises():
    with pytest.raises(ElfFormatError):
        ElfIdent.from_bytes(b"\x7fELG" + make_ident()[4:])


def test_validate_magic_rejects():
    with pytest.raises(ElfFormatError):
        validate_magic(b"MZ\x90\x00")


def test_unknown_class_in_describe_and_property():
    ident = ElfIdent.from_bytes(make_ident(cls=7))
    assert parse_describe(ident.describe())["Class"].startswith("Unknown")
    with pytest.raises(ElfFormatError):
        ident.elf_class


def test_read_class():
    stream = io.BytesIO(make_ident(cls=1))
    stream.seek(9)
    assert read_class(stream) is ElfClass.ELFCLASS32


def test_read_class_short_raises():
    with pytest.raises(ElfFormatError):
        read_class(io.BytesIO(b"\x7fEL"))


def test_labels():
    assert ElfClass.ELFCLASS32.label() == "ELF32"
    assert ElfClass.ELFCLASSNONE.label() == "None"
    assert ElfData.ELFDATA2MSB.label() == "2's complement, big endian"
    assert ElfVersion.EV_NONE.label() == "None"
    assert ElfOsAbi.ELFOSABI_STANDALONE.label() == "Standalone (embedded) application"


def test_osabi_aliases():
    assert ElfOsAbi.ELFOSABI_LINUX is ElfOsAbi.ELFOSABI_GNU
    assert ElfOsAbi.ELFOSABI_SYSV is ElfOsAbi.ELFOSABI_NONE
    assert ElfOsAbi.ELFOSABI_LINUX.label() == "GNU ELF"


def test_every_osabi_has_label():
    labels = []
    for member in ElfOsAbi:
        labels.append(member.label())
    assert len(labels) == 14
    assert all(labels)
    assert ElfOsAbi.ELFOSABI_ARM.label() == "ARM"
    assert ElfOsAbi.ELFOSABI_ARM_AEABI.label() == "ARM EABI"