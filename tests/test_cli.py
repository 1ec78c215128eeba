import io
import struct

import pytest

from writeork.cli import build_parser, main, render
from writeork.header import ElfHeader
from writeork.ident import ElfFormatError
from writeork.program import ProgramHeader

SEGMENTS = [
    dict(segment_type=6, flags=4, offset=64, vaddr=0x400040, paddr=0x400040,
         filesz=0x1F8, memsz=0x1F8, align=8),
    dict(segment_type=1, flags=5, offset=0, vaddr=0x400000, paddr=0x400000,
         filesz=0x7A4, memsz=0x7A4, align=0x200000),
]


def _ident(elf_class, data_encoding):
    return b"\x7fELF" + bytes([elf_class, data_encoding, 1, 0, 0]) + bytes(7)


def _elf64(order="<", e_type=3, entry=0x401000):
    head = _ident(2, 1 if order == "<" else 2) + struct.pack(
        order + "HHIQQQIHHHHHH", e_type, 62, 1, entry, 64, 0, 0, 64,
        56, len(SEGMENTS), 64, 0, 0,
    )
    body = b"".join(
        struct.pack(order + "IIQQQQQQ", s["segment_type"], s["flags"], s["offset"],
                    s["vaddr"], s["paddr"], s["filesz"], s["memsz"], s["align"])
        for s in SEGMENTS
    )
    return head + body


def _elf32(order=">", elf_class=1):
    head = _ident(elf_class, 1 if order == "<" else 2) + struct.pack(
        order + "HHIIIIIHHHHHH", 2, 20, 1, 0x10000, 52, 0, 0, 52,
        32, len(SEGMENTS), 40, 0, 0,
    )
    body = b"".join(
        struct.pack(order + "IIIIIIII", s["segment_type"], s["offset"], s["vaddr"],
                    s["paddr"], s["filesz"], s["memsz"], s["flags"], s["align"])
        for s in SEGMENTS
    )
    return head + body


def test_parser_short_file_header_flag():
    args = build_parser().parse_args(["-h", "a.out"])
    assert args.file_header is True
    assert args.program_headers is False
    assert args.file == "a.out"


def test_parser_segments_alias():
    args = build_parser().parse_args(["--segments", "a.out"])
    assert args.program_headers is True
    assert build_parser().parse_args(["-l", "a.out"]).program_headers is True


def test_parser_requires_file():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-h"])


def test_render_nothing_requested():
    assert render(io.BytesIO(_elf64())) == ""


def test_render_file_header_64():
    data = _elf64()
    text = render(io.BytesIO(data), file_header=True)
    assert text == ElfHeader.from_bytes(data, 64).format()
    assert "ELF64" in text


def test_render_file_header_32():
    data = _elf32()
    text = render(io.BytesIO(data), file_header=True)
    assert text == ElfHeader.from_bytes(data, 32).format()
    assert "PowerPC" in text


@pytest.mark.parametrize("order", ["<", ">"])
def test_render_program_headers_64(order):
    text = render(io.BytesIO(_elf64(order)), program_headers=True)
    lines = text.split("\n")
    assert lines[0] == ""
    assert lines[1] == "Elf file type is DYN (Shared object file)"
    assert lines[2] == f"Entry point {0x401000:#x}"
    assert lines[3] == f"There are {len(SEGMENTS)} program headers, starting at offset 64"
    assert lines[5] == "Program headers:"
    assert lines[6].startswith("  Type           Offset   VirtAddr")
    rows = lines[7:7 + len(SEGMENTS)]
    assert rows == ["  " + ProgramHeader(**s).format() for s in SEGMENTS]
    assert text.endswith("\n")


def test_render_program_headers_32():
    text = render(io.BytesIO(_elf32()), program_headers=True)
    assert "Elf file type is EXEC (Executable file)\n" in text
    for seg in SEGMENTS:
        assert "  " + ProgramHeader(**seg).format() + "\n" in text


def test_render_both_sections_in_order():
    data = _elf64()
    text = render(io.BytesIO(data), file_header=True, program_headers=True)
    assert text.startswith("ELF Header:\n")
    assert text.index("Program headers:") > text.index("Section header string table index")


def test_render_class_none():
    text = render(io.BytesIO(_elf32(order="<", elf_class=0)), program_headers=True)
    assert text.endswith("This ELF file has ELFCLASSNONE. We can't get its bitness\n")
    assert "Program headers:" not in text


def test_render_bad_magic_raises():
    data = b"MZ\x90\x00" + _elf64()[4:]
    with pytest.raises(ElfFormatError):
        render(io.BytesIO(data), file_header=True)


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "prog.elf"
    data = _elf64()
    path.write_bytes(data)
    assert main(["-h", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == ElfHeader.from_bytes(data, 64).format()


def test_main_missing_file(tmp_path, capsys):
    assert main(["-l", str(tmp_path / "missing.elf")]) == 1
    assert capsys.readouterr().err.startswith("writeork: ")


def test_main_not_elf(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"plain text, not an executable at all" * 3)
    assert main(["-h", str(path)]) == 1
    assert "bad magic" in capsys.readouterr().err