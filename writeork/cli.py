"""Command-line interface: print information from an ELF file."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Sequence

from writeork.header import read_elf32_header, read_elf64_header
from writeork.ident import ElfClass
from writeork.machine import type_name
from writeork.program import read_program_headers

_VERSION = "0.0.1"

_COLUMNS = (
    "  "
    "Type           "
    "Offset   "
    "VirtAddr           "
    "PhysAddr           "
    "FileSiz  "
    "MemSiz   "
    "Flg "
    "Align"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="writeork",
        description=(
            "Parse and output information from ELF files."
            " Similar to readelf, but is not fully compatible."
        ),
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-h", "--file-header", action="store_true", help="Display ELF file header"
    )
    parser.add_argument(
        "-l", "--program-headers", action="store_true",
        help="Display the program headers",
    )
    parser.add_argument(
        "--segments", dest="program_headers", action="store_true",
        help="An alias for --program-headers",
    )
    parser.add_argument("file", metavar="FILE", help="ELF file to parse")
    return parser


def render(reader: BinaryIO, file_header: bool = False, program_headers: bool = False) -> str:
    """Build the report for an ELF stream with the requested sections."""
    header32 = read_elf32_header(reader)
    elf_class = header32.ident.elf_class
    parts: list[str] = []

    if file_header:
        header = header32 if elf_class is ElfClass.ELFCLASS32 else read_elf64_header(reader)
        parts.append(header.format())

    if program_headers:
        header = read_elf64_header(reader) if elf_class is ElfClass.ELFCLASS64 else header32
        parts.append(
            "\n"
            f"Elf file type is {type_name(header.file_type)}\n"
            f"Entry point {header.entry:#x}\n"
            f"There are {header.phnum} program headers, starting at offset {header.phoff}\n"
            "\n"
        )
        if elf_class is ElfClass.ELFCLASSNONE:
            parts.append("This ELF file has ELFCLASSNONE. We can't get its bitness\n")
        else:
            parts.append("Program headers:\n")
            parts.append(_COLUMNS + "\n")
            parts.extend(
                f"  {phdr.format()}\n" for phdr in read_program_headers(header, reader)
            )

    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        with open(args.file, "rb") as stream:
            report = render(stream, args.file_header, args.program_headers)
    except (OSError, ValueError) as exc:
        print(f"writeork: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())