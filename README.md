# writeork

Parse and print the file header and program headers of ELF files. The
output looks like the output of `readelf`, but it is not fully compatible.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
writeork [--help] [--version] [-h] [-l] [--segments] FILE
```

- `-h`, `--file-header`: show the ELF file header (magic bytes, class, data
  encoding, ident version, OS/ABI, ABI version, type, machine, version,
  entry point, header offsets, flags, sizes and counts).
- `-l`, `--program-headers`: show the file type, entry point and the
  program headers (segments) with their type, offset, virtual and physical
  addresses, file and memory sizes, flags (`R`, `W`, `E`) and alignment.
- `--segments`: another name for `--program-headers`.
- `--version`: print the version and exit.

Because `-h` selects the file header, use `--help` to see usage.

If the file cannot be opened or is not a well-formed ELF file, a message
starting with `writeork:` is written to standard error and the exit status
is 1.

Example:

```
writeork -h -l /bin/true
```

## Library use

```python
from writeork.header import read_header
from writeork.program import read_program_headers

with open("/bin/true", "rb") as f:
    header = read_header(f, 64)
    print(header.format())
    for phdr in read_program_headers(header, f):
        print(phdr.format())
```

The modules:

- `writeork.header`: `ElfHeader` (with `from_bytes(data, bits)`,
  `format()` and an `endianness` property), `read_header(reader, bits)`,
  `read_elf32_header(reader)` and `read_elf64_header(reader)`.
- `writeork.program`: `ProgramHeader` (with `from_bytes(data, bits,
  endianness)` and `format()`), `read_program_headers(header, reader)`,
  `SegmentType`, `segment_type_name(value)` and `format_flags(flags)`.
- `writeork.ident`: `ElfIdent` for the sixteen identification bytes, the
  enums `ElfClass`, `ElfData`, `ElfVersion` and `ElfOsAbi`,
  `validate_magic(data)` and `read_class(reader)`, which reads the class
  byte on its own so the right header width can be picked first.
- `writeork.machine`: the `ElfMachine` and `ElfType` enums with
  `machine_name(value)` and `type_name(value)`.
- `writeork.endian`: `Endianness` and `swap_bytes(value, size)`.
- `writeork.cli`: `build_parser()`, `render(reader, file_header,
  program_headers)`, which returns the report as a string, and `main(argv)`.

Data without the `\x7fELF` magic, files too short for the headers they
declare, and unknown ident values raise `writeork.ident.ElfFormatError`, a
subclass of `ValueError`.

## What it does not do

writeork reads only the ELF file header and the program headers. It does
not read section headers, symbol tables, relocations, dynamic entries or
notes, and it does not disassemble code.