"""ELF header machine and object file type values."""

from __future__ import annotations

import enum


class ElfMachine(enum.IntEnum):
    EM_NONE = 0
    EM_M32 = 1
    EM_SPARC = 2
    EM_386 = 3
    EM_68K = 4
    EM_88K = 5
    EM_860 = 6
    EM_MIPS = 7
    EM_S370 = 8
    EM_MIPS_RS3_LE = 9

    EM_PARISC = 15

    EM_VPP500 = 17
    EM_SPARC32PLUS = 18
    EM_960 = 19
    EM_PPC = 20
    EM_PPC64 = 21
    EM_S390 = 22

    EM_V800 = 36
    EM_FR20 = 37
    EM_RH32 = 38
    EM_RCE = 39
    EM_ARM = 40
    EM_FAKE_ALPHA = 41
    EM_SH = 42
    EM_SPARCV9 = 43
    EM_TRICORE = 44
    EM_ARC = 45
    EM_H8_300 = 46
    EM_H8_300H = 47
    EM_H8S = 48
    EM_H8_500 = 49
    EM_IA_64 = 50
    EM_MIPS_X = 51
    EM_COLDFIRE = 52
    EM_68HC12 = 53
    EM_MMA = 54
    EM_PCP = 55
    EM_NCPU = 56
    EM_NDR1 = 57
    EM_STARCORE = 58
    EM_ME16 = 59
    EM_ST100 = 60
    EM_TINYJ = 61
    EM_X86_64 = 62
    EM_PDSP = 63

    EM_FX66 = 66
    EM_ST9PLUS = 67
    EM_ST7 = 68
    EM_68HC16 = 69
    EM_68HC11 = 70
    EM_68HC08 = 71
    EM_68HC05 = 72
    EM_SVX = 73
    EM_ST19 = 74
    EM_VAX = 75
    EM_CRIS = 76
    EM_JAVELIN = 77
    EM_FIREPATH = 78
    EM_ZSP = 79
    EM_MMIX = 80
    EM_HUANY = 81
    EM_PRISM = 82
    EM_AVR = 83
    EM_FR30 = 84
    EM_D10V = 85
    EM_D30V = 86
    EM_V850 = 87
    EM_M32R = 88
    EM_MN10300 = 89
    EM_MN10200 = 90
    EM_PJ = 91
    EM_OPENRISC = 92
    EM_ARC_A5 = 93
    EM_XTENSA = 94
    EM_AARCH64 = 95
    EM_TILEPRO = 96
    EM_MICROBLAZE = 97
    EM_TILEGX = 98
    EM_NUM = 99

    EM_ALPHA = 0x9026


_MACHINE_NAMES = {
    ElfMachine.EM_NONE: "No machine",
    ElfMachine.EM_M32: "AT&T WE 32100",
    ElfMachine.EM_SPARC: "SUN SPARC",
    ElfMachine.EM_386: "Intel 80386",
    ElfMachine.EM_68K: "Motorola m68k family",
    ElfMachine.EM_88K: "Motorola m88k family",
    ElfMachine.EM_860: "Intel 80860",
    ElfMachine.EM_MIPS: "MIPS R3000 big-endian",
    ElfMachine.EM_S370: "IBM System/370",
    ElfMachine.EM_MIPS_RS3_LE: "MIPS R3000 little-endian",
    ElfMachine.EM_PARISC: "HPPA",
    ElfMachine.EM_VPP500: "Fujitsu VPP500",
    ElfMachine.EM_SPARC32PLUS: 'Sun\'s "v8plus"',
    ElfMachine.EM_960: "Intel 80960",
    ElfMachine.EM_PPC: "PowerPC",
    ElfMachine.EM_PPC64: "PowerPC 64-bit",
    ElfMachine.EM_S390: "IBM S390",
    ElfMachine.EM_V800: "NEC V800 series",
    ElfMachine.EM_FR20: "Fujitsu FR20",
    ElfMachine.EM_RH32: "TRW RH-32",
    ElfMachine.EM_RCE: "Motorola RCE",
    ElfMachine.EM_ARM: "ARM",
    ElfMachine.EM_FAKE_ALPHA: "Digital Alpha",
    ElfMachine.EM_SH: "Hitachi SH",
    ElfMachine.EM_SPARCV9: "SPARC v9 64-bit",
    ElfMachine.EM_TRICORE: "Siemens Tricore",
    ElfMachine.EM_ARC: "Argonaut RISC Core",
    ElfMachine.EM_H8_300: "Hitachi H8/300",
    ElfMachine.EM_H8_300H: "Hitachi H8/300H",
    ElfMachine.EM_H8S: "Hitachi H8S",
    ElfMachine.EM_H8_500: "Hitachi H8/500",
    ElfMachine.EM_IA_64: "Intel Merced",
    ElfMachine.EM_MIPS_X: "Stanford MIPS-X",
    ElfMachine.EM_COLDFIRE: "Motorola Coldfire",
    ElfMachine.EM_68HC12: "Motorola M68HC12",
    ElfMachine.EM_MMA: "Fujitsu MMA Multimedia Accelerato",
    ElfMachine.EM_PCP: "Siemens PCP",
    ElfMachine.EM_NCPU: "Sony nCPU embeeded RISC",
    ElfMachine.EM_NDR1: "Denso NDR1 microprocessor",
    ElfMachine.EM_STARCORE: "Motorola Start*Core processor",
    ElfMachine.EM_ME16: "Toyota ME16 processor",
    ElfMachine.EM_ST100: "STMicroelectronic ST100 processor",
    ElfMachine.EM_TINYJ: "Advanced Logic Corp. Tinyj emb.fa",
    ElfMachine.EM_X86_64: "Advanced Micro Devices x86-64",
    ElfMachine.EM_PDSP: "Sony DSP Processor",
    ElfMachine.EM_FX66: "Siemens FX66 microcontroller",
    ElfMachine.EM_ST9PLUS: "STMicroelectronics ST9+ 8/16 mc",
    ElfMachine.EM_ST7: "STmicroelectronics ST7 8 bit mc",
    ElfMachine.EM_68HC16: "Motorola MC68HC16 microcontroller",
    ElfMachine.EM_68HC11: "Motorola MC68HC11 microcontroller",
    ElfMachine.EM_68HC08: "Motorola MC68HC08 microcontroller",
    ElfMachine.EM_68HC05: "Motorola MC68HC05 microcontroller",
    ElfMachine.EM_SVX: "Silicon Graphics SVx",
    ElfMachine.EM_ST19: "STMicroelectronics ST19 8 bit mc",
    ElfMachine.EM_VAX: "Digital VAX",
    ElfMachine.EM_CRIS: "Axis Communications 32-bit embedded processor",
    ElfMachine.EM_JAVELIN: "Infineon Technologies 32-bit embedded processor",
    ElfMachine.EM_FIREPATH: "Element 14 64-bit DSP Processor",
    ElfMachine.EM_ZSP: "LSI Logic 16-bit DSP Processor",
    ElfMachine.EM_MMIX: "Donald Knuth's educational 64-bit processor",
    ElfMachine.EM_HUANY: "Harvard University machine-independent object files",
    ElfMachine.EM_PRISM: "SiTera Prism",
    ElfMachine.EM_AVR: "Atmel AVR 8-bit microcontroller",
    ElfMachine.EM_FR30: "Fujitsu FR30",
    ElfMachine.EM_D10V: "Mitsubishi D10V",
    ElfMachine.EM_D30V: "Mitsubishi D30V",
    ElfMachine.EM_V850: "NEC v850",
    ElfMachine.EM_M32R: "Mitsubishi M32R",
    ElfMachine.EM_MN10300: "Matsushita MN10300",
    ElfMachine.EM_MN10200: "Matsushita MN10200",
    ElfMachine.EM_PJ: "picoJava",
    ElfMachine.EM_OPENRISC: "OpenRISC 32-bit embedded processor",
    ElfMachine.EM_ARC_A5: "ARC Cores Tangent-A5",
    ElfMachine.EM_XTENSA: "Tensilica Xtensa Architecture",
    ElfMachine.EM_AARCH64: "ARM AARCH64",
    ElfMachine.EM_TILEPRO: "Tilera TILEPro",
    ElfMachine.EM_MICROBLAZE: "Xilinx MicroBlaze",
    ElfMachine.EM_TILEGX: "Tilera TILE-Gx",
    ElfMachine.EM_ALPHA: "Alpha",
}


class ElfType(enum.IntEnum):
    ET_NONE = 0
    ET_REL = 1
    ET_EXEC = 2
    ET_DYN = 3
    ET_CORE = 4
    ET_LOPROC = 0xFF00
    ET_HIPROC = 0xFFFF


_TYPE_NAMES = {
    ElfType.ET_NONE: "NONE (No file type)",
    ElfType.ET_REL: "REL (Relocatable file)",
    ElfType.ET_EXEC: "EXEC (Executable file)",
    ElfType.ET_DYN: "DYN (Shared object file)",
    ElfType.ET_CORE: "CORE (Core file)",
}


def machine_name(value: int) -> str:
    """Describe an ``e_machine`` value."""
    return _MACHINE_NAMES.get(int(value), "Unknown machine")


def type_name(value: int) -> str:
    """Describe an ``e_type`` value."""
    value = int(value)
    name = _TYPE_NAMES.get(value)
    if name is not None:
        return name
    if ElfType.ET_LOPROC <= value <= ElfType.ET_HIPROC:
        return "Processor-specific"
    return "Unknown file type"