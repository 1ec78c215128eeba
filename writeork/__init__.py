"""Read ELF file headers and program headers and print them in readelf style."""

__version__ = "0.0.1"