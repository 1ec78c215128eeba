[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "writeork"
version = "0.0.1"
description = "Parse and output information from ELF files, similar to readelf."
requires-python = ">=3.10"
dependencies = []
keywords = ["elf", "readelf", "binary", "executable", "program-headers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
writeork = "writeork.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["writeork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
