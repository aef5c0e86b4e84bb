[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "helixkit"
version = "0.1.0"
description = "Small utilities: string helpers, natural sorting, paths, scope guards, circular buffers, averaging windows, endian and binary I/O, printf-style formatting, hex dumps and simple IPv4 sockets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "strings",
    "natural-sort",
    "circular-buffer",
    "binary-io",
    "printf",
    "hexdump",
    "sockets",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["helixkit"]

[tool.pytest.ini_options]
addopts = "-ra"
