[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbcart"
version = "0.1.0"
description = "Game Boy cartridge memory bank controllers (MBC1, MBC2, MBC3, MBC5) for emulators"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "mbc", "cartridge", "bank-switching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbcart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
