[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbaemu"
version = "0.1.0"
description = "Game Boy Advance emulator building blocks: memory bus, I/O registers, cartridge loading, LCD timing and a debugger expression parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["gba", "game boy advance", "emulator", "memory bus", "debugger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbaemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
