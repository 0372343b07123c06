"""Game Boy Advance emulator building blocks: memory bus, I/O registers, cartridge, LCD and debugger parser."""

__version__ = "0.1.0"