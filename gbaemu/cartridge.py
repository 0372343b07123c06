"""Game Pak ROM image and its header."""

from dataclasses import dataclass
from os import PathLike

from .bus import BoxedMemory, MemoryAccessWidth, WaitState
from .util import read_bin_file

_TITLE = slice(0xA0, 0xAC)
_GAME_CODE = slice(0xAC, 0xB0)
_MAKER_CODE = slice(0xB0, 0xB2)
_SOFTWARE_VERSION = 0xBC
_CHECKSUM = 0xBD


@dataclass(frozen=True)
class CartridgeHeader:
    """The identifying fields of the 192-byte cartridge header.

    Layout (offsets from the start of ROM):
    0A0h 12 bytes game title, 0ACh 4 bytes game code, 0B0h 2 bytes maker
    code, 0BCh software version, 0BDh complement check.
    """

    game_title: str
    game_code: str
    maker_code: str
    software_version: int
    checksum: int

    @classmethod
    def parse(cls, data) -> "CartridgeHeader":
        """Read the header from the start of a ROM image.

        Raises UnicodeDecodeError if a text field is not valid UTF-8 and
        IndexError if the image is too short to hold the header.
        """
        raw = bytes(data)
        if len(raw) <= _CHECKSUM:
            raise IndexError(f"ROM image of {len(raw)} bytes is too short for a header")
        return cls(
            game_title=raw[_TITLE].decode("utf-8"),
            game_code=raw[_GAME_CODE].decode("utf-8"),
            maker_code=raw[_MAKER_CODE].decode("utf-8"),
            software_version=raw[_SOFTWARE_VERSION],
            checksum=raw[_CHECKSUM],
        )


class Cartridge:
    """A Game Pak: ROM contents mapped on the bus, padded to at least 4 MiB."""

    MIN_SIZE = 4 * 1024 * 1024
    WAIT_STATE = WaitState(5, 5, 8)

    def __init__(self, header: CartridgeHeader, memory: BoxedMemory) -> None:
        self.header = header
        self._memory = memory

    @classmethod
    def from_bytes(cls, data) -> "Cartridge":
        """Build a cartridge from a ROM image held in memory."""
        rom = bytearray(data)
        if len(rom) < cls.MIN_SIZE:
            rom.extend(bytes(cls.MIN_SIZE - len(rom)))
        header = CartridgeHeader.parse(rom)
        return cls(header, BoxedMemory(rom, cls.WAIT_STATE))

    @classmethod
    def load(cls, path: "str | PathLike[str]") -> "Cartridge":
        """Read a ROM image from a file."""
        return cls.from_bytes(read_bin_file(path))

    def __len__(self) -> int:
        return len(self._memory)

    def read_32(self, addr: int) -> int:
        return self._memory.read_32(addr)

    def read_16(self, addr: int) -> int:
        return self._memory.read_16(addr)

    def read_8(self, addr: int) -> int:
        return self._memory.read_8(addr)

    def write_32(self, addr: int, value: int) -> None:
        self._memory.write_32(addr, value)

    def write_16(self, addr: int, value: int) -> None:
        self._memory.write_16(addr, value)

    def write_8(self, addr: int, value: int) -> None:
        self._memory.write_8(addr, value)

    def get_bytes(self, addr: int) -> memoryview:
        """Return a writable view of ROM from addr to its end."""
        return self._memory.get_bytes(addr)

    def get_cycles(self, addr: int, width: MemoryAccessWidth) -> int:
        return self._memory.get_cycles(addr, width)

    def __repr__(self) -> str:
        return f"Cartridge({self.header!r}, size={len(self)})"