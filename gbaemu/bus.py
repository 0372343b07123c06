"""Memory regions with per-access-width wait states."""

import enum
from dataclasses import dataclass


class MemoryAccessWidth(enum.Enum):
    """Width of a bus access in bits."""

    BYTE = 8
    HALFWORD = 16
    WORD = 32


@dataclass(frozen=True)
class WaitState:
    """Cycles taken by an 8, 16 and 32 bit access."""

    access8: int = 1
    access16: int = 1
    access32: int = 1

    def cycles(self, width: MemoryAccessWidth) -> int:
        """Return the cycles taken by an access of the given width."""
        return {
            MemoryAccessWidth.BYTE: self.access8,
            MemoryAccessWidth.HALFWORD: self.access16,
            MemoryAccessWidth.WORD: self.access32,
        }[width]


class BoxedMemory:
    """A fixed-size little-endian memory region."""

    def __init__(self, data, wait_state: WaitState | None = None) -> None:
        self._data = bytearray(data)
        self.wait_state = wait_state if wait_state is not None else WaitState()

    def __len__(self) -> int:
        return len(self._data)

    def _span(self, addr: int, size: int) -> slice:
        if addr < 0 or addr + size > len(self._data):
            raise IndexError(f"access of {size} bytes at {addr:#x} out of range")
        return slice(addr, addr + size)

    def _read(self, addr: int, size: int) -> int:
        return int.from_bytes(self._data[self._span(addr, size)], "little")

    def _write(self, addr: int, size: int, value: int) -> None:
        mask = (1 << (8 * size)) - 1
        self._data[self._span(addr, size)] = (value & mask).to_bytes(size, "little")

    def read_32(self, addr: int) -> int:
        return self._read(addr, 4)

    def read_16(self, addr: int) -> int:
        return self._read(addr, 2)

    def read_8(self, addr: int) -> int:
        return self._read(addr, 1)

    def write_32(self, addr: int, value: int) -> None:
        self._write(addr, 4, value)

    def write_16(self, addr: int, value: int) -> None:
        self._write(addr, 2, value)

    def write_8(self, addr: int, value: int) -> None:
        self._write(addr, 1, value)

    def get_bytes(self, addr: int) -> memoryview:
        """Return a writable view of the region from addr to its end."""
        if addr < 0 or addr > len(self._data):
            raise IndexError(f"address {addr:#x} out of range")
        return memoryview(self._data)[addr:]

    def get_cycles(self, addr: int, width: MemoryAccessWidth) -> int:
        return self.wait_state.cycles(width)


class DummyBus:
    """Stands in for unmapped memory: reads give zero, writes are dropped.

    Counts the accesses it absorbs, which helps spot stray addresses.
    """

    def __init__(self) -> None:
        self._data = bytearray(4)
        self.wait_state = WaitState()
        self.unmapped_reads = 0
        self.dropped_writes = 0

    def _read(self) -> int:
        self.unmapped_reads += 1
        return 0

    def _drop(self) -> None:
        self.dropped_writes += 1

    def read_32(self, addr: int) -> int:
        return self._read()

    def read_16(self, addr: int) -> int:
        return self._read()

    def read_8(self, addr: int) -> int:
        return self._read()

    def write_32(self, addr: int, value: int) -> None:
        self._drop()

    def write_16(self, addr: int, value: int) -> None:
        self._drop()

    def write_8(self, addr: int, value: int) -> None:
        self._drop()

    def get_bytes(self, addr: int) -> memoryview:
        return memoryview(self._data)

    def get_cycles(self, addr: int, width: MemoryAccessWidth) -> int:
        return self.wait_state.cycles(width)