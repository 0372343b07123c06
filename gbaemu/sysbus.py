"""The system bus: routes addresses to the memory regions behind them."""

from .bus import BoxedMemory, DummyBus, MemoryAccessWidth, WaitState
from .cartridge import Cartridge
from .ioregs import IoRegs

VIDEO_RAM_SIZE = 128 * 1024
WORK_RAM_SIZE = 256 * 1024
INTERNAL_RAM_SIZE = 32 * 1024
PALETTE_RAM_SIZE = 1 * 1024
OAM_SIZE = 1 * 1024

_OFFSET_MASK = 0xFF_FFFF


class SysBus:
    """All memory regions of the machine behind one address space."""

    def __init__(self, bios_rom, gamepak: Cartridge) -> None:
        self.bios = BoxedMemory(bios_rom)
        self.onboard_work_ram = BoxedMemory(bytes(WORK_RAM_SIZE), WaitState(3, 3, 6))
        self.internal_work_ram = BoxedMemory(bytes(INTERNAL_RAM_SIZE))
        self.ioregs = IoRegs()
        self.palette_ram = BoxedMemory(bytes(PALETTE_RAM_SIZE), WaitState(1, 1, 2))
        self.vram = BoxedMemory(bytes(VIDEO_RAM_SIZE), WaitState(1, 1, 2))
        self.oam = BoxedMemory(bytes(OAM_SIZE))
        self.gamepak = gamepak
        self.dummy = DummyBus()
        self._regions = (
            (0x0000_0000, 0x0000_3FFF, self.bios),
            (0x0200_0000, 0x0203_FFFF, self.onboard_work_ram),
            (0x0300_0000, 0x0300_7FFF, self.internal_work_ram),
            (0x0400_0000, 0x0400_03FE, self.ioregs),
            (0x0500_0000, 0x0500_03FF, self.palette_ram),
            (0x0600_0000, 0x0601_7FFF, self.vram),
            (0x0700_0000, 0x0700_03FF, self.oam),
            (0x0800_0000, 0x09FF_FFFF, self.gamepak),
        )

    def _map(self, addr: int):
        for start, end, region in self._regions:
            if start <= addr <= end:
                return region
        return self.dummy

    def read_32(self, addr: int) -> int:
        return self._map(addr).read_32(addr & _OFFSET_MASK)

    def read_16(self, addr: int) -> int:
        return self._map(addr).read_16(addr & _OFFSET_MASK)

    def read_8(self, addr: int) -> int:
        return self._map(addr).read_8(addr & _OFFSET_MASK)

    def write_32(self, addr: int, value: int) -> None:
        self._map(addr).write_32(addr & _OFFSET_MASK, value)

    def write_16(self, addr: int, value: int) -> None:
        self._map(addr).write_16(addr & _OFFSET_MASK, value)

    def write_8(self, addr: int, value: int) -> None:
        self._map(addr).write_8(addr & _OFFSET_MASK, value)

    def get_bytes(self, addr: int) -> memoryview:
        """Return a view of the region holding addr, from addr to the region's end."""
        return self._map(addr).get_bytes(addr & _OFFSET_MASK)

    def get_cycles(self, addr: int, width: MemoryAccessWidth) -> int:
        return self._map(addr).get_cycles(addr & _OFFSET_MASK, width)