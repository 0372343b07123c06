"""DMA channels and their control register fields."""

import enum
from dataclasses import dataclass

from .interrupt import Interrupt
from .ioregs import IO_BASE


class DmaAddrControl(enum.IntEnum):
    """How a DMA address changes after each unit is moved."""

    INCREMENT = 0
    DECREMENT = 1
    FIXED = 2
    INCREMENT_RELOAD_PROHIBITED = 3


class DmaTransferType(enum.Enum):
    """Size of each unit moved by a transfer."""

    XFER16BIT = 16
    XFER32BIT = 32


class DmaStartTiming(enum.IntEnum):
    """When a DMA transfer begins."""

    IMMEDIATELY = 0
    VBLANK = 1
    HBLANK = 2
    SPECIAL = 3


@dataclass(frozen=True)
class DmaChannel:
    """A DMA channel, described by the absolute addresses of its registers."""

    src_ioreg: int
    dst_ioreg: int
    wc_ioreg: int

    def src_addr(self, sysbus) -> int:
        return sysbus.ioregs.read_32(self.src_ioreg - IO_BASE)

    def dst_addr(self, sysbus) -> int:
        return sysbus.ioregs.read_32(self.dst_ioreg - IO_BASE)

    def word_count(self, sysbus) -> int:
        return sysbus.ioregs.read_reg(self.wc_ioreg)

    def step(self, cycles: int, sysbus) -> tuple[int, Interrupt | None]:
        """Advance the channel; transfers are not performed, so it takes no cycles."""
        return 0, None