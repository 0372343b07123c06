import pytest

from gbaemu.cartridge import Cartridge
from gbaemu.dma import DmaAddrControl, DmaChannel, DmaStartTiming, DmaTransferType
from gbaemu.ioregs import (
    IO_BASE,
    REG_DMA0CNT_L,
    REG_DMA0DAD,
    REG_DMA0SAD,
    REG_DMA3CNT_L,
    REG_DMA3DAD,
    REG_DMA3SAD,
)
from gbaemu.sysbus import SysBus


@pytest.fixture
def sysbus():
    return SysBus(bytes(0x4000), Cartridge.from_bytes(bytes(0xC0)))


def test_enum_values_follow_register_encoding():
    assert DmaAddrControl(2) is DmaAddrControl.FIXED
    assert DmaAddrControl(3) is DmaAddrControl.INCREMENT_RELOAD_PROHIBITED
    assert DmaStartTiming(1) is DmaStartTiming.VBLANK
    assert DmaStartTiming(3) is DmaStartTiming.SPECIAL
    assert len(DmaTransferType) == 2


def test_src_and_dst_addr(sysbus):
    ch = DmaChannel(REG_DMA0SAD, REG_DMA0DAD, REG_DMA0CNT_L)
    sysbus.ioregs.write_32(REG_DMA0SAD - IO_BASE, 0x0200_0000)
    sysbus.ioregs.write_32(REG_DMA0DAD - IO_BASE, 0x0600_0000)
    assert ch.src_addr(sysbus) == 0x0200_0000
    assert ch.dst_addr(sysbus) == 0x0600_0000


def test_word_count(sysbus):
    ch = DmaChannel(REG_DMA3SAD, REG_DMA3DAD, REG_DMA3CNT_L)
    sysbus.ioregs.write_reg(REG_DMA3CNT_L, 0x3FFF)
    assert ch.word_count(sysbus) == 0x3FFF


def test_channels_read_their_own_registers(sysbus):
    ch0 = DmaChannel(REG_DMA0SAD, REG_DMA0DAD, REG_DMA0CNT_L)
    ch3 = DmaChannel(REG_DMA3SAD, REG_DMA3DAD, REG_DMA3CNT_L)
    sysbus.ioregs.write_32(REG_DMA3SAD - IO_BASE, 0x0800_0000)
    assert ch3.src_addr(sysbus) == 0x0800_0000
    assert ch0.src_addr(sysbus) == 0


def test_step_takes_no_cycles(sysbus):
    ch = DmaChannel(REG_DMA0SAD, REG_DMA0DAD, REG_DMA0CNT_L)
    assert ch.step(100, sysbus) == (0, None)