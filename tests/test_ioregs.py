import pytest

from gbaemu.bus import MemoryAccessWidth
from gbaemu.ioregs import (
    IO_BASE,
    REG_BG0CNT,
    REG_DISPCNT,
    REG_DISPSTAT,
    REG_DMA0SAD,
    REG_IE,
    IoRegs,
)


@pytest.fixture
def regs():
    return IoRegs()


def test_dispcnt_default(regs):
    assert regs.read_reg(REG_DISPCNT) == 0x0080


def test_other_registers_start_zero(regs):
    assert regs.read_reg(REG_DISPSTAT) == 0
    assert regs.read_reg(REG_IE) == 0


def test_reg_round_trip(regs):
    regs.write_reg(REG_BG0CNT, 0x1C08)
    assert regs.read_reg(REG_BG0CNT) == 0x1C08


def test_write_reg_truncates(regs):
    regs.write_reg(REG_IE, 0x12345)
    assert regs.read_reg(REG_IE) == 0x2345


def test_bus_16_uses_offsets(regs):
    regs.write_16(REG_DISPSTAT - IO_BASE, 0xBEEF)
    assert regs.read_reg(REG_DISPSTAT) == 0xBEEF
    assert regs.read_16(REG_DISPSTAT - IO_BASE) == 0xBEEF


def test_write_8_keeps_high_byte(regs):
    regs.write_reg(REG_IE, 0xAB00)
    regs.write_8(REG_IE - IO_BASE, 0xCD)
    assert regs.read_reg(REG_IE) == 0xABCD
    assert regs.read_8(REG_IE - IO_BASE) == 0xCD


def test_read_32_spans_two_registers(regs):
    regs.write_reg(REG_DMA0SAD, 0x1234)
    regs.write_reg(REG_DMA0SAD + 2, 0xABCD)
    assert regs.read_32(REG_DMA0SAD - IO_BASE) == 0xABCD1234


def test_write_32_round_trip(regs):
    offset = REG_DMA0SAD - IO_BASE
    regs.write_32(offset, 0x0800_0000)
    assert regs.read_32(offset) == 0x0800_0000
    assert regs.read_reg(REG_DMA0SAD + 2) == 0x0800


def test_get_bytes_view(regs):
    view = regs.get_bytes(REG_IE - IO_BASE)
    view[0] = 0x11
    view[1] = 0x22
    assert regs.read_reg(REG_IE) == 0x2211


def test_cycles_always_one(regs):
    assert all(regs.get_cycles(0, w) == 1 for w in MemoryAccessWidth)


def test_out_of_range(regs):
    with pytest.raises(IndexError):
        regs.read_32(4094)
    with pytest.raises(IndexError):
        regs.read_reg(IO_BASE - 2)
    with pytest.raises(IndexError):
        regs.get_bytes(4097)