import pytest

from gbaemu.bus import BoxedMemory, DummyBus, MemoryAccessWidth, WaitState


@pytest.fixture
def mem():
    return BoxedMemory(bytes(64))


def test_word_round_trip(mem):
    mem.write_32(8, 0xDEADBEEF)
    assert mem.read_32(8) == 0xDEADBEEF


def test_little_endian_layout(mem):
    mem.write_32(0, 0x11223344)
    assert mem.read_8(0) == 0x44
    assert mem.read_8(3) == 0x11
    assert mem.read_16(0) == 0x3344
    assert mem.read_16(2) == 0x1122


def test_halfword_and_byte_round_trip(mem):
    mem.write_16(10, 0xABCD)
    mem.write_8(20, 0x7F)
    assert mem.read_16(10) == 0xABCD
    assert mem.read_8(20) == 0x7F


def test_write_truncates_to_width(mem):
    mem.write_8(0, 0x1FF)
    assert mem.read_8(0) == 0xFF
    assert mem.read_8(1) == 0


def test_initial_contents_kept():
    m = BoxedMemory(b"\x01\x02\x03\x04")
    assert m.read_32(0) == 0x04030201
    assert len(m) == 4


def test_out_of_range_access(mem):
    with pytest.raises(IndexError):
        mem.read_32(62)
    with pytest.raises(IndexError):
        mem.write_8(64, 1)
    with pytest.raises(IndexError):
        mem.read_8(-1)


def test_get_bytes_is_live_view(mem):
    view = mem.get_bytes(4)
    assert len(view) == 60
    view[0] = 0x99
    assert mem.read_8(4) == 0x99
    mem.write_8(5, 0x42)
    assert view[1] == 0x42


def test_get_bytes_out_of_range(mem):
    with pytest.raises(IndexError):
        mem.get_bytes(65)


def test_default_wait_state(mem):
    assert all(mem.get_cycles(0, w) == 1 for w in MemoryAccessWidth)


def test_custom_wait_state():
    m = BoxedMemory(bytes(4), WaitState(3, 3, 6))
    assert m.get_cycles(0, MemoryAccessWidth.BYTE) == 3
    assert m.get_cycles(0, MemoryAccessWidth.HALFWORD) == 3
    assert m.get_cycles(0, MemoryAccessWidth.WORD) == 6


def test_dummy_bus_ignores_writes():
    bus = DummyBus()
    bus.write_32(0x1000, 0xFFFFFFFF)
    bus.write_16(0, 0xFFFF)
    bus.write_8(0, 0xFF)
    assert bus.read_32(0x1000) == 0
    assert bus.read_16(0) == 0
    assert bus.read_8(0) == 0
    assert bytes(bus.get_bytes(0xFFFF)) == bytes(4)
    assert bus.get_cycles(0, MemoryAccessWidth.WORD) == 1