"""Memory-mapped I/O registers."""

from .bus import WaitState

IO_BASE = 0x0400_0000

# LCD
REG_DISPCNT = IO_BASE + 0x0000
REG_DISPSTAT = IO_BASE + 0x0004
REG_VCOUNT = IO_BASE + 0x0006
REG_BG0CNT = IO_BASE + 0x0008
REG_BG1CNT = IO_BASE + 0x000A
REG_BG2CNT = IO_BASE + 0x000C
REG_BG3CNT = IO_BASE + 0x000E
REG_BG0HOFS = IO_BASE + 0x0010
REG_BG0VOFS = IO_BASE + 0x0012
REG_BG1HOFS = IO_BASE + 0x0014
REG_BG1VOFS = IO_BASE + 0x0016
REG_BG2HOFS = IO_BASE + 0x0018
REG_BG2VOFS = IO_BASE + 0x001A
REG_BG3HOFS = IO_BASE + 0x001C
REG_BG3VOFS = IO_BASE + 0x001E
REG_BG2PA = IO_BASE + 0x0020
REG_BG2PB = IO_BASE + 0x0022
REG_BG2PC = IO_BASE + 0x0024
REG_BG2PD = IO_BASE + 0x0026
REG_BG2X = IO_BASE + 0x0028
REG_BG2Y = IO_BASE + 0x002C
REG_BG3PA = IO_BASE + 0x0030
REG_BG3PB = IO_BASE + 0x0032
REG_BG3PC = IO_BASE + 0x0034
REG_BG3PD = IO_BASE + 0x0036
REG_BG3X = IO_BASE + 0x0038
REG_BG3Y = IO_BASE + 0x003C
REG_WIN0H = IO_BASE + 0x0040
REG_WIN1H = IO_BASE + 0x0042
REG_WIN0V = IO_BASE + 0x0044
REG_WIN1V = IO_BASE + 0x0046
REG_WININ = IO_BASE + 0x0048
REG_WINOUT = IO_BASE + 0x004A
REG_MOSAIC = IO_BASE + 0x004C
REG_BLDCNT = IO_BASE + 0x0050
REG_BLDALPHA = IO_BASE + 0x0052
REG_BLDY = IO_BASE + 0x0054
# Sound
REG_SOUND1CNT_L = IO_BASE + 0x0060
REG_SOUND1CNT_H = IO_BASE + 0x0062
REG_SOUND1CNT_X = IO_BASE + 0x0064
REG_SOUND2CNT_L = IO_BASE + 0x0068
REG_SOUND2CNT_H = IO_BASE + 0x006C
REG_SOUND3CNT_L = IO_BASE + 0x0070
REG_SOUND3CNT_H = IO_BASE + 0x0072
REG_SOUND3CNT_X = IO_BASE + 0x0074
REG_SOUND4CNT_L = IO_BASE + 0x0078
REG_SOUND4CNT_H = IO_BASE + 0x007C
REG_SOUNDCNT_L = IO_BASE + 0x0080
REG_SOUNDCNT_H = IO_BASE + 0x0082
REG_SOUNDCNT_X = IO_BASE + 0x0084
REG_SOUNDBIAS = IO_BASE + 0x0088
REG_WAVE_RAM = IO_BASE + 0x0090
REG_FIFO_A = IO_BASE + 0x00A0
REG_FIFO_B = IO_BASE + 0x00A4
# DMA
REG_DMA0SAD = IO_BASE + 0x00B0
REG_DMA0DAD = IO_BASE + 0x00B4
REG_DMA0CNT_L = IO_BASE + 0x00B8
REG_DMA0CNT_H = IO_BASE + 0x00BA
REG_DMA1SAD = IO_BASE + 0x00BC
REG_DMA1DAD = IO_BASE + 0x00C0
REG_DMA1CNT_L = IO_BASE + 0x00C4
REG_DMA1CNT_H = IO_BASE + 0x00C6
REG_DMA2SAD = IO_BASE + 0x00C8
REG_DMA2DAD = IO_BASE + 0x00CC
REG_DMA2CNT_L = IO_BASE + 0x00D0
REG_DMA2CNT_H = IO_BASE + 0x00D2
REG_DMA3SAD = IO_BASE + 0x00D4
REG_DMA3DAD = IO_BASE + 0x00D8
REG_DMA3CNT_L = IO_BASE + 0x00DC
REG_DMA3CNT_H = IO_BASE + 0x00DE
# Timers
REG_TM0CNT_L = IO_BASE + 0x0100
REG_TM0CNT_H = IO_BASE + 0x0102
REG_TM1CNT_L = IO_BASE + 0x0104
REG_TM1CNT_H = IO_BASE + 0x0106
REG_TM2CNT_L = IO_BASE + 0x0108
REG_TM2CNT_H = IO_BASE + 0x010A
REG_TM3CNT_L = IO_BASE + 0x010C
REG_TM3CNT_H = IO_BASE + 0x010E
# Serial communication (1)
REG_SIODATA32 = IO_BASE + 0x0120
REG_SIOMULTI0 = IO_BASE + 0x0120
REG_SIOMULTI1 = IO_BASE + 0x0122
REG_SIOMULTI2 = IO_BASE + 0x0124
REG_SIOMULTI3 = IO_BASE + 0x0126
REG_SIOCNT = IO_BASE + 0x0128
REG_SIOMLT_SEND = IO_BASE + 0x012A
REG_SIODATA8 = IO_BASE + 0x012A
# Keypad
REG_KEYINPUT = IO_BASE + 0x0130
REG_KEYCNT = IO_BASE + 0x0132
# Serial communication (2)
REG_RCNT = IO_BASE + 0x0134
REG_IR = IO_BASE + 0x0136
REG_JOYCNT = IO_BASE + 0x0140
REG_JOY_RECV = IO_BASE + 0x0150
REG_JOY_TRANS = IO_BASE + 0x0154
REG_JOYSTAT = IO_BASE + 0x0158
# Interrupt, wait state and power-down control
REG_IE = IO_BASE + 0x0200
REG_IF = IO_BASE + 0x0202
REG_WAITCNT = IO_BASE + 0x0204
REG_IME = IO_BASE + 0x0208
REG_POSTFLG = IO_BASE + 0x0300
REG_HALTCNT = IO_BASE + 0x0301

_IO_SIZE = 4096


class IoRegs:
    """The I/O register block, modelled as a plain little-endian buffer.

    read_reg/write_reg take absolute addresses; the bus methods take offsets
    from IO_BASE.
    """

    def __init__(self) -> None:
        self._data = bytearray(_IO_SIZE)
        self.wait_state = WaitState()
        self.write_reg(REG_DISPCNT, 0x0080)

    def _span(self, offset: int, size: int) -> slice:
        if offset < 0 or offset + size > _IO_SIZE:
            raise IndexError(f"I/O access of {size} bytes at offset {offset:#x} out of range")
        return slice(offset, offset + size)

    def read_reg(self, addr: int) -> int:
        return int.from_bytes(self._data[self._span(addr - IO_BASE, 2)], "little")

    def write_reg(self, addr: int, value: int) -> None:
        self._data[self._span(addr - IO_BASE, 2)] = (value & 0xFFFF).to_bytes(2, "little")

    def read_32(self, addr: int) -> int:
        return int.from_bytes(self._data[self._span(addr, 4)], "little")

    def read_16(self, addr: int) -> int:
        return self.read_reg(IO_BASE + addr)

    def read_8(self, addr: int) -> int:
        return self.read_reg(IO_BASE + addr) & 0xFF

    def write_32(self, addr: int, value: int) -> None:
        self._data[self._span(addr, 4)] = (value & 0xFFFF_FFFF).to_bytes(4, "little")

    def write_16(self, addr: int, value: int) -> None:
        self.write_reg(IO_BASE + addr, value)

    def write_8(self, addr: int, value: int) -> None:
        current = self.read_reg(IO_BASE + addr)
        self.write_reg(IO_BASE + addr, (current & 0xFF00) | (value & 0xFF))

    def get_bytes(self, addr: int) -> memoryview:
        """Return a writable view from offset addr to the end of the block."""
        if addr < 0 or addr > _IO_SIZE:
            raise IndexError(f"I/O offset {addr:#x} out of range")
        return memoryview(self._data)[addr:]

    def get_cycles(self, addr: int, width) -> int:
        return self.wait_state.cycles(width)