"""LCD controller: display registers, scanline rendering and timing."""

import enum
from dataclasses import dataclass

from .errors import GBAError
from .interrupt import Interrupt
from .ioregs import REG_BG0CNT, REG_DISPCNT, REG_DISPSTAT, REG_VCOUNT
from .palette import PixelFormat, Rgb15

VRAM_ADDR = 0x0600_0000
PALETTE_ADDR = 0x0500_0000
_FRAME1_ADDR = 0x0600_A000


def _bit(value: int, n: int) -> bool:
    return bool((value >> n) & 1)


def _bits(value: int, lo: int, hi: int) -> int:
    """Bits lo..hi-1 of value."""
    return (value >> lo) & ((1 << (hi - lo)) - 1)


def _with_bit(value: int, n: int, on: bool) -> int:
    return value | (1 << n) if on else value & ~(1 << n)


class BGMode(enum.IntEnum):
    """Background mode selected in DISPCNT."""

    MODE0 = 0
    MODE1 = 1
    MODE2 = 2
    MODE3 = 3
    MODE4 = 4
    MODE5 = 5


@dataclass(frozen=True)
class DisplayControl:
    """Decoded DISPCNT register."""

    bg_mode: BGMode
    display_frame: int
    hblank_interval_free: bool
    obj_character_vram_mapping: bool
    forced_blank: bool
    disp_bg: tuple[bool, bool, bool, bool]
    disp_obj: bool
    disp_window0: bool
    disp_window1: bool
    disp_obj_window: bool

    @classmethod
    def from_u16(cls, value: int) -> "DisplayControl":
        """Decode DISPCNT; raises ValueError for background modes 6 and 7."""
        return cls(
            bg_mode=BGMode(_bits(value, 0, 3)),
            display_frame=int(_bit(value, 4)),
            hblank_interval_free=_bit(value, 5),
            obj_character_vram_mapping=_bit(value, 6),
            forced_blank=_bit(value, 7),
            disp_bg=(_bit(value, 8), _bit(value, 9), _bit(value, 10), _bit(value, 11)),
            disp_obj=_bit(value, 12),
            disp_window0=_bit(value, 13),
            disp_window1=_bit(value, 14),
            disp_obj_window=_bit(value, 15),
        )


@dataclass
class DisplayStatus:
    """Decoded DISPSTAT register; the three flags may be updated in place."""

    vblank_flag: bool
    hblank_flag: bool
    vcount_flag: bool
    vblank_irq_enable: bool
    hblank_irq_enable: bool
    vcount_irq_enable: bool
    vcount_setting: int
    raw_value: int

    @classmethod
    def from_u16(cls, value: int) -> "DisplayStatus":
        return cls(
            vblank_flag=_bit(value, 0),
            hblank_flag=_bit(value, 1),
            vcount_flag=_bit(value, 2),
            vblank_irq_enable=_bit(value, 3),
            hblank_irq_enable=_bit(value, 4),
            vcount_irq_enable=_bit(value, 5),
            vcount_setting=_bits(value, 8, 16),
            raw_value=value & 0xFFFF,
        )

    def to_u16(self) -> int:
        """The raw value with the three status flags applied."""
        v = _with_bit(self.raw_value, 0, self.vblank_flag)
        v = _with_bit(v, 1, self.hblank_flag)
        return _with_bit(v, 2, self.vcount_flag)


_SCREEN_SIZES = {0: (256, 256), 1: (512, 256), 2: (256, 512), 3: (512, 512)}


@dataclass(frozen=True)
class BgControl:
    """Decoded BGxCNT register."""

    bg_priority: int
    character_base_block: int
    mosaic: bool
    palette256: bool
    screen_base_block: int
    wraparound: bool
    screen_width: int
    screen_height: int

    @classmethod
    def from_u16(cls, value: int) -> "BgControl":
        width, height = _SCREEN_SIZES[_bits(value, 14, 16)]
        return cls(
            bg_priority=_bits(value, 0, 2),
            character_base_block=_bits(value, 2, 4),
            mosaic=_bit(value, 6),
            palette256=_bit(value, 7),
            screen_base_block=_bits(value, 8, 13),
            wraparound=_bit(value, 13),
            screen_width=width,
            screen_height=height,
        )

    def char_block(self) -> int:
        """Address of the tile data."""
        return VRAM_ADDR + self.character_base_block * 0x4000

    def screen_block(self) -> int:
        """Address of the tile map."""
        return VRAM_ADDR + self.screen_base_block * 0x800

    def tile_format(self) -> tuple[int, PixelFormat]:
        """Size in bytes of one tile and its pixel format."""
        if self.palette256:
            return 2 * Lcd.TILE_SIZE, PixelFormat.BPP8
        return Lcd.TILE_SIZE, PixelFormat.BPP4


@dataclass(frozen=True)
class TileMapEntry:
    """One entry of a text-mode tile map."""

    tile_index: int
    x_flip: bool
    y_flip: bool
    palette_bank: int

    @classmethod
    def from_u16(cls, value: int) -> "TileMapEntry":
        return cls(
            tile_index=_bits(value, 0, 10),
            x_flip=_bit(value, 10),
            y_flip=_bit(value, 11),
            palette_bank=_bits(value, 12, 16),
        )


class LcdState(enum.Enum):
    """Phase of the display refresh."""

    HDRAW = 0
    HBLANK = 1
    VBLANK = 2


class Lcd:
    """The LCD controller and its 256x256 frame buffer of Rgb15 pixels."""

    DISPLAY_WIDTH = 240
    DISPLAY_HEIGHT = 160

    CYCLES_PIXEL = 4
    CYCLES_HDRAW = 960
    CYCLES_HBLANK = 272
    CYCLES_SCANLINE = 1232
    CYCLES_VDRAW = 197120
    CYCLES_VBLANK = 83776

    TILE_SIZE = 0x20

    def __init__(self) -> None:
        self.cycles = 0
        self.state = LcdState.HDRAW
        self.current_scanline = 0
        self.pixeldata = [Rgb15()] * (256 * 256)

    def _read_dispstat(self, sysbus) -> DisplayStatus:
        return DisplayStatus.from_u16(sysbus.ioregs.read_reg(REG_DISPSTAT))

    def _update_regs(self, dispstat: DisplayStatus, sysbus) -> None:
        sysbus.ioregs.write_reg(REG_DISPSTAT, dispstat.to_u16())

    def set_hblank(self, sysbus) -> Interrupt | None:
        """Enter HBlank and return the HBlank interrupt if it is enabled."""
        dispstat = self._read_dispstat(sysbus)
        self.state = LcdState.HBLANK
        sysbus.ioregs.write_reg(REG_DISPSTAT, _with_bit(dispstat.raw_value, 1, True))
        return Interrupt.LCD_HBLANK if dispstat.hblank_irq_enable else None

    def set_vblank(self, sysbus) -> Interrupt | None:
        """Enter VBlank and return the VBlank interrupt if it is enabled."""
        dispstat = self._read_dispstat(sysbus)
        v = _with_bit(dispstat.raw_value, 1, False)
        v = _with_bit(v, 0, True)
        self.state = LcdState.VBLANK
        sysbus.ioregs.write_reg(REG_DISPSTAT, v)
        return Interrupt.LCD_VBLANK if dispstat.vblank_irq_enable else None

    def set_hdraw(self) -> None:
        self.state = LcdState.HDRAW

    def _bgcnt(self, bg: int, sysbus) -> BgControl:
        return BgControl.from_u16(sysbus.ioregs.read_reg(REG_BG0CNT + 2 * bg))

    def read_pixel_index(self, sysbus, addr: int, x: int, y: int, width: int, fmt: PixelFormat) -> int:
        """Palette index of pixel (x, y) in a bitmap of rows of width bytes."""
        if fmt is PixelFormat.BPP4:
            byte = sysbus.read_8(addr + width * y + x // 2)
            return byte >> 4 if x & 1 else byte & 0xF
        return sysbus.read_8(addr + width * y + x)

    def get_palette_color(self, sysbus, index: int, palette_index: int) -> Rgb15:
        """Colour number index of the 16-colour palette bank palette_index."""
        return Rgb15.from_u16(sysbus.read_16(PALETTE_ADDR + 2 * index + 0x20 * palette_index))

    def _scanline_mode0(self, bg: int, sysbus) -> None:
        bgcnt = self._bgcnt(bg, sysbus)
        tileset_base = bgcnt.char_block()
        tilemap_base = bgcnt.screen_block()
        tile_size, fmt = bgcnt.tile_format()
        row_bytes = 4 if fmt is PixelFormat.BPP4 else 8

        py = self.current_scanline
        tile_y = py % 8
        row_start = py * 256
        for tile in range(bgcnt.screen_width // 8):
            entry = TileMapEntry.from_u16(sysbus.read_16(tilemap_base + tile * 2))
            tile_addr = tileset_base + entry.tile_index * tile_size
            bank = entry.palette_bank if fmt is PixelFormat.BPP4 else 0
            px = tile * 8
            for tile_x in range(8):
                index = self.read_pixel_index(sysbus, tile_addr, tile_x, tile_y, row_bytes, fmt)
                self.pixeldata[row_start + px + tile_x] = self.get_palette_color(sysbus, index, bank)

    def _scanline_mode4(self, dispcnt: DisplayControl, sysbus) -> None:
        page = _FRAME1_ADDR if dispcnt.display_frame else VRAM_ADDR
        y = self.current_scanline
        line_addr = page + y * self.DISPLAY_WIDTH
        for x in range(self.DISPLAY_WIDTH):
            index = sysbus.read_8(line_addr + x)
            self.pixeldata[x + y * 256] = self.get_palette_color(sysbus, index, 0)

    def scanline(self, sysbus) -> None:
        """Render the current scanline into the frame buffer.

        Raises GBAError for background modes that are not supported.
        """
        dispcnt = DisplayControl.from_u16(sysbus.ioregs.read_reg(REG_DISPCNT))
        if dispcnt.bg_mode in (BGMode.MODE0, BGMode.MODE2):
            for bg in range(3):
                if dispcnt.disp_bg[bg]:
                    self._scanline_mode0(bg, sysbus)
        elif dispcnt.bg_mode is BGMode.MODE4:
            self._scanline_mode4(dispcnt, sysbus)
        else:
            raise GBAError(f"{dispcnt.bg_mode.name} not supported")

    def step(self, cycles: int, sysbus) -> tuple[int, Interrupt | None]:
        """Advance by cycles; return extra cycles taken and any interrupt raised."""
        self.cycles += cycles
        sysbus.ioregs.write_reg(REG_VCOUNT, self.current_scanline)
        dispstat = self._read_dispstat(sysbus)
        dispstat.vcount_flag = dispstat.vcount_setting == self.current_scanline
        if dispstat.vcount_irq_enable:
            raise GBAError("VCOUNT IRQ not supported")

        if self.state is LcdState.HDRAW:
            if self.cycles > self.CYCLES_HDRAW:
                self.current_scanline += 1
                self.cycles -= self.CYCLES_HDRAW
                if self.current_scanline < self.DISPLAY_HEIGHT:
                    self.scanline(sysbus)
                    dispstat.hblank_flag = True
                    irq = Interrupt.LCD_HBLANK if dispstat.hblank_irq_enable else None
                    self.state = LcdState.HBLANK
                else:
                    dispstat.vblank_flag = True
                    irq = Interrupt.LCD_VBLANK if dispstat.vblank_irq_enable else None
                    self.state = LcdState.VBLANK
                self._update_regs(dispstat, sysbus)
                return 0, irq
        elif self.state is LcdState.HBLANK:
            if self.cycles > self.CYCLES_HBLANK:
                self.cycles -= self.CYCLES_HBLANK
                self.state = LcdState.HDRAW
                dispstat.hblank_flag = False
                self._update_regs(dispstat, sysbus)
                return 0, None
        elif self.cycles > self.CYCLES_VBLANK:
            self.cycles -= self.CYCLES_VBLANK
            self.state = LcdState.HDRAW
            dispstat.vblank_flag = False
            self.current_scanline = 0
            self.scanline(sysbus)
            self._update_regs(dispstat, sysbus)
            return 0, None
        return 0, None