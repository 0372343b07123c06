"""15-bit colours and palette RAM decoding."""

import enum
import struct
from dataclasses import dataclass

_PALETTE_ENTRIES = 256
_PALETTE_STRUCT = struct.Struct(f"<{2 * _PALETTE_ENTRIES}H")


@dataclass(frozen=True)
class Rgb15:
    """A 15-bit BGR555 colour with 5-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_u16(cls, value: int) -> "Rgb15":
        """Decode a 16-bit palette entry; bit 15 is ignored."""
        return cls(
            r=value & 0x1F,
            g=(value >> 5) & 0x1F,
            b=(value >> 10) & 0x1F,
        )

    def rgb24(self) -> tuple[int, int, int]:
        """Convert to a 24-bit true colour."""
        return (
            (self.r << 3) & 0xFF,
            (self.g << 3) & 0xFF,
            (self.b << 3) & 0xFF,
        )

    def __str__(self) -> str:
        return f"Rgb15({self.r:#x},{self.g:#x},{self.b:#x})"


class PixelFormat(enum.IntEnum):
    """Bits per pixel of tile data."""

    BPP4 = 0
    BPP8 = 1


@dataclass(frozen=True)
class Palette:
    """The 256 background and 256 sprite colours held in palette RAM."""

    bg_colors: tuple[Rgb15, ...]
    fg_colors: tuple[Rgb15, ...]

    @classmethod
    def from_bytes(cls, data) -> "Palette":
        """Decode palette RAM; at least 1024 bytes are required."""
        try:
            entries = _PALETTE_STRUCT.unpack_from(data)
        except struct.error as exc:
            raise ValueError(
                f"palette needs {_PALETTE_STRUCT.size} bytes, got {len(data)}"
            ) from exc
        colors = tuple(Rgb15.from_u16(v) for v in entries)
        return cls(
            bg_colors=colors[:_PALETTE_ENTRIES],
            fg_colors=colors[_PALETTE_ENTRIES:],
        )