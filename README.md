# gbaemu

Building blocks for a Game Boy Advance emulator in plain Python, with no
third-party dependencies.

## Modules

- `gbaemu.bus`: flat little-endian memory regions (`BoxedMemory`) and a
  stand-in for unmapped memory (`DummyBus`, which reads as zero, drops writes
  and counts both). Each region has a `WaitState` giving the cycles of an
  access of each `MemoryAccessWidth` (`BYTE`, `HALFWORD`, `WORD`).
  Out-of-range accesses raise `IndexError`.
- `gbaemu.ioregs`: the 4 KiB I/O register block (`IoRegs`) and named register
  addresses such as `REG_DISPCNT`, `REG_DISPSTAT`, `REG_VCOUNT`,
  `REG_BG0CNT`, `REG_DMA0SAD` and `REG_IME`. `read_reg`/`write_reg` take
  absolute addresses; the bus methods take offsets from `IO_BASE`. DISPCNT
  starts at `0x0080`.
- `gbaemu.cartridge`: ROM images (`Cartridge.load`, `Cartridge.from_bytes`)
  and their header (`CartridgeHeader`: `game_title`, `game_code`,
  `maker_code`, `software_version`, `checksum`). Images shorter than 4 MiB are
  zero-padded.
- `gbaemu.sysbus`: the system bus (`SysBus`), which routes each address to
  the BIOS, on-board work RAM, internal work RAM, I/O registers, palette RAM,
  VRAM, OAM or the game pak; any other address goes to a `DummyBus`.
- `gbaemu.palette`: 15-bit colours (`Rgb15.from_u16`, `Rgb15.rgb24`), the
  `PixelFormat` enum, and `Palette.from_bytes`, which decodes 1024 bytes of
  palette RAM into 256 background and 256 sprite colours.
- `gbaemu.lcd`: decoding of DISPCNT (`DisplayControl`), DISPSTAT
  (`DisplayStatus`), BGxCNT (`BgControl`) and tile map entries
  (`TileMapEntry`), and the LCD controller (`Lcd`). `Lcd.step` moves through
  the HDraw, HBlank and VBlank phases (`LcdState`), updates VCOUNT and the
  DISPSTAT flags, renders scanlines into `Lcd.pixeldata` (256x256 `Rgb15`
  values) for tiled modes 0 and 2 and bitmap mode 4, and returns any HBlank or
  VBlank `Interrupt` that is enabled.
- `gbaemu.dma`: DMA channel register access (`DmaChannel.src_addr`,
  `dst_addr`, `word_count`) and enums for the control fields.
- `gbaemu.disass`: a `Disassembler` iterator over a byte buffer. You supply
  the decoder: an object with a `word_size` and a `decode(data, addr)` method
  that returns an instruction with a `raw` integer and a text form, or raises
  `UnexpectedEof` (ends iteration) or `DecodeError` (listed as
  `<UNDEFINED>`).
- `gbaemu.parser`: the debugger command-line grammar (`parse_expr`,
  `parse_deref`).
- `gbaemu.interrupt`: the `Interrupt` sources, numbered by their IE/IF bit.
- `gbaemu.errors`: `GBAError`, `DebuggerError`, `ParsingError`,
  `InvalidCommand`, `InvalidArgument` and `InvalidCommandFormat`.

## Installation

```
pip install .
```

## Examples

Load a ROM and inspect its header:

```python
from gbaemu.cartridge import Cartridge

cart = Cartridge.load("game.gba")
print(cart.header.game_title, cart.header.game_code)
```

Put it on a system bus and read memory:

```python
from gbaemu.sysbus import SysBus

bus = SysBus(bytes(0x4000), cart)
first_word = bus.read_32(0x0800_0000)
bus.write_16(0x0200_0000, 0xBEEF)
```

Parse debugger input:

```python
from gbaemu.parser import parse_expr

parse_expr("pc = 0x1337")        # Assignment(Identifier('pc'), Num(4919))
parse_expr("x 0x8000000 16")      # Command(Identifier('x'), (Num(...), Num(16)))
parse_expr("   ")                 # Empty()
```

`parse_expr` accepts commands (`name arg0 arg1 ...`), assignments
(`lvalue = rvalue`) and blank input. Values are decimal or `0x` hex numbers
(up to 32 bits), `true`/`false`, identifiers, and dereferences such as
`*(u16*)0x1234` or `*r10` (a bare `*` means a 32-bit read). Bad input raises
`gbaemu.errors.ParsingError`.

## What the package does not do

- There is no CPU core and no instruction decoder; `Disassembler` needs one
  supplied to it, and nothing here executes code.
- There is no interactive debugger or command to run: `gbaemu.parser` only
  turns input lines into values.
- There is no display window; frames are left in `Lcd.pixeldata`.
- DMA channels read their registers but perform no transfers
  (`DmaChannel.step` returns `(0, None)`).
- Only background modes 0, 2 and 4 are rendered; `Lcd.scanline` raises
  `GBAError` for the others, and `Lcd.step` raises `GBAError` when the VCOUNT
  interrupt is enabled.

## Running the tests

```
pip install .[test]
pytest
```