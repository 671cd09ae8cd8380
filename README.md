# gbcart

Memory bank controllers for Game Boy cartridges, meant to sit behind an
emulator's memory bus.

A cartridge is seen by the CPU at `0x0000-0x7FFF` (ROM) and `0xA000-0xBFFF`
(external RAM). Writes into the ROM range program the controller's registers
(RAM enable, ROM/RAM bank selection, addressing mode, clock latch), which
changes what later reads return.

## Controllers

| Module          | Class     | ROM banks selectable     | External RAM                                  |
|-----------------|-----------|--------------------------|-----------------------------------------------|
| `gbcart.base`   | `MbcNone` | none, ROM read directly  | none; all writes are ignored                  |
| `gbcart.mbc1`   | `Mbc1`    | up to 128 (2 MB)         | up to 4 banks of 8 KB, two addressing modes   |
| `gbcart.mbc2`   | `Mbc2`    | up to 16 (256 KB)        | 512 built-in half-bytes, upper nibble reads `F` |
| `gbcart.mbc3`   | `Mbc3`    | up to 128 (2 MB)         | up to 4 banks of 8 KB, plus clock registers   |
| `gbcart.mbc5`   | `Mbc5`    | up to 512 (8 MB)         | up to 16 banks of 8 KB                        |

Every controller derives from `gbcart.base.Mbc` and has a `type` attribute
holding a `gbcart.base.MbcType` member. Each is built as
`Cls(rom_size=32 * 1024, ram_size=0)`, with ROM and RAM zero-filled in the
`rom` and `ram` byte arrays; sizes are expected to be powers of two.

## Usage

```python
from gbcart.mbc1 import Mbc1

mbc = Mbc1(rom_size=64 * 1024, ram_size=8 * 1024)
mbc.rom[0x4000 * 2] = 0x42      # first byte of bank 2

mbc.write8(0x2000, 2)           # select ROM bank 2 for 0x4000-0x7FFF
assert mbc.read8(0x4000) == 0x42
assert mbc.rom_bank == 2

mbc.write8(0x0000, 0x0A)        # enable external RAM
mbc.write8(0xA000, 0x99)
assert mbc.read8(0xA000) == 0x99
```

Operations common to every controller:

- `read8(addr)` / `write8(addr, val)`: byte access through the controller.
  Reads from disabled or absent RAM return `0xFF`. A read outside the ROM
  and external RAM ranges raises `gbcart.base.InvalidAddressError` (a
  `ValueError`), except on `MbcNone`, which returns `0xFF` above `0x7FFF`.
  Writes to addresses a controller does not serve are ignored.
- `reset()`: clears RAM, keeps ROM, and returns the controller to its
  power-on register state.
- `clone()`: an independent deep copy of the controller and its memory.
- `rom_bank` / `ram_bank`: the banks currently mapped.

## The MBC3 clock

`Mbc3` accepts an optional `rtc` argument: any object with
`read(register)`, `write(register, val)` and `latch()`, as described by the
`gbcart.mbc3.Rtc` protocol. Selecting RAM bank values `0x08-0x0C` maps the
clock registers named by `gbcart.mbc3.RtcRegister` into `0xA000-0xBFFF`, and
writing `0` then `1` to `0x6000-0x7FFF` calls `latch()`. Without a clock,
those registers read `0xFF` and writes to them are ignored.

## What this package does not do

It emulates the controllers only. It does not load or parse cartridge
files or headers, does not pick a controller for a cartridge, does not
provide a real-time clock implementation, and does not save RAM or
controller state to disk.

## Tests

```
pip install -e ".[test]"
pytest
```