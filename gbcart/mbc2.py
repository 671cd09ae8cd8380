"""The MBC2 memory bank controller."""

from __future__ import annotations

from gbcart import base

MBC2_RAM_SIZE = 512
_RAM_ADDR_MASK = 0x1FF
_UNDEFINED_NIBBLE = 0xF0


class Mbc2(base.Mbc):
    """MBC2: 4-bit ROM bank selection and 512 half-bytes of built-in RAM."""

    type = base.MbcType.MBC2

    def __init__(self, rom_size: int = 32 * base.KB, ram_size: int = 0) -> None:
        super().__init__(rom_size, ram_size)
        # the chip always carries its own 512 half-bytes of RAM
        self.ram = bytearray(MBC2_RAM_SIZE)
        self._rom_mask = base.bank_mask(4, self._rom_banks_count)
        self._on_reset()

    def _on_reset(self) -> None:
        self._ram_enabled = False
        self._rom_curr_bank = 1

    def read8(self, addr: int) -> int:
        if 0 <= addr <= base.ROM_BANKN_END:
            bank = 0 if addr <= base.ROM_BANK0_END else self._rom_curr_bank
            return self.rom[bank * base.ROM_BANK_SIZE + (addr & 0x3FFF)]
        if not base.is_external_ram(addr):
            raise base.InvalidAddressError(addr)
        if not self._ram_enabled:
            return base.OPEN_BUS
        # only 9 address bits are decoded, the upper nibble is undefined
        return self.ram[addr & _RAM_ADDR_MASK] | _UNDEFINED_NIBBLE

    def write8(self, addr: int, val: int) -> None:
        if 0 <= addr <= base.ROM_BANK0_END:
            # bit 8 of the address selects which register is written
            if addr & 0x0100:
                self._rom_curr_bank = ((val & 0x0F) or 1) & self._rom_mask
            else:
                self._ram_enabled = (val & 0x0F) == 0x0A
        elif base.is_external_ram(addr) and self._ram_enabled:
            self.ram[addr & _RAM_ADDR_MASK] = val & 0xFF