"""The MBC5 memory bank controller."""

from __future__ import annotations

from gbcart import base


class Mbc5(base.Mbc):
    """MBC5: 9-bit ROM bank selection and up to sixteen RAM banks."""

    type = base.MbcType.MBC5

    def __init__(self, rom_size: int = 32 * base.KB, ram_size: int = 0) -> None:
        super().__init__(rom_size, ram_size)
        self._rom_mask = base.bank_mask(9, self._rom_banks_count)
        self._ram_mask = base.bank_mask(4, self._ram_banks_count)
        self._rom_b0 = 1
        self._rom_b1 = 0
        self._on_reset()

    def _on_reset(self) -> None:
        # the bank number registers keep their values across a reset
        self._ram_enabled = False
        self._rom_curr_bank = 1

    def _ram_reachable(self) -> bool:
        return self._ram_enabled and bool(self.ram)

    def read8(self, addr: int) -> int:
        if 0 <= addr <= base.ROM_BANKN_END:
            bank = 0 if addr <= base.ROM_BANK0_END else self._rom_curr_bank
            return self.rom[bank * base.ROM_BANK_SIZE + (addr & 0x3FFF)]
        if not base.is_external_ram(addr):
            raise base.InvalidAddressError(addr)
        if not self._ram_reachable():
            return base.OPEN_BUS
        return self.ram[self._ram_curr_bank * base.RAM_BANK_SIZE + (addr & 0x1FFF)]

    def write8(self, addr: int, val: int) -> None:
        if 0 <= addr <= 0x5FFF:
            match addr >> 12:
                case 0 | 1:
                    self._ram_enabled = val == 0x0A
                case 2:
                    self._rom_b0 = val & 0xFF
                case 3:
                    self._rom_b1 = val & 0x01
                case _:
                    self._ram_curr_bank = val & self._ram_mask
            if 0x2000 <= addr <= 0x3FFF:
                self._rom_curr_bank = (self._rom_b0 | (self._rom_b1 << 8)) & self._rom_mask
        elif base.is_external_ram(addr) and self._ram_reachable():
            self.ram[self._ram_curr_bank * base.RAM_BANK_SIZE + (addr & 0x1FFF)] = val & 0xFF