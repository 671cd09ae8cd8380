"""The MBC1 memory bank controller."""

from __future__ import annotations

from gbcart import base


class Mbc1(base.Mbc):
    """MBC1: 5+2 bit ROM bank selection, up to four RAM banks, two addressing modes."""

    type = base.MbcType.MBC1

    def __init__(self, rom_size: int = 32 * base.KB, ram_size: int = 0) -> None:
        super().__init__(rom_size, ram_size)
        self._rom_mask = base.bank_mask(7, self._rom_banks_count)
        self._ram_mask = base.bank_mask(2, self._ram_banks_count)
        self._on_reset()

    def _on_reset(self) -> None:
        self._ram_enabled = False
        self._addr_mode1 = False
        self._rom_bank_low = 1
        self._rom_bank_high = 0
        self._rom_curr_bank_low = 0
        self._update_bank_configuration()

    def _ram_offset(self, addr: int) -> int | None:
        """Index into RAM for an external RAM address, or None when RAM is unreachable."""
        if not self.ram or not self._ram_enabled:
            return None
        return self._ram_curr_bank * base.RAM_BANK_SIZE + (addr & 0x1FFF)

    def read8(self, addr: int) -> int:
        if 0 <= addr <= base.ROM_END:
            low_region = addr <= base.ROM_BANK0_END
            bank = self._rom_curr_bank_low if low_region else self._rom_curr_bank
            return self.rom[bank * base.ROM_BANK_SIZE + (addr & 0x3FFF)]
        if not base.is_external_ram(addr):
            raise base.InvalidAddressError(addr)
        offset = self._ram_offset(addr)
        return base.OPEN_BUS if offset is None else self.ram[offset]

    def write8(self, addr: int, val: int) -> None:
        if 0 <= addr <= 0x7FFF:
            match addr >> 13:
                case 0:
                    self._ram_enabled = (val & 0x0F) == 0x0A
                case 1:
                    # zero is not a valid value: the controller turns it into 1
                    self._rom_bank_low = (val & 0x1F) or 1
                case 2:
                    self._rom_bank_high = val & 0x03
                case _:
                    self._addr_mode1 = bool(val & 0x01)
            self._update_bank_configuration()
        elif base.is_external_ram(addr):
            offset = self._ram_offset(addr)
            if offset is not None:
                self.ram[offset] = val & 0xFF

    def _update_bank_configuration(self) -> None:
        high = self._rom_bank_high << 5
        self._rom_curr_bank = (high + self._rom_bank_low) & self._rom_mask
        if self._addr_mode1:
            # the upper two bits also select the RAM bank and the bank in 0000-3FFF
            self._ram_curr_bank = self._rom_bank_high & self._ram_mask
            self._rom_curr_bank_low = high & self._rom_mask
        else:
            self._ram_curr_bank = 0
            self._rom_curr_bank_low = 0