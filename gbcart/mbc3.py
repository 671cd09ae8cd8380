"""The MBC3 memory bank controller with its real-time-clock interface."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from gbcart import base


class RtcRegister(IntEnum):
    """Values written to the RAM bank register that map a clock register."""

    SECONDS = 0x08
    MINUTES = 0x09
    HOURS = 0x0A
    DAYS_LOW = 0x0B
    DAYS_HIGH = 0x0C


class Rtc(Protocol):
    """The real-time clock attached to an MBC3 cartridge."""

    def read(self, register: RtcRegister) -> int: ...

    def write(self, register: RtcRegister, val: int) -> None: ...

    def latch(self) -> None: ...


_RAM_BANKS = range(0x00, 0x04)


class Mbc3(base.Mbc):
    """MBC3: 7-bit ROM bank selection, up to four RAM banks and a clock."""

    type = base.MbcType.MBC3

    def __init__(
        self, rom_size: int = 32 * base.KB, ram_size: int = 0, rtc: Rtc | None = None
    ) -> None:
        super().__init__(rom_size, ram_size)
        self.rtc = rtc
        self._rom_mask = base.bank_mask(7, self._rom_banks_count)
        self._ram_mask = base.bank_mask(2, self._ram_banks_count)
        self._on_reset()

    def _on_reset(self) -> None:
        # starts at 1 so that latching needs a write of 0 followed by 1
        self._rtc_latch_reg = 1
        self._ram_rtc_enabled = False

    def _clock_register(self) -> RtcRegister | None:
        """The clock register mapped into A000-BFFF, if a clock is attached and mapped."""
        if self.rtc is None or self._ram_curr_bank not in RtcRegister._value2member_map_:
            return None
        return RtcRegister(self._ram_curr_bank)

    def read8(self, addr: int) -> int:
        if 0 <= addr <= base.ROM_END:
            bank = 0 if addr <= base.ROM_BANK0_END else self._rom_curr_bank
            return self.rom[bank * base.ROM_BANK_SIZE + (addr & 0x3FFF)]
        if not base.is_external_ram(addr):
            raise base.InvalidAddressError(addr)
        if not self._ram_rtc_enabled:
            return base.OPEN_BUS
        if self._ram_curr_bank in _RAM_BANKS:
            if not self.ram:
                return base.OPEN_BUS
            return self.ram[self._ram_curr_bank * base.RAM_BANK_SIZE + (addr & 0x1FFF)]
        register = self._clock_register()
        return base.OPEN_BUS if register is None else self.rtc.read(register) & 0xFF

    def write8(self, addr: int, val: int) -> None:
        if 0 <= addr <= 0x7FFF:
            match addr >> 13:
                case 0:
                    self._ram_rtc_enabled = (val & 0x0F) == 0x0A
                case 1:
                    # zero is not a valid value: the controller turns it into 1
                    self._rom_curr_bank = (val & self._rom_mask) or 1
                case 2:
                    self._ram_curr_bank = (val & self._ram_mask if val < 0x04 else val) & 0x0F
                case _:
                    self._write_latch(val)
        elif base.is_external_ram(addr) and self._ram_rtc_enabled:
            if self._ram_curr_bank in _RAM_BANKS:
                if self.ram:
                    offset = self._ram_curr_bank * base.RAM_BANK_SIZE + (addr & 0x1FFF)
                    self.ram[offset] = val & 0xFF
                return
            register = self._clock_register()
            if register is not None:
                self.rtc.write(register, val & 0xFF)

    def _write_latch(self, val: int) -> None:
        # writing 0 then 1 latches the current time into the clock registers
        if self._rtc_latch_reg == 0 and val == 1:
            self._rtc_latch_reg = 1
            if self.rtc is not None:
                self.rtc.latch()
        elif val == 0:
            self._rtc_latch_reg = 0