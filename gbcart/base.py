"""Common memory-bank-controller machinery and the controller-less cartridge."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import Enum

KB = 1024

ROM_BANK_SIZE = 16 * KB
RAM_BANK_SIZE = 8 * KB

ROM_END = 0x7FFF
ROM_BANK0_END = 0x3FFF
ROM_BANKN_START = 0x4000
ROM_BANKN_END = 0x7FFF
EXTERNAL_RAM_START = 0xA000
EXTERNAL_RAM_END = 0xBFFF

OPEN_BUS = 0xFF


def bank_mask(max_bits: int, n_banks: int) -> int:
    """Mask selecting a valid bank number, assuming ``n_banks`` is a power of two."""
    if n_banks == 0:
        return 0
    return ((1 << max_bits) - 1) & (n_banks - 1)


def is_external_ram(addr: int) -> bool:
    """Whether ``addr`` lies in the cartridge RAM window."""
    return EXTERNAL_RAM_START <= addr <= EXTERNAL_RAM_END


class InvalidAddressError(ValueError):
    """Raised when a controller is accessed outside the regions it serves."""

    def __init__(self, addr: int) -> None:
        super().__init__(f"address {addr:#06x} is not handled by the cartridge")
        self.addr = addr


class MbcType(Enum):
    NONE = "none"
    MBC1 = "mbc1"
    MBC2 = "mbc2"
    MBC3 = "mbc3"
    MBC5 = "mbc5"
    MBC6 = "mbc6"
    MBC7 = "mbc7"


class Mbc(ABC):
    """A cartridge memory bank controller holding its ROM and RAM."""

    type: MbcType

    def __init__(self, rom_size: int = 32 * KB, ram_size: int = 0) -> None:
        self.rom = bytearray(rom_size)
        self.ram = bytearray(ram_size)
        self._rom_banks_count = rom_size // ROM_BANK_SIZE
        self._ram_banks_count = ram_size // RAM_BANK_SIZE
        self._rom_curr_bank = 0
        self._ram_curr_bank = 0

    @property
    def rom_bank(self) -> int:
        """Bank currently mapped to the switchable ROM region."""
        return self._rom_curr_bank

    @property
    def ram_bank(self) -> int:
        """Bank currently mapped to the external RAM region."""
        return self._ram_curr_bank

    def reset(self) -> None:
        """Return to power-on state; RAM is cleared, ROM is kept."""
        self._rom_curr_bank = 0
        self._ram_curr_bank = 0
        self.ram[:] = bytes(len(self.ram))
        self._on_reset()

    def clone(self) -> Mbc:
        """An independent copy of this controller and its memory."""
        return copy.deepcopy(self)

    @abstractmethod
    def read8(self, addr: int) -> int:
        """Read one byte as seen by the CPU."""

    @abstractmethod
    def write8(self, addr: int, val: int) -> None:
        """Write one byte as issued by the CPU."""

    def _on_reset(self) -> None:
        pass


class MbcNone(Mbc):
    """A cartridge without a bank controller: plain ROM, writes are ignored."""

    type = MbcType.NONE

    def read8(self, addr: int) -> int:
        if addr > ROM_END:
            return OPEN_BUS
        return self.rom[addr]

    def write8(self, addr: int, val: int) -> None:
        # no registers to write to
        return None

    def _on_reset(self) -> None:
        self._rom_curr_bank = 1