import pytest

from gbcart.base import (
    RAM_BANK_SIZE,
    ROM_BANK_SIZE,
    InvalidAddressError,
    Mbc,
    MbcNone,
    MbcType,
    bank_mask,
    is_external_ram,
)


def test_bank_sizes_follow_the_hardware():
    mbc = MbcNone(2 * ROM_BANK_SIZE, RAM_BANK_SIZE)
    assert len(mbc.rom) == 32 * 1024
    assert len(mbc.ram) == 8 * 1024
    mbc.rom[ROM_BANK_SIZE] = 0x5A
    assert mbc.read8(0x4000) == 0x5A


def test_bank_mask_is_zero_without_banks():
    assert bank_mask(7, 0) == 0


def test_bank_mask_limits_to_available_banks():
    assert bank_mask(7, 8) == 7
    assert bank_mask(2, 4) == 3


def test_bank_mask_limits_to_register_width():
    assert bank_mask(2, 16) == 3


def test_external_ram_window():
    assert is_external_ram(0xA000)
    assert is_external_ram(0xBFFF)
    assert not is_external_ram(0x9FFF)
    assert not is_external_ram(0xC000)


def test_mbc_is_abstract():
    with pytest.raises(TypeError):
        Mbc()


def test_mbc_none_defaults():
    mbc = MbcNone()
    assert len(mbc.rom) == 32 * 1024
    assert len(mbc.ram) == 0
    assert mbc.type is MbcType.NONE


def test_mbc_none_reads_rom_directly():
    mbc = MbcNone()
    mbc.rom[0x0100] = 0x12
    mbc.rom[0x7FFF] = 0x34
    assert mbc.read8(0x0100) == 0x12
    assert mbc.read8(0x7FFF) == 0x34


def test_mbc_none_reads_outside_rom_as_open_bus():
    mbc = MbcNone()
    assert mbc.read8(0xA000) == 0xFF


def test_mbc_none_ignores_writes():
    mbc = MbcNone()
    mbc.rom[0x2000] = 0x55
    mbc.write8(0x2000, 0x03)
    assert mbc.read8(0x2000) == 0x55
    assert mbc.rom_bank == 0


def test_mbc_none_reset_selects_bank_one():
    mbc = MbcNone()
    assert mbc.rom_bank == 0
    mbc.reset()
    assert mbc.rom_bank == 1
    assert mbc.ram_bank == 0


def test_reset_clears_ram_and_keeps_rom():
    mbc = MbcNone(ram_size=RAM_BANK_SIZE)
    mbc.ram[10] = 0x77
    mbc.rom[10] = 0x66
    mbc.reset()
    assert not any(mbc.ram)
    assert mbc.rom[10] == 0x66


def test_clone_is_independent():
    mbc = MbcNone()
    mbc.rom[0] = 0x11
    copy = mbc.clone()
    assert copy.read8(0) == 0x11
    copy.rom[0] = 0x22
    assert mbc.read8(0) == 0x11
    assert copy.type is MbcType.NONE


def test_invalid_address_error_is_value_error():
    err = InvalidAddressError(0xC000)
    assert isinstance(err, ValueError)
    assert err.addr == 0xC000