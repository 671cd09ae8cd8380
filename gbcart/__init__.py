"""Game Boy cartridge memory bank controllers: none, MBC1, MBC2, MBC3 and MBC5."""

__version__ = "0.1.0"
__all__ = ["base", "mbc1", "mbc2", "mbc3", "mbc5"]