"""Catalog package building pipe-delimited listings of GBA ROM images."""

from .emitter import CatalogWriter
from .header import read_header
from .scanner import CatalogScanner, ScanConfig
from .schema import CatalogRecord, RomHeader, ScanSummary
from .titles import clean_title
from .walker import find_rom_files

__all__ = [
    "CatalogRecord",
    "CatalogScanner",
    "CatalogWriter",
    "RomHeader",
    "ScanConfig",
    "ScanSummary",
    "clean_title",
    "find_rom_files",
    "read_header",
]
