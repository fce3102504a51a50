"""Pydantic models describing ROM headers and emitted catalog records."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

FIELD_SEPARATOR = "|"
LINE_TERMINATOR = "\r\n"


class RomHeader(BaseModel):
    """Identification fields decoded from the cartridge header."""

    game_title: str = Field(max_length=12)
    game_code: str = Field(max_length=4)

    @property
    def key(self) -> str:
        """Raw, untrimmed ``game_title + game_code``."""

        return self.game_title + self.game_code

    def has_valid_key(self) -> bool:
        """Return ``True`` if the key is non-blank and pure ASCII."""

        key = self.key
        if not key.strip():
            return False
        return len(key.encode("utf-8")) == len(key)


class CatalogRecord(BaseModel):
    """A single catalog line identifying one ROM."""

    key: str
    game_code: str
    display_title: str
    path: Optional[Path] = None

    @classmethod
    def from_header(cls, header: RomHeader, display_title: str, path: Optional[Path] = None) -> "CatalogRecord":
        return cls(key=header.key, game_code=header.game_code, display_title=display_title, path=path)

    def as_line(self) -> str:
        """Render the record as a CRLF-terminated, pipe-delimited line."""

        fields = (self.key, self.game_code, self.display_title)
        return FIELD_SEPARATOR.join(fields) + LINE_TERMINATOR


class ScanSummary(BaseModel):
    """Aggregate counters for one catalog run."""

    files_found: int = 0
    records_emitted: int = 0
    skipped_invalid: int = 0
    read_errors: int = 0

