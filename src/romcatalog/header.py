"""Fixed-offset extraction of the identification fields of a GBA ROM header."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from romutils.logging import get_logger

from .schema import RomHeader

LOGGER = get_logger(__name__)

HEADER_SIZE = 0xC0
TITLE_OFFSET = 0xA0
TITLE_LENGTH = 12
CODE_OFFSET = 0xAC
CODE_LENGTH = 4

NUL = "\0"
SPACE = " "


def decode_field(raw: bytes) -> str:
    """Decode header bytes one-to-one and turn every NUL into a space."""

    return raw.decode("latin-1").replace(NUL, SPACE)


def parse_header(data: bytes) -> RomHeader:
    """Build a :class:`RomHeader` from the leading bytes of a ROM image.

    Input shorter than the header window is zero padded, which matches
    reading a short file into a zero-filled buffer.
    """

    window = data[:HEADER_SIZE].ljust(HEADER_SIZE, b"\0")
    return RomHeader(
        game_title=decode_field(window[TITLE_OFFSET:TITLE_OFFSET + TITLE_LENGTH]),
        game_code=decode_field(window[CODE_OFFSET:CODE_OFFSET + CODE_LENGTH]),
    )


def read_header(path: Union[str, Path]) -> Optional[RomHeader]:
    """Read the header window of ``path``; ``None`` if the file cannot be read."""

    path = Path(path)
    try:
        with path.open("rb") as handle:
            data = handle.read(HEADER_SIZE)
    except OSError as exc:
        LOGGER.error("Error reading file %s: %s", path, exc)
        return None
    return parse_header(data)
