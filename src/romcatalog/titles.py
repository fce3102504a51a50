"""Derive display titles from ROM filenames."""
from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import PurePath
from re import Pattern
from typing import Union

DEFAULT_EXTENSION = "gba"

_ROM_NUMBER = re.compile(r"^[0-9]{4}\s*[-]?\s*")
# Trailing "[...]" / "(...)" groups, each optionally opened with a colon.
_TRAILING_TAGS = re.compile(r"(\s*\[:?.*\]|\s*\(:?.*\))+\Z")
_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=None)
def _extension_pattern(extension: str) -> Pattern[str]:
    return re.compile(r"\." + re.escape(extension.lstrip(".")) + r"\Z", re.IGNORECASE)


def clean_title(filename: Union[str, PurePath], extension: str = DEFAULT_EXTENSION) -> str:
    """Return a human readable title for ``filename``.

    >>> clean_title("0001 - Super Game [En].gba")
    'Super Game'
    """

    name = os.path.basename(os.fspath(filename))
    name = _extension_pattern(extension).sub("", name)
    name = _ROM_NUMBER.sub("", name, count=1)
    name = _TRAILING_TAGS.sub("", name, count=1)
    name = _WHITESPACE.sub(" ", name)
    return name.strip()
