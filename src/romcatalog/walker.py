"""Recursive discovery of ROM files below a root directory."""
from __future__ import annotations

import os
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from re import Pattern
from typing import List, Optional, Tuple, Union

from romutils.logging import get_logger
from romutils.paths import normalise_path

LOGGER = get_logger(__name__)


def extension_pattern(extension: str) -> Pattern[str]:
    """Case-insensitive suffix pattern for ``extension``.

    The character before the extension is a wildcard, not a literal dot,
    so ``"foogba"`` matches as well as ``"foo.gba"``.
    """

    return re.compile("." + re.escape(extension.lstrip(".")) + r"\Z", re.IGNORECASE)


def _list_directory(directory: str) -> Tuple[List[str], List[str]]:
    """Return ``(subdirectories, other_entries)`` of ``directory`` as full paths."""

    subdirs: List[str] = []
    entries: List[str] = []
    with os.scandir(directory) as iterator:
        for entry in iterator:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)
            else:
                entries.append(entry.path)
    return subdirs, entries


def find_rom_files(
    root: Union[str, Path],
    extension: str = "gba",
    *,
    workers: int = 1,
    sort: bool = True,
) -> List[Path]:
    """Return every non-directory entry below ``root`` matching ``extension``.

    Sibling directories of one level are listed concurrently when
    ``workers > 1``. Any listing error, including one for ``root`` itself,
    propagates to the caller.
    """

    pattern = extension_pattern(extension)
    pending = [str(normalise_path(root))]
    matches: List[str] = []
    executor: Optional[ThreadPoolExecutor] = None
    if workers > 1:
        executor = ThreadPoolExecutor(max_workers=workers)
    try:
        while pending:
            if executor is not None:
                listings = list(executor.map(_list_directory, pending))
            else:
                listings = [_list_directory(directory) for directory in pending]
            pending = []
            for subdirs, entries in listings:
                pending.extend(subdirs)
                matches.extend(path for path in entries if pattern.search(path))
    finally:
        if executor is not None:
            executor.shutdown()
    if sort:
        matches.sort()
    LOGGER.debug("Found %d ROM files below %s", len(matches), root)
    return [Path(path) for path in matches]
