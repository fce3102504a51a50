"""Path utility helpers."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def normalise_path(path: Union[str, Path]) -> Path:
    """Return an absolute path without resolving symlinks."""

    return Path(os.path.abspath(os.fspath(path)))
