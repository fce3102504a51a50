from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


def rom_bytes(title: bytes = b"", code: bytes = b"", size: int = 0xC0) -> bytes:
    """Build a fake ROM image with ``title``/``code`` at the header offsets."""

    data = bytearray(max(size, 0xB0))
    data[0xA0:0xA0 + len(title[:12])] = title[:12]
    data[0xAC:0xAC + len(code[:4])] = code[:4]
    return bytes(data[:size])


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GBA_ROMNAME_CONFIG", str(tmp_path / "no-config.yml"))
    monkeypatch.delenv("GBA_ROMNAME_LOG_LEVEL", raising=False)


@pytest.fixture
def make_rom(tmp_path: Path) -> Callable[..., Path]:
    def _make(relative: str, title: bytes = b"", code: bytes = b"", size: int = 0xC0) -> Path:
        path = tmp_path / "roms" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(rom_bytes(title, code, size))
        return path

    return _make
