from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest

from romcatalog import CatalogRecord, CatalogScanner, CatalogWriter, RomHeader, ScanConfig


def _scan(root: Path, **kwargs: object) -> tuple[CatalogScanner, list[CatalogRecord]]:
    scanner = CatalogScanner()
    records = list(scanner.scan(ScanConfig(root=root, **kwargs)))
    return scanner, records


def test_valid_rom_yields_record(tmp_path: Path, make_rom: Callable[..., Path]) -> None:
    path = make_rom("0001 - Game Title (E).gba", b"GAME TITLE", b"ABCD")
    _, records = _scan(tmp_path / "roms")
    assert len(records) == 1
    record = records[0]
    assert record.key == "GAME TITLE  ABCD"
    assert record.game_code == "ABCD"
    assert record.display_title == "Game Title"
    assert record.path == path
    assert record.as_line() == "GAME TITLE  ABCD|ABCD|Game Title\r\n"


def test_blank_and_non_ascii_keys_are_skipped(tmp_path: Path, make_rom: Callable[..., Path]) -> None:
    make_rom("blank.gba")
    make_rom("accent.gba", b"CAF\xc9", b"CAFE")
    make_rom("good.gba", b"GOOD", b"GD01")
    scanner, records = _scan(tmp_path / "roms")
    assert [record.display_title for record in records] == ["good"]
    assert scanner.summary.files_found == 3
    assert scanner.summary.skipped_invalid == 2
    assert scanner.summary.records_emitted == 1


def test_read_errors_are_counted_and_skipped(tmp_path: Path, make_rom: Callable[..., Path]) -> None:
    make_rom("a.gba", b"ALPHA", b"AAAA")
    make_rom("b.gba", b"BRAVO", b"BBBB")

    def flaky_reader(path: Path):
        if path.name == "a.gba":
            return None
        return RomHeader(game_title="BRAVO       ", game_code="BBBB")

    scanner = CatalogScanner(reader=flaky_reader)
    records = list(scanner.scan(ScanConfig(root=tmp_path / "roms")))
    assert [record.key for record in records] == ["BRAVO       BBBB"]
    assert scanner.summary.read_errors == 1


def test_parallel_reads_keep_path_order(tmp_path: Path, make_rom: Callable[..., Path]) -> None:
    for index in range(8):
        make_rom(f"{index:04d} - Game {index}.gba", f"GAME{index}".encode(), f"G{index:03d}".encode())
    _, sequential = _scan(tmp_path / "roms")
    _, parallel = _scan(tmp_path / "roms", workers=4)
    assert [record.key for record in parallel] == [record.key for record in sequential]
    assert [record.display_title for record in parallel][:2] == ["Game 0", "Game 1"]


def test_scan_config_validation(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ScanConfig(root=tmp_path, workers=0)
    with pytest.raises(ValueError):
        ScanConfig(root=tmp_path, extension=".")
    assert ScanConfig(root=str(tmp_path), extension=".GBA").extension == "GBA"


def test_missing_root_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _scan(tmp_path / "missing")


def test_writer_emits_crlf_lines() -> None:
    stream = io.BytesIO()
    writer = CatalogWriter(stream)
    writer.extend(
        [
            CatalogRecord(key="GAME TITLE  ABCD", game_code="ABCD", display_title="Game"),
            CatalogRecord(key="OTHER GAME  XY Z", game_code="XY Z", display_title="Ünïcode"),
        ]
    )
    writer.close()
    assert stream.getvalue() == (
        b"GAME TITLE  ABCD|ABCD|Game\r\n" + "OTHER GAME  XY Z|XY Z|Ünïcode\r\n".encode("utf-8")
    )
    assert writer.count == 2


def test_writer_propagates_write_errors() -> None:
    stream = io.BytesIO()
    stream.close()
    writer = CatalogWriter(stream)
    with pytest.raises(ValueError):
        writer.append(CatalogRecord(key="K", game_code="C", display_title="T"))
