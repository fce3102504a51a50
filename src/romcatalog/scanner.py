"""Pipeline turning a directory of ROM images into catalog records."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from romutils.config import AppConfig
from romutils.logging import get_logger

from .header import read_header
from .schema import CatalogRecord, RomHeader, ScanSummary
from .titles import clean_title
from .walker import find_rom_files

LOGGER = get_logger(__name__)

HeaderReader = Callable[[Path], Optional[RomHeader]]


@dataclass(slots=True)
class ScanConfig:
    """Configuration parameters controlling scan behaviour."""

    root: Path
    extension: str = "gba"
    workers: int = 1
    sort_paths: bool = True

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.extension = self.extension.strip().lstrip(".")
        if not self.extension:
            raise ValueError("extension must not be empty")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")

    @classmethod
    def from_app_config(cls, root: Path, config: AppConfig) -> "ScanConfig":
        return cls(root=root, extension=config.extension, workers=config.workers, sort_paths=config.sort_paths)


@dataclass(slots=True)
class CatalogScanner:
    """Walk a ROM tree, read headers and yield the valid catalog records."""

    reader: HeaderReader = read_header
    summary: ScanSummary = field(default_factory=ScanSummary)

    def _read_headers(self, paths: List[Path], workers: int) -> Iterable[Tuple[Path, Optional[RomHeader]]]:
        if workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                yield from zip(paths, executor.map(self.reader, paths))
        else:
            for path in paths:
                yield path, self.reader(path)

    def build_record(self, path: Path, header: RomHeader, extension: str = "gba") -> Optional[CatalogRecord]:
        """Return the record for ``header`` or ``None`` if its key is unusable."""

        if not header.has_valid_key():
            return None
        return CatalogRecord.from_header(header, clean_title(path, extension), path=path)

    def discover(self, config: ScanConfig) -> List[Path]:
        """List the ROM files below ``config.root``; listing errors propagate."""

        self.summary = ScanSummary()
        paths = find_rom_files(
            config.root,
            config.extension,
            workers=config.workers,
            sort=config.sort_paths,
        )
        self.summary.files_found = len(paths)
        return paths

    def scan(self, config: ScanConfig) -> Iterator[CatalogRecord]:
        """Yield one record per valid ROM below ``config.root``."""

        yield from self.records(self.discover(config), config)

    def records(self, paths: List[Path], config: ScanConfig) -> Iterator[CatalogRecord]:
        """Yield the valid records for already discovered ``paths``."""

        for path, header in self._read_headers(paths, config.workers):
            if header is None:
                self.summary.read_errors += 1
                continue
            record = self.build_record(path, header, config.extension)
            if record is None:
                LOGGER.debug("Skipping %s: unusable key %r", path, header.key)
                self.summary.skipped_invalid += 1
                continue
            self.summary.records_emitted += 1
            yield record
