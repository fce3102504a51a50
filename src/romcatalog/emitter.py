"""Write catalog records to a byte stream."""
from __future__ import annotations

from typing import BinaryIO, Iterable

from romutils.logging import get_logger

from .schema import CatalogRecord

LOGGER = get_logger(__name__)

OUTPUT_ENCODING = "utf-8"


class CatalogWriter:
    """Stream catalog lines verbatim, CRLF included, to ``stream``.

    Write errors are not caught.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream
        self.count = 0

    def append(self, record: CatalogRecord) -> None:
        self.stream.write(record.as_line().encode(OUTPUT_ENCODING, "surrogateescape"))
        self.count += 1

    def extend(self, records: Iterable[CatalogRecord]) -> int:
        for record in records:
            self.append(record)
        return self.count

    def close(self) -> None:
        self.stream.flush()
        LOGGER.debug("Wrote %d catalog lines", self.count)
