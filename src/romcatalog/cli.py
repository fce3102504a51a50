"""Typer-based command line interface for gba-romname-gen."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional, Sequence

import typer
import yaml
from pydantic import ValidationError

from romutils.config import AppConfig, config_from_env
from romutils.logging import configure_logging, get_logger
from romutils.paths import normalise_path

from .emitter import CatalogWriter
from .scanner import CatalogScanner, ScanConfig

LOGGER = get_logger(__name__)

HELP_FLAGS = ("--help", "-h")
DEFAULT_PROG_NAME = "gba-romname-gen"

app = typer.Typer(add_completion=False)


def usage(prog: str) -> str:
    return f"Usage:\n\t{Path(prog).name} <gba_roms_path>"


def catalog_roms(roms_path: str, config: AppConfig, stream: BinaryIO) -> int:
    """Write the catalog for ``roms_path`` to ``stream`` and return an exit status."""

    scanner = CatalogScanner()
    scan_config = ScanConfig.from_app_config(normalise_path(roms_path), config)
    try:
        paths = scanner.discover(scan_config)
    except OSError as exc:
        LOGGER.error("Error processing ROMs in %s: %s", roms_path, exc)
        return 1

    writer = CatalogWriter(stream)
    try:
        writer.extend(scanner.records(paths, scan_config))
        writer.close()
    except OSError as exc:
        LOGGER.error("Error writing catalog output: %s", exc)
        return 1
    LOGGER.info("Catalog summary: %s", scanner.summary.model_dump_json())
    return 0


@app.command(add_help_option=False)
def main(roms_path: str = typer.Argument(..., metavar="GBA_ROMS_PATH")) -> None:
    """Print ``key|code|title`` lines for every GBA ROM below GBA_ROMS_PATH."""

    configure_logging()
    try:
        config = config_from_env()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    configure_logging(config.log_level)
    try:
        status = catalog_roms(roms_path, config, typer.get_binary_stream("stdout"))
    except Exception as exc:
        LOGGER.critical("An unexpected error occurred: %s", exc, exc_info=True)
        status = 1
    if status:
        raise typer.Exit(code=status)


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Console entry point; argument count is checked on the raw argv."""

    args = list(sys.argv[1:] if argv is None else argv)
    prog = Path(sys.argv[0]).name or DEFAULT_PROG_NAME
    if len(args) != 1 or any(arg in HELP_FLAGS for arg in args):
        typer.echo(usage(prog))
        return
    app(args=["--", args[0]], prog_name=prog)


if __name__ == "__main__":
    run()
