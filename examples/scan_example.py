"""Example script showing how to run the ROM catalog scanner programmatically."""
from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from romcatalog import CatalogScanner, ScanConfig  # type: ignore  # noqa: E402
from romutils import configure_logging  # type: ignore  # noqa: E402


def main() -> None:
    configure_logging("INFO")
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    scanner = CatalogScanner()
    for record in scanner.scan(ScanConfig(root=root, workers=4)):
        print(f"{record.game_code}  {record.display_title}  ({record.path})")
    print(scanner.summary.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
