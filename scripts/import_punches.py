"""Grava localmente as marcações de um JSON exportado do provedor de ponto.

Read-only towards the provider: the file is an export, nothing is sent back.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timesheet_governance.timesheet_governance.common.logging_utils import configure_logging
from src.timesheet_governance.timesheet_governance.container import build_container
from src.timesheet_governance.timesheet_governance.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import provider punches from a JSON file")
    parser.add_argument("path", type=Path, help="Provider JSON (a list or an object wrapping the list)")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = load_settings(get_settings_module())
    configure_logging(settings.debug)

    payload = json.loads(args.path.read_text(encoding="utf-8"))
    container = build_container(settings)
    result = container.punch_import_service.import_payload(payload)

    print(
        f"OK: received={result.received} saved={result.saved} duplicates={result.duplicates} "
        f"unknown={result.unknown_employees} invalid={result.invalid}"
    )
    return 1 if result.invalid or result.unknown_employees else 0


if __name__ == "__main__":
    raise SystemExit(main())
