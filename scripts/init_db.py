from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timesheet_governance.timesheet_governance.common.logging_utils import configure_logging
from src.timesheet_governance.timesheet_governance.database.bootstrap import apply_schema, list_tables
from src.timesheet_governance.timesheet_governance.database.connection import DatabaseConnection
from src.timesheet_governance.timesheet_governance.settings import load_settings


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings(get_settings_module())
    configure_logging(settings.debug)

    conn = DatabaseConnection(settings.db)
    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(conn)
    print(
        "OK: Applied schema.sql -> "
        f"{settings.db.user}@{settings.db.host}:{settings.db.port}/{settings.db.database} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
