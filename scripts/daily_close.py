"""Fechamento diário (worklog + ocorrências) de todos os colaboradores ativos.

Meant to be triggered by cron at DAILY_CLOSE_CRON (default "30 18 * * 1-5").
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.timesheet_governance.timesheet_governance.common.datetime_utils import parse_iso_date
from src.timesheet_governance.timesheet_governance.common.logging_utils import configure_logging
from src.timesheet_governance.timesheet_governance.container import build_container
from src.timesheet_governance.timesheet_governance.jobs.daily_close import crontab_line, run_daily_close
from src.timesheet_governance.timesheet_governance.settings import load_settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the daily worklog close")
    parser.add_argument("--date", type=parse_iso_date, default=None, help="Work date (YYYY-MM-DD), default today")
    parser.add_argument("--print-cron", action="store_true", help="Print the crontab line for DAILY_CLOSE_CRON and exit")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = load_settings(get_settings_module())
    configure_logging(settings.debug)

    if args.print_cron:
        command = f"cd {REPO_ROOT} && {sys.executable} scripts/daily_close.py"
        print(crontab_line(settings.daily_close_cron, command))
        return 0

    container = build_container(settings)
    result = run_daily_close(container.worklog_service, args.date, tz=settings.tz)

    print(f"OK: {result.work_date.isoformat()} processed={result.processed} errors={result.errors}")
    return 1 if result.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
