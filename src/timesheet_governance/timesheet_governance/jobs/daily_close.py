from __future__ import annotations

import logging
from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..worklog.service import DailyCloseResult, WorklogService

logger = logging.getLogger(__name__)


def run_daily_close(
    service: WorklogService,
    work_date: Optional[date] = None,
    *,
    tz: Optional[ZoneInfo] = None,
) -> DailyCloseResult:
    """Fechamento diário: calcula e grava o worklog de todos os colaboradores ativos.

    Scheduling is external (cron, using DAILY_CLOSE_CRON); this only runs one pass.
    """
    target = work_date or now_local(tz).date()
    logger.info("Daily close started date=%s", target.isoformat())

    result = service.process_day_for_all_employees(target)

    logger.info(
        "Daily close completed date=%s processed=%s errors=%s",
        target.isoformat(),
        result.processed,
        result.errors,
    )
    return result


def crontab_line(cron: str, command: str) -> str:
    """Render the crontab entry that triggers the daily close."""
    fields = cron.split()
    if len(fields) != 5:
        raise ValidationError(f"Expressão cron inválida: {cron!r}")
    return f"{' '.join(fields)} {command}"
