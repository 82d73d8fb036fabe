from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo

from .core.constants import DEFAULT_DAILY_CLOSE_CRON, DEFAULT_TIMEZONE
from .core.exceptions import ValidationError
from .database.connection import DBConfig
from .worklog.model import DEFAULT_WORKDAY_CONFIG, LunchPolicy, WorkdayConfig


@dataclass(frozen=True)
class AppSettings:
    """Settings read once at startup and passed explicitly to the container."""

    secret_key: str
    debug: bool
    db: DBConfig
    timezone: str = DEFAULT_TIMEZONE
    workday: WorkdayConfig = DEFAULT_WORKDAY_CONFIG
    daily_close_cron: str = DEFAULT_DAILY_CLOSE_CRON
    auto_init_db: bool = False

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def workday_config_from_dict(values: Optional[Mapping[str, Any]]) -> WorkdayConfig:
    """Build a WorkdayConfig; missing keys fall back to the default workday.

    lunch_duration_minutes=0 (or None) disables the lunch deduction.
    """
    if not values:
        return DEFAULT_WORKDAY_CONFIG

    d = DEFAULT_WORKDAY_CONFIG
    default_lunch = d.lunch_policy

    def get_int(key: str, fallback: int) -> int:
        raw = values.get(key, fallback)
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValidationError(f"Configuração de jornada inválida: {key}={raw!r}")

    lunch_duration = values.get("lunch_duration_minutes", default_lunch.duration_minutes)
    lunch = None
    if lunch_duration:
        lunch = LunchPolicy(
            start_hour=get_int("lunch_start_hour", default_lunch.start_hour),
            start_minute=get_int("lunch_start_minute", default_lunch.start_minute),
            duration_minutes=get_int("lunch_duration_minutes", default_lunch.duration_minutes),
        )

    return WorkdayConfig(
        expected_start_hour=get_int("expected_start_hour", d.expected_start_hour),
        expected_start_minute=get_int("expected_start_minute", d.expected_start_minute),
        expected_end_hour=get_int("expected_end_hour", d.expected_end_hour),
        expected_end_minute=get_int("expected_end_minute", d.expected_end_minute),
        expected_work_minutes=get_int("expected_work_minutes", d.expected_work_minutes),
        tolerance_minutes=get_int("tolerance_minutes", d.tolerance_minutes),
        lunch_policy=lunch,
    )


def settings_from_module(settings: ModuleType) -> AppSettings:
    return AppSettings(
        secret_key=str(getattr(settings, "SECRET_KEY")),
        debug=bool(getattr(settings, "DEBUG", False)),
        db=DBConfig.from_dict(getattr(settings, "DB_CONFIG")),
        timezone=str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
        workday=workday_config_from_dict(getattr(settings, "WORKDAY", None)),
        daily_close_cron=str(getattr(settings, "DAILY_CLOSE_CRON", DEFAULT_DAILY_CLOSE_CRON)),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )


def load_settings(settings_module: str) -> AppSettings:
    return settings_from_module(importlib.import_module(settings_module))
