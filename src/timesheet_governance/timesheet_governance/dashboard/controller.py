from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import json_errors, ok, parse_date_arg


def register(app: Flask, container) -> None:
    service = container.dashboard_service

    def requested_date():
        return parse_date_arg(request.args.get("date")) or now_local(container.settings.tz).date()

    @app.get("/dashboard/kpis", endpoint="dashboard_kpis")
    @json_errors
    def dashboard_kpis():
        return ok(service.kpis(requested_date()))

    @app.get("/dashboard/daily-summary", endpoint="dashboard_daily_summary")
    @json_errors
    def dashboard_daily_summary():
        return ok(service.daily_summary(requested_date()))

    @app.get("/dashboard/sectors", endpoint="dashboard_sectors")
    @json_errors
    def dashboard_sectors():
        return ok(service.sector_stats())

    @app.get("/dashboard/recent-occurrences", endpoint="dashboard_recent_occurrences")
    @json_errors
    def dashboard_recent_occurrences():
        return ok(service.recent_occurrences())
