from __future__ import annotations

import logging

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.http import ok
from ..database.bootstrap import list_tables

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def register(app: Flask, container) -> None:
    @app.get("/health", endpoint="health")
    def health():
        try:
            list_tables(container.conn)
            database = "connected"
        except Exception:
            logger.warning("Health check: database unreachable", exc_info=True)
            database = "disconnected"

        return ok(
            {
                "status": "ok" if database == "connected" else "error",
                "timestamp": now_local(container.settings.tz).isoformat(),
                "version": VERSION,
                "database": database,
            }
        )
