from __future__ import annotations

import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import configure_logging
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema
from .employees.controller import register as register_employees
from .health.controller import register as register_health
from .occurrences.controller import register as register_occurrences
from .punches.controller import register as register_punches
from .settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> Flask:
    load_dotenv(override=False)
    if settings is None:
        settings = load_settings(get_settings_module())

    configure_logging(settings.debug)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug

    container = build_container(settings)

    logger.info(
        "Starting timesheet-governance db=%s@%s:%s/%s tz=%s",
        settings.db.user,
        settings.db.host,
        settings.db.port,
        settings.db.database,
        settings.timezone,
    )

    if settings.auto_init_db:
        apply_schema(container.conn)

    register_health(app, container)
    register_occurrences(app, container)
    register_employees(app, container)
    register_dashboard(app, container)
    register_punches(app, container)

    return app
