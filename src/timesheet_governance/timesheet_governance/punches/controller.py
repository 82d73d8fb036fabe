from __future__ import annotations

from flask import Flask, request

from ..common.http import json_errors, ok
from ..core.exceptions import ValidationError


def register(app: Flask, container) -> None:
    service = container.punch_import_service

    @app.post("/punches/import", endpoint="punches_import")
    @json_errors
    def punches_import():
        payload = request.get_json(silent=True)
        if not isinstance(payload, (list, dict)):
            raise ValidationError("Dados inválidos: esperado JSON com as marcações")
        return ok(service.import_payload(payload))
