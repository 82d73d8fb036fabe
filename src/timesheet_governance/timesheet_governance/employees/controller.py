from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.http import json_errors, ok, parse_int_arg
from ..core.exceptions import ValidationError


def _parse_bool_arg(value: Optional[str], field_name: str) -> Optional[bool]:
    if value is None or value == "":
        return None
    if value.lower() in ("true", "1"):
        return True
    if value.lower() in ("false", "0"):
        return False
    raise ValidationError(f"{field_name} inválido")


def register(app: Flask, container) -> None:
    service = container.employee_service

    @app.get("/employees", endpoint="employees_list")
    @json_errors
    def employees_list():
        args = request.args
        items = service.list_employees(
            sector_id=parse_int_arg(args.get("sectorId"), "Setor"),
            active=_parse_bool_arg(args.get("active"), "Ativo"),
        )
        return ok(items)

    @app.get("/employees/<int:employee_id>", endpoint="employees_detail")
    @json_errors
    def employees_detail(employee_id: int):
        return ok(service.get_employee(employee_id))

    @app.get("/sectors", endpoint="sectors_list")
    @json_errors
    def sectors_list():
        return ok(service.list_sectors())

    @app.get("/sectors/<int:sector_id>", endpoint="sectors_detail")
    @json_errors
    def sectors_detail(sector_id: int):
        return ok(service.get_sector(sector_id))
