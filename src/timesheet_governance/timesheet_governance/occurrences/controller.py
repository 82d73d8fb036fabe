from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import json_errors, ok, parse_date_arg, parse_int_arg
from ..core.exceptions import ValidationError
from ..jobs.daily_close import run_daily_close


def register(app: Flask, container) -> None:
    service = container.occurrence_service

    @app.get("/occurrences", endpoint="occurrences_list")
    @json_errors
    def occurrences_list():
        args = request.args
        items = service.list_occurrences(
            work_date=parse_date_arg(args.get("date")),
            status=args.get("status"),
            employee_id=parse_int_arg(args.get("employeeId"), "Colaborador"),
            type=args.get("type"),
        )
        return ok(items)

    @app.get("/occurrences/stats", endpoint="occurrences_stats")
    @json_errors
    def occurrences_stats():
        tz = container.settings.tz
        work_date = parse_date_arg(request.args.get("date")) or now_local(tz).date()
        return ok(service.stats(work_date))

    @app.get("/occurrences/<int:occurrence_id>", endpoint="occurrences_detail")
    @json_errors
    def occurrences_detail(occurrence_id: int):
        occ = service.get_occurrence(occurrence_id)
        justifications = service.list_justifications(occurrence_id=occurrence_id)
        return ok({"occurrence": occ, "justifications": justifications})

    @app.post("/occurrences/<int:occurrence_id>/ack", endpoint="occurrences_ack")
    @json_errors
    def occurrences_ack(occurrence_id: int):
        return ok(service.acknowledge(occurrence_id))

    @app.post("/occurrences/<int:occurrence_id>/resolve", endpoint="occurrences_resolve")
    @json_errors
    def occurrences_resolve(occurrence_id: int):
        body = request.get_json(silent=True) or {}
        outcome = service.resolve(occurrence_id, body.get("action"), body.get("note") or "")
        return ok(outcome.occurrence, message=outcome.message)

    @app.post("/justifications", endpoint="justifications_create")
    @json_errors
    def justifications_create():
        body = request.get_json(silent=True) or {}
        occurrence_id = parse_int_arg(body.get("occurrenceId"), "Ocorrência")
        if occurrence_id is None:
            raise ValidationError("Dados inválidos: occurrenceId é obrigatório")

        notify_hr = body.get("notifyHR", False)
        if not isinstance(notify_hr, bool):
            raise ValidationError("Dados inválidos: notifyHR deve ser booleano")

        receipt = service.justify(
            occurrence_id=occurrence_id,
            text=body.get("text") or "",
            category=body.get("category"),
            notify_hr=notify_hr,
        )
        return ok(receipt, status=201)

    @app.get("/justifications", endpoint="justifications_list")
    @json_errors
    def justifications_list():
        args = request.args
        items = service.list_justifications(
            occurrence_id=parse_int_arg(args.get("occurrenceId"), "Ocorrência"),
            employee_id=parse_int_arg(args.get("employeeId"), "Colaborador"),
            work_date=parse_date_arg(args.get("date")),
        )
        return ok(items)

    @app.get("/justifications/<int:justification_id>", endpoint="justifications_detail")
    @json_errors
    def justifications_detail(justification_id: int):
        return ok(service.get_justification(justification_id))

    @app.post("/worklogs/close", endpoint="worklogs_close")
    @json_errors
    def worklogs_close():
        body = request.get_json(silent=True) or {}
        result = run_daily_close(
            container.worklog_service,
            parse_date_arg(body.get("date")),
            tz=container.settings.tz,
        )
        return ok(result)
