from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Optional, Sequence, TypeVar

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import JUSTIFICATION_MAX_LENGTH
from ..core.enums import JustificationCategory, OccurrenceStatus, OccurrenceType, ResolveAction
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Justification, JustificationReceipt, Occurrence, OccurrenceStats, ResolveOutcome
from .repository import OccurrenceRepository

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_RESOLVE_MESSAGES = {
    ResolveAction.APPROVE: "Ocorrência aprovada",
    ResolveAction.ADJUST: "Solicitação de ajuste registrada",
    ResolveAction.REQUEST_DETAILS: "Solicitação de mais detalhes registrada",
}


def parse_enum(enum_cls: type[E], value, field_name: str) -> Optional[E]:
    """Blank -> None; unknown value -> ValidationError."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} inválido: {value}")


class OccurrenceService:
    """Workflow das ocorrências: ciência (ACK), decisão do gestor e justificativas.

    OPEN -> ACK when the employee acknowledges or justifies; any non-resolved
    occurrence -> RESOLVED when the manager approves. adjust/request_details
    send it back to ACK so the employee can answer.

    update_status is True only when the row actually changed (MySQL rowcount), so
    same-status transitions are answered without touching the repository.
    """

    def __init__(self, occurrences: OccurrenceRepository, employees: EmployeeRepository):
        self._occurrences = occurrences
        self._employees = employees

    def list_occurrences(
        self,
        *,
        work_date: Optional[date] = None,
        status=None,
        employee_id: Optional[int] = None,
        type=None,
    ) -> Sequence[Occurrence]:
        return self._occurrences.list_filtered(
            work_date=work_date,
            status=parse_enum(OccurrenceStatus, status, "Status"),
            employee_id=employee_id,
            type=parse_enum(OccurrenceType, type, "Tipo"),
        )

    def get_occurrence(self, occurrence_id: int) -> Occurrence:
        occ = self._occurrences.get_by_id(int(occurrence_id))
        if not occ:
            raise NotFoundError("Ocorrência não encontrada")
        return occ

    def _set_status(self, occ: Occurrence, status: OccurrenceStatus) -> Occurrence:
        if occ.status == status:
            return occ
        if not self._occurrences.update_status(occurrence_id=occ.occurrence_id, status=status):
            raise ValidationError("Falha ao atualizar a ocorrência")
        return self.get_occurrence(occ.occurrence_id)

    def acknowledge(self, occurrence_id: int) -> Occurrence:
        occ = self.get_occurrence(occurrence_id)
        if occ.status != OccurrenceStatus.OPEN:
            raise ValidationError("Ocorrência já foi processada")
        return self._set_status(occ, OccurrenceStatus.ACK)

    def resolve(self, occurrence_id: int, action, note: str = "") -> ResolveOutcome:
        occ = self.get_occurrence(occurrence_id)
        if occ.status == OccurrenceStatus.RESOLVED:
            raise ValidationError("Ocorrência já foi resolvida")

        parsed = parse_enum(ResolveAction, action, "Ação")
        if parsed is None:
            raise ValidationError("Ação inválida")

        target = OccurrenceStatus.RESOLVED if parsed == ResolveAction.APPROVE else OccurrenceStatus.ACK
        updated = self._set_status(occ, target)
        logger.info(
            "Occurrence %s resolved action=%s status=%s note=%r",
            occ.occurrence_id,
            parsed.value,
            target.value,
            (note or "").strip() or None,
        )
        return ResolveOutcome(occurrence=updated, message=_RESOLVE_MESSAGES[parsed])

    def justify(
        self,
        *,
        occurrence_id: int,
        text: str,
        category=None,
        notify_hr: bool = False,
    ) -> JustificationReceipt:
        text = require_max_length(require_non_empty(text, "Texto"), "Texto", JUSTIFICATION_MAX_LENGTH)
        parsed_category = parse_enum(JustificationCategory, category, "Categoria")

        occ = self.get_occurrence(occurrence_id)
        justification_id = self._occurrences.create_justification(
            occurrence_id=occ.occurrence_id,
            employee_id=occ.employee_id,
            work_date=occ.work_date,
            text=text,
            category=parsed_category,
            notify_hr=bool(notify_hr),
        )

        if occ.status == OccurrenceStatus.OPEN:
            occ = self._set_status(occ, OccurrenceStatus.ACK)

        manager_id = None
        employee = self._employees.get_by_id(occ.employee_id)
        if employee:
            sector = self._employees.get_sector(employee.sector_id)
            manager_id = sector.manager_chat_user_id if sector else None

        return JustificationReceipt(
            justification=self.get_justification(justification_id),
            occurrence=occ,
            manager_chat_user_id=manager_id,
        )

    def get_justification(self, justification_id: int) -> Justification:
        j = self._occurrences.get_justification(int(justification_id))
        if not j:
            raise NotFoundError("Justificativa não encontrada")
        return j

    def list_justifications(
        self,
        *,
        occurrence_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[Justification]:
        return self._occurrences.list_justifications(
            occurrence_id=occurrence_id,
            employee_id=employee_id,
            work_date=work_date,
        )

    def stats(self, work_date: date) -> OccurrenceStats:
        by_status = self._occurrences.count_by_status(work_date=work_date)
        by_type = self._occurrences.count_by_type(work_date=work_date)
        return OccurrenceStats(
            work_date=work_date,
            total=sum(by_status.values()),
            open=by_status.get(OccurrenceStatus.OPEN.value, 0),
            ack=by_status.get(OccurrenceStatus.ACK.value, 0),
            resolved=by_status.get(OccurrenceStatus.RESOLVED.value, 0),
            by_type=dict(by_type),
        )
