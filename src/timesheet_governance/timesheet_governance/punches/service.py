from __future__ import annotations

import logging
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..integrations.punch_mapping import extract_items, normalize_punch
from .model import NewPunchEvent, PunchImportResult
from .repository import PunchRepository

logger = logging.getLogger(__name__)


class PunchImportService:
    """Stores punches read from the provider; the provider itself is never written to.

    Records are handled one by one: a malformed record or an unknown employee
    is logged and counted, the rest of the batch is still stored.
    """

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository, *, tz: Optional[ZoneInfo] = None):
        self._punches = punches
        self._employees = employees
        self._tz = tz or ZoneInfo(DEFAULT_TIMEZONE)

    def import_payload(self, payload: Any) -> PunchImportResult:
        items = extract_items(payload)
        events: list[NewPunchEvent] = []
        unknown = 0
        invalid = 0

        for item in items:
            try:
                provider_punch = normalize_punch(item)
            except ValidationError as e:
                logger.warning("Skipping malformed punch record %r: %s", item, e)
                invalid += 1
                continue

            employee = self._employees.get_by_provider_id(provider_punch.provider_employee_id)
            if not employee:
                logger.warning("No employee for provider id=%s", provider_punch.provider_employee_id)
                unknown += 1
                continue

            local = provider_punch.to_punch(self._tz)
            events.append(
                NewPunchEvent(
                    employee_id=employee.employee_id,
                    timestamp=local.timestamp.replace(tzinfo=None),
                    type=local.type,
                    source_payload=provider_punch.source_payload,
                )
            )

        saved = self._punches.add_many(events) if events else 0
        result = PunchImportResult(
            received=len(items),
            saved=saved,
            duplicates=len(events) - saved,
            unknown_employees=unknown,
            invalid=invalid,
        )
        logger.info(
            "Punch import received=%s saved=%s duplicates=%s unknown=%s invalid=%s",
            result.received,
            result.saved,
            result.duplicates,
            result.unknown_employees,
            result.invalid,
        )
        return result
