from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Tipo de marcação vinda do relógio de ponto."""

    ENTRY = "ENTRY"
    EXIT = "EXIT"


class OccurrenceType(str, Enum):
    """Desvio diário apurado pelo cálculo do worklog."""

    LATE = "LATE"
    OVER = "OVER"
    UNDER = "UNDER"
    INCOMPLETE = "INCOMPLETE"


class OccurrenceStatus(str, Enum):
    """Estado do fluxo de ciência/resolução de uma ocorrência."""

    OPEN = "OPEN"
    ACK = "ACK"
    RESOLVED = "RESOLVED"


class WorklogStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    ERROR = "ERROR"


class JustificationCategory(str, Enum):
    MEDICAL = "MEDICAL"
    PERSONAL = "PERSONAL"
    TRAFFIC = "TRAFFIC"
    WORK_OFFSITE = "WORK_OFFSITE"
    MEETING = "MEETING"
    OTHER = "OTHER"


class ResolveAction(str, Enum):
    """Decisão do gestor sobre uma ocorrência."""

    APPROVE = "approve"
    ADJUST = "adjust"
    REQUEST_DETAILS = "request_details"
