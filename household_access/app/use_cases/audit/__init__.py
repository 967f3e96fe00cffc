"""
Audit Use Cases
"""

from .dtos import AuditEventInfo, AuditEventsResponse
from .get_audit_events_use_case import GetAuditEventsUseCase

__all__ = [
    "AuditEventInfo",
    "AuditEventsResponse",
    "GetAuditEventsUseCase",
]
