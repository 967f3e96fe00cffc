"""
AuditEvent Entity

Immutable log of household access-control events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from household_access.domain.clock import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - one row per mutating access-control operation.

    Business Rules:
    - Immutable (never updated or deleted)
    - user_id is the acting principal's external id
    - Metadata stores operation context (target user, old/new role, ...)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    household_id: Optional[UUID] = Field(default=None, index=True)
    user_id: Optional[str] = Field(default=None, max_length=255, index=True)

    action: str = Field(max_length=100)  # e.g., "member_removed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_household_action", "household_id", "action"),
    )
