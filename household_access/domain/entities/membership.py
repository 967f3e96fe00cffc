"""
Membership Entity

Binds an external user to a household with a role and optional
permission overrides.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from household_access.domain.clock import utcnow

from .enums import MembershipRole


class Membership(SQLModel, table=True):
    """
    Membership entity - the unit every authorization check resolves against.

    Business Rules:
    - (household_id, user_id) must be unique
    - permissions is a partial override map {permission_key: bool}; keys
      that are absent fall back to the role default
    - Inactive memberships carry no permissions at all
    - At least one active owner per household (checked on removal)
    """

    __tablename__ = "household_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    household_id: UUID = Field(foreign_key="households.id", nullable=False, index=True)
    user_id: str = Field(max_length=255, nullable=False, index=True)
    email: Optional[str] = Field(default=None, max_length=255)

    role: MembershipRole = Field(nullable=False)
    permissions: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    is_active: bool = Field(default=True)
    invited_by: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_active_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_membership_household_user", "household_id", "user_id", unique=True),
        Index("idx_membership_household_active", "household_id", "is_active"),
    )
