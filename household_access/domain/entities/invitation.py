"""
Invitation Entity

Token-addressed, time-bounded offers to join a household.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from household_access.domain.clock import utcnow

from .enums import InvitationStatus, MembershipRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - offer to join a household with a given role.

    Business Rules:
    - Role is admin or member, never owner
    - Expires after INVITATION_TTL_HOURS (72 by default)
    - Expiry is lazy: a stored pending invitation past expires_at reads
      as expired
    - pending -> accepted | declined | expired; terminal states are final
    - Email is matched exactly as stored
    """

    __tablename__ = "household_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    household_id: UUID = Field(foreign_key="households.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    invited_by: str = Field(max_length=255, nullable=False)
    invite_token: str = Field(unique=True, index=True, max_length=64)

    status: InvitationStatus = Field(default=InvitationStatus.pending)
    message: Optional[str] = Field(default=None, max_length=1000)

    accepted_by: Optional[str] = Field(default=None, max_length=255)
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_household_email", "household_id", "email"),
        Index("idx_invitation_status", "status"),
    )
