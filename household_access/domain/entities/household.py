"""
Household Entity

Tenant boundary owning members, invitations and settings.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from household_access.domain.clock import utcnow

DEFAULT_MAX_MEMBERS = 10
DEFAULT_LOW_STOCK_THRESHOLD = 2


class HouseholdSettings(BaseModel):
    """Typed view over the JSON settings column"""

    max_members: int = DEFAULT_MAX_MEMBERS
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    currency: str = "USD"
    default_unit: str = "pieces"
    expiration_warning_days: int = 7
    allow_guest_view: bool = False


class Household(SQLModel, table=True):
    """
    Household entity - tenant boundary for all authorization scoping.

    Business Rules:
    - Creator becomes the first owner membership
    - member_count is maintained, never recomputed; it must equal the
      number of active memberships
    - Soft delete: is_active=False and deleted_at stamped
    """

    __tablename__ = "households"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)

    owner_id: str = Field(max_length=255, index=True)  # creator's external id
    member_count: int = Field(default=0)
    settings: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Shareable join code; any signed-in user holding it can join as a member
    invite_code: Optional[str] = Field(default=None, max_length=32, unique=True, index=True)
    invite_code_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    is_active: bool = Field(default=True)
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_household_is_active", "is_active"),)

    def get_settings(self) -> HouseholdSettings:
        return HouseholdSettings(**(self.settings or {}))
