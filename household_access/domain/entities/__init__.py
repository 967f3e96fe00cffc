"""
Household Access Domain Entities

All domain entities organized by model.
"""

from .enums import (
    INVITABLE_ROLES,
    InvitationStatus,
    MemberAction,
    MembershipRole,
    Permission,
)

from .household import Household, HouseholdSettings
from .membership import Membership
from .invitation import Invitation
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "INVITABLE_ROLES",
    "InvitationStatus",
    "MemberAction",
    "MembershipRole",
    "Permission",
    # Entities
    "Household",
    "HouseholdSettings",
    "Membership",
    "Invitation",
    "AuditEvent",
]
