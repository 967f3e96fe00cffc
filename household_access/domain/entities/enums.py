"""
Household Access Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """Role of a user within a household"""

    owner = "owner"
    admin = "admin"
    member = "member"


class Permission(str, Enum):
    """Household permission keys (role defaults live in policies.permissions)"""

    can_manage_inventory = "can_manage_inventory"
    can_manage_shopping_lists = "can_manage_shopping_lists"
    can_manage_categories = "can_manage_categories"
    can_invite_members = "can_invite_members"
    can_manage_members = "can_manage_members"
    can_edit_household_settings = "can_edit_household_settings"
    can_delete_household = "can_delete_household"


class InvitationStatus(str, Enum):
    """Invitation status"""

    pending = "pending"
    accepted = "accepted"
    declined = "declined"
    expired = "expired"


class MemberAction(str, Enum):
    """Management actions one member may attempt on another"""

    remove = "remove"
    update_role = "update_role"
    update_permissions = "update_permissions"
    view_details = "view_details"


INVITABLE_ROLES = (MembershipRole.admin, MembershipRole.member)
