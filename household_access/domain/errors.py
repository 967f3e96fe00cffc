"""
Error codes returned by use cases.

The first block is the access-control taxonomy; every one of those is an
expected, caller-recoverable outcome. The second block covers lookups and
input validation.
"""

NOT_A_MEMBER = "NOT_A_MEMBER"
PERMISSION_DENIED = "PERMISSION_DENIED"
INVITATION_NOT_PENDING = "INVITATION_NOT_PENDING"
MEMBER_LIMIT_REACHED = "MEMBER_LIMIT_REACHED"
LAST_OWNER_PROTECTED = "LAST_OWNER_PROTECTED"
SELF_ESCALATION_DENIED = "SELF_ESCALATION_DENIED"
EMAIL_MISMATCH = "EMAIL_MISMATCH"

HOUSEHOLD_NOT_FOUND = "HOUSEHOLD_NOT_FOUND"
MEMBERSHIP_NOT_FOUND = "MEMBERSHIP_NOT_FOUND"
INVITATION_NOT_FOUND = "INVITATION_NOT_FOUND"
ALREADY_MEMBER = "ALREADY_MEMBER"
INVITE_ALREADY_EXISTS = "INVITE_ALREADY_EXISTS"
INVALID_ROLE = "INVALID_ROLE"
INVALID_PERMISSION = "INVALID_PERMISSION"
INVALID_SETTINGS = "INVALID_SETTINGS"
INVALID_NAME = "INVALID_NAME"
INVALID_ACTION = "INVALID_ACTION"
INVALID_STATUS = "INVALID_STATUS"
INVALID_TTL = "INVALID_TTL"
INVALID_INVITE_CODE = "INVALID_INVITE_CODE"
INVITE_CODE_EXPIRED = "INVITE_CODE_EXPIRED"
INVALID_TRANSFER_TARGET = "INVALID_TRANSFER_TARGET"
