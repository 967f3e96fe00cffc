from typing import NoReturn
from uuid import UUID

from fastapi import status

from household_access.domain import errors
from household_access.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


CLIENT_ERROR_STATUS = {
    errors.NOT_A_MEMBER: status.HTTP_403_FORBIDDEN,
    errors.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    errors.SELF_ESCALATION_DENIED: status.HTTP_403_FORBIDDEN,
    errors.EMAIL_MISMATCH: status.HTTP_403_FORBIDDEN,
    errors.HOUSEHOLD_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.MEMBERSHIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.INVITATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.INVALID_INVITE_CODE: status.HTTP_404_NOT_FOUND,
    errors.INVITATION_NOT_PENDING: status.HTTP_409_CONFLICT,
    errors.MEMBER_LIMIT_REACHED: status.HTTP_409_CONFLICT,
    errors.LAST_OWNER_PROTECTED: status.HTTP_409_CONFLICT,
    errors.ALREADY_MEMBER: status.HTTP_409_CONFLICT,
    errors.INVITE_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    errors.INVITE_CODE_EXPIRED: status.HTTP_409_CONFLICT,
    errors.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_PERMISSION: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_SETTINGS: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_NAME: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_ACTION: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_TTL: status.HTTP_400_BAD_REQUEST,
    errors.INVALID_TRANSFER_TARGET: status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: Error) -> NoReturn:
    """Translate a use case error into the matching HTTP error"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


def parse_uuid(value: str, code: str, label: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(code, f"Invalid {label} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
