from .create_household_use_case import CreateHouseholdUseCase
from .delete_household_use_case import DeleteHouseholdUseCase
from .dtos import (
    DeleteHouseholdResponse,
    HouseholdDetailResponse,
    HouseholdInfo,
    HouseholdListResponse,
    HouseholdResponse,
    InviteCodeResponse,
    JoinHouseholdResponse,
)
from .get_household_use_case import GetHouseholdUseCase
from .join_by_code_use_case import JoinByCodeUseCase
from .list_my_households_use_case import ListMyHouseholdsUseCase
from .regenerate_invite_code_use_case import RegenerateInviteCodeUseCase
from .update_household_settings_use_case import UpdateHouseholdSettingsUseCase

__all__ = [
    "CreateHouseholdUseCase",
    "DeleteHouseholdUseCase",
    "GetHouseholdUseCase",
    "JoinByCodeUseCase",
    "ListMyHouseholdsUseCase",
    "RegenerateInviteCodeUseCase",
    "UpdateHouseholdSettingsUseCase",
    "DeleteHouseholdResponse",
    "HouseholdDetailResponse",
    "HouseholdInfo",
    "HouseholdListResponse",
    "HouseholdResponse",
    "InviteCodeResponse",
    "JoinHouseholdResponse",
]
