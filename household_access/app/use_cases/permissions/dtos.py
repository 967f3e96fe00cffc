"""
Permission Use Case DTOs
"""

from typing import Dict, List

from pydantic import BaseModel


class RolePermissions(BaseModel):
    role: str
    permissions: Dict[str, bool]


class RolePermissionsResponse(BaseModel):
    """Role default table as published to clients"""

    roles: List[RolePermissions]
    permissions: List[str]
