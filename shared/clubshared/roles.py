"""
Role Hierarchy

Fixed privilege ranking over Role, used by the server to gate privileged
operations. Callers are expected to pass validated Role values.
"""
from types import MappingProxyType
from typing import Mapping, Union

from .enums import Role

ROLE_HIERARCHY: Mapping[Role, int] = MappingProxyType({
    Role.MEMBER: 0,
    Role.OFFICER: 1,
    Role.ADMIN: 2,
})

if set(ROLE_HIERARCHY) != set(Role):
    raise RuntimeError("ROLE_HIERARCHY must rank every Role")


def has_minimum_role(user_role: Union[Role, str], required_role: Union[Role, str]) -> bool:
    """
    Check whether user_role meets or exceeds required_role.

    Raises ValueError for a value outside Role.
    """
    return ROLE_HIERARCHY[Role(user_role)] >= ROLE_HIERARCHY[Role(required_role)]


def roles_at_least(required_role: Union[Role, str]) -> list[Role]:
    """All roles satisfying required_role, lowest rank first"""
    return sorted(
        (role for role in Role if has_minimum_role(role, required_role)),
        key=ROLE_HIERARCHY.__getitem__,
    )
