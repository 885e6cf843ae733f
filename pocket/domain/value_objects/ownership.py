"""
Ownership of shareable entities (categories and currencies).

An entity is either owned by exactly one user or is a system default
that every user may use and no user may change.
"""

from dataclasses import dataclass
from typing import Union

from .identifiers import UserID


@dataclass(frozen=True)
class Owned:
    user_id: UserID


@dataclass(frozen=True)
class SystemDefault:
    pass


Ownership = Union[Owned, SystemDefault]


def can_access(ownership: Ownership, user_id: UserID) -> bool:
    """True if the user may reference the entity (default or own)."""
    if isinstance(ownership, SystemDefault):
        return True
    return ownership.user_id == user_id


def can_modify(ownership: Ownership, user_id: UserID) -> bool:
    """True if the user may update or delete the entity (own only)."""
    if isinstance(ownership, SystemDefault):
        return False
    return ownership.user_id == user_id
