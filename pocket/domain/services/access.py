from typing import Protocol

from pocket.domain.errors import ForbiddenError
from pocket.domain.value_objects import (
    Ownership,
    UserID,
    can_access,
    can_modify,
)


class Shareable(Protocol):
    ownership: Ownership

    @property
    def is_default(self) -> bool: ...


def ensure_can_use(entity: Shareable, user_id: UserID, label: str) -> None:
    """Referencing needs the entity to be a default or the user's own."""
    if not can_access(entity.ownership, user_id):
        raise ForbiddenError(f"Access denied to {label}")


def ensure_can_modify(entity: Shareable, user_id: UserID, label: str) -> None:
    """Updating or deleting needs the entity to be the user's own."""
    if entity.is_default:
        raise ForbiddenError(f"Cannot modify default {label}")
    if not can_modify(entity.ownership, user_id):
        raise ForbiddenError(f"Access denied to {label}")


def ensure_owner(owner_id: UserID, user_id: UserID, label: str) -> None:
    if owner_id != user_id:
        raise ForbiddenError(f"Access denied to {label}")
