"""
Domain error hierarchy.

Every rule violation in the bookkeeping core surfaces as one of these.
"""


class FinanceError(Exception):
    """Base exception for bookkeeping operations."""

    pass


class ValidationError(FinanceError):
    """Malformed input: empty names, non-positive amounts, bad enum values."""

    pass


class NotFoundError(FinanceError):
    """Referenced entity does not exist."""

    pass


class ForbiddenError(FinanceError):
    """Ownership violation or attempt to mutate a default entity."""

    pass


class ConflictError(FinanceError):
    """Duplicate of an existing entity."""

    pass
