"""
System default categories and currencies.

Defaults are visible to every user and can be neither modified nor
deleted by them. Seeding is idempotent: rows already present are kept.
"""

from sqlalchemy.orm import Session
from structlog import get_logger

from .models import CategoryTable, CurrencyTable

logger = get_logger(__name__)

DEFAULT_EXPENSE_CATEGORIES: list[tuple[str, str]] = [
    ("Food", "#EF4444"),
    ("Transport", "#3B82F6"),
    ("Entertainment", "#8B5CF6"),
    ("Shopping", "#F59E0B"),
    ("Bills", "#10B981"),
    ("Healthcare", "#EC4899"),
    ("Education", "#06B6D4"),
    ("Other", "#6B7280"),
]

DEFAULT_INCOME_CATEGORIES: list[tuple[str, str]] = [
    ("Salary", "#10B981"),
    ("Bonus", "#F59E0B"),
    ("Freelance", "#8B5CF6"),
    ("Other", "#6B7280"),
]

# First entry becomes the primary currency.
DEFAULT_CURRENCIES: list[tuple[str, str, str]] = [
    ("USD", "US Dollar", "$"),
    ("EUR", "Euro", "€"),
    ("GBP", "British Pound", "£"),
    ("JPY", "Japanese Yen", "¥"),
    ("AUD", "Australian Dollar", "A$"),
    ("CAD", "Canadian Dollar", "C$"),
    ("CHF", "Swiss Franc", "CHF"),
    ("CNY", "Chinese Yuan", "¥"),
    ("SEK", "Swedish Krona", "kr"),
    ("NOK", "Norwegian Krone", "kr"),
    ("DKK", "Danish Krone", "kr"),
    ("PLN", "Polish Zloty", "zł"),
    ("CZK", "Czech Koruna", "Kč"),
    ("HUF", "Hungarian Forint", "Ft"),
    ("RUB", "Russian Ruble", "₽"),
    ("BRL", "Brazilian Real", "R$"),
    ("INR", "Indian Rupee", "₹"),
    ("KRW", "South Korean Won", "₩"),
    ("SGD", "Singapore Dollar", "S$"),
    ("IDR", "Indonesian Rupiah", "Rp"),
]


def _seed_categories(session: Session) -> int:
    existing = {
        (row.name, row.category_type)
        for row in session.query(CategoryTable)
        .filter(CategoryTable.is_default.is_(True))
        .all()
    }

    added = 0
    for category_type, entries in (
        ("expense", DEFAULT_EXPENSE_CATEGORIES),
        ("income", DEFAULT_INCOME_CATEGORIES),
    ):
        for name, color in entries:
            if (name, category_type) in existing:
                continue
            session.add(
                CategoryTable(
                    user_id=None,
                    name=name,
                    color=color,
                    is_default=True,
                    category_type=category_type,
                )
            )
            added += 1
    return added


def _seed_currencies(session: Session) -> int:
    existing = {
        row.code
        for row in session.query(CurrencyTable)
        .filter(CurrencyTable.is_default.is_(True))
        .all()
    }

    added = 0
    for code, name, symbol in DEFAULT_CURRENCIES:
        if code in existing:
            continue
        session.add(
            CurrencyTable(
                user_id=None,
                code=code,
                name=name,
                symbol=symbol,
                is_default=True,
            )
        )
        added += 1
    return added


def seed_defaults(session: Session) -> dict[str, int]:
    """
    Insert missing default categories and currencies.

    Returns:
        Number of rows added per kind.
    """
    counts = {
        "categories": _seed_categories(session),
        "currencies": _seed_currencies(session),
    }
    session.flush()
    logger.info(
        f"Seeded {counts['categories']} categories and "
        f"{counts['currencies']} currencies"
    )
    return counts
