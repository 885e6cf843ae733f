"""Shared fixtures backed by a seeded in-memory SQLite database."""

import logging
from datetime import date

import pytest
import structlog

from pocket.application.app import FinanceApplication
from pocket.config import AppConfig
from pocket.domain.entities import Category, Currency
from pocket.domain.value_objects import UserID
from pocket.infrastructure.database import (
    Database,
    SqlCategoryRepository,
    SqlCurrencyRepository,
    seed_defaults,
)
from pocket.infrastructure.logger import LoggerManager, clear_context

TODAY = date(2024, 1, 15)
USER = UserID(1)
OTHER_USER = UserID(2)


@pytest.fixture
def database():
    db = Database("sqlite://")
    yield db
    db.close()


@pytest.fixture
def session(database):
    session = database.get_session()
    seed_defaults(session)
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def app(session, config) -> FinanceApplication:
    return FinanceApplication(session, config, clock=lambda: TODAY)


def _default_category(session, name: str, category_type: str) -> Category:
    for category in SqlCategoryRepository(session).find_default_categories():
        if (
            category.name == name
            and category.category_type.value == category_type
        ):
            return category
    raise LookupError(f"No default category {name} ({category_type})")


def _default_currency(session, code: str) -> Currency:
    for currency in SqlCurrencyRepository(session).find_default_currencies():
        if currency.code == code:
            return currency
    raise LookupError(f"No default currency {code}")


@pytest.fixture
def food(session) -> Category:
    return _default_category(session, "Food", "expense")


@pytest.fixture
def salary(session) -> Category:
    return _default_category(session, "Salary", "income")


@pytest.fixture
def usd(session) -> Currency:
    return _default_currency(session, "USD")


@pytest.fixture
def eur(session) -> Currency:
    return _default_currency(session, "EUR")


@pytest.fixture
def isolated_logging():
    """Let a test configure logging and restore the previous state after."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    LoggerManager.reset_instance()
    yield
    LoggerManager.reset_instance()
    structlog.reset_defaults()
    clear_context()
    root.handlers = handlers
    root.setLevel(level)
