"""
Database initialization and session management.
"""

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from structlog import get_logger

from .models import Base

logger = get_logger(__name__)

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Database:
    """
    Database manager.

    Owns the engine and hands out sessions. A session is the unit of
    work every repository call runs in.
    """

    def __init__(self, url: str = "sqlite://", echo: bool = False):
        """
        Initialize database connection.

        Args:
            url: SQLAlchemy database URL.
                 "sqlite://" keeps everything in memory.
            echo: Log emitted SQL statements.
        """
        self.url = url
        self.echo = echo
        self.engine: Engine | None = None
        self.SessionLocal: sessionmaker[Session] | None = None
        self._initialize()

    @property
    def is_memory(self) -> bool:
        return self.url in MEMORY_URLS

    def _initialize(self) -> None:
        """Create engine, schema and session factory."""
        engine_args: dict[str, Any] = {"echo": self.echo, "future": True}

        if self.url.startswith("sqlite"):
            engine_args["connect_args"] = {
                "check_same_thread": False,
                "timeout": 15,
            }
        if self.is_memory:
            logger.warning("Using in-memory database, data is not persisted")
            engine_args["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **engine_args)

        Base.metadata.create_all(self.engine)

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
            future=True,
        )

        logger.info(f"Database initialized at {self.url}")

    def get_session(self) -> Session:
        """
        Get a new database session.

        Returns:
            SQLAlchemy Session object
        """
        if not self.SessionLocal:
            raise RuntimeError("Database not properly initialized")
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a session that commits on success and rolls back on error.
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Close database connection."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database connection closed")

    def clear_all(self) -> None:
        """Drop and recreate every table."""
        if self.engine:
            Base.metadata.drop_all(self.engine)
            Base.metadata.create_all(self.engine)
        logger.warning("All database data cleared")


def create_database(url: str = "sqlite://", echo: bool = False) -> Database:
    """Create and return a Database instance."""
    return Database(url, echo)
