"""
ORM Manager - Database connection and session management.

The manager is an explicit handle: the process opens one at start-up, passes
it to the repositories that need it, and closes it at shutdown.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from kanban_board.database.models.base import Base

logger = logging.getLogger(__name__)


class ORMManager:
    """
    ORM manager for database connections.

    Manages SQLAlchemy engine and session lifecycle with connection pooling
    and SQLite optimizations when the URL points at a SQLite file.
    """

    def __init__(self, database_url: str):
        """
        Initialize the ORM manager.

        Args:
            database_url: SQLAlchemy database URL, e.g. ``sqlite:///board.db``.
        """
        self.database_url = database_url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

        # Initialize engine and create tables
        self._initialize()

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def _initialize(self) -> None:
        """Initialize the database engine and create tables."""
        connect_args: Dict[str, Any] = {}
        if self.is_sqlite:
            connect_args["check_same_thread"] = False

        self._engine = create_engine(
            self.database_url,
            echo=False,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

        if self.is_sqlite:

            @event.listens_for(self._engine, "connect")
            def set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA synchronous=NORMAL")
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self._session_factory = sessionmaker(
            bind=self._engine,
            autocommit=False,
            autoflush=True,
            expire_on_commit=False,
        )

        Base.metadata.create_all(self._engine)
        logger.debug("Database ready at %s", self._engine.url.render_as_string(hide_password=True))

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        if self._engine is None:
            raise RuntimeError("ORM Manager not initialized")
        return self._engine

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic commit/rollback.

        Usage:
            with orm_manager.get_session() as session:
                session.add(Project(title="Sprint 1"))
                # Auto-commit on successful exit
                # Auto-rollback on exception
        """
        if self._session_factory is None:
            raise RuntimeError("ORM Manager not initialized")

        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def perform_health_check(self) -> Dict[str, Any]:
        """
        Perform a database health check.

        Returns:
            Dictionary with health check results.
        """
        try:
            with self.get_session() as session:
                result = session.execute(text("SELECT 1")).scalar()
                if result != 1:
                    return {"healthy": False, "error": "Basic query failed"}

            table_names = sorted(inspect(self.engine).get_table_names())
            return {
                "healthy": True,
                "database": self.engine.url.render_as_string(hide_password=True),
                "tables": table_names,
                "table_count": len(table_names),
            }
        except Exception as e:
            logger.warning("Database health check failed: %s", e)
            return {"healthy": False, "error": str(e)}

    def close(self) -> None:
        """Close the database engine and release resources."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None

    def __enter__(self) -> "ORMManager":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
