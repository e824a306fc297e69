"""
Runtime settings for the board server.

Settings come from environment variables so the same build runs locally and
in a container without code changes.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_CORS_ORIGIN = "http://localhost:3000"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9000
DEFAULT_WORKERS = 4


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


def get_default_database_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Get the default database URL.

    Checks KANBAN_DATABASE_URL first, then KANBAN_DB_PATH (a SQLite file),
    then falls back to ~/.kanban-board/database.db, creating the directory
    if needed.
    """
    env = os.environ if environ is None else environ

    url = env.get("KANBAN_DATABASE_URL")
    if url:
        return url

    env_db_path = env.get("KANBAN_DB_PATH")
    if env_db_path:
        db_path = Path(env_db_path)
    else:
        db_path = Path.home() / ".kanban-board" / "database.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


@dataclass
class Settings:
    """
    Server settings.

    Attributes:
        database_url: SQLAlchemy URL of the board database
        cors_origin: Single origin allowed to call the API from a browser
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        debug: Verbose logging
        workers: Size of the thread pool running database calls
    """

    database_url: str
    cors_origin: str = DEFAULT_CORS_ORIGIN
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    workers: int = DEFAULT_WORKERS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ValueError: If a numeric variable is not an integer or out of range.
        """
        env = os.environ if environ is None else environ
        settings = cls(
            database_url=get_default_database_url(env),
            cors_origin=env.get("KANBAN_CORS_ORIGIN") or DEFAULT_CORS_ORIGIN,
            host=env.get("KANBAN_HOST") or DEFAULT_HOST,
            port=int(env.get("KANBAN_SERVER_PORT") or DEFAULT_PORT),
            debug=_is_truthy(env.get("KANBAN_DEBUG")),
            workers=int(env.get("KANBAN_WORKERS") or DEFAULT_WORKERS),
        )
        if settings.workers < 1:
            raise ValueError(f"KANBAN_WORKERS must be at least 1, got {settings.workers}")
        if not 0 < settings.port < 65536:
            raise ValueError(f"KANBAN_SERVER_PORT out of range: {settings.port}")
        return settings
