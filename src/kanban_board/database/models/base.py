"""
Database Models Base Classes and Utilities.

Shared base classes and utilities for all database models.
"""

import re
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models."""

    pass


def generate_id() -> str:
    """Generate a unique ID for records.

    Returns:
        str: UUID4 string suitable for use as primary key.
    """
    return str(uuid.uuid4())


def get_current_timestamp() -> datetime:
    """Get current timestamp in UTC.

    Returns:
        datetime: Current UTC timestamp for record creation/updates.
    """
    return datetime.now(timezone.utc)


_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def is_valid_id(value: str) -> bool:
    """Check whether a value has the shape of an ID produced by ``generate_id``."""
    return bool(value) and _UUID_PATTERN.match(value) is not None
