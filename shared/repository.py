"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the name of the table a repository owns.
"""

from datetime import datetime
from enum import Enum
from typing import Any, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


def to_column(value: Any) -> Any:
    """Convert a model attribute to a JSON-friendly column value."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


class BaseRepository(Generic[T]):
    """
    Base class for all Supabase-backed repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Table name via self._table
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            def get_by_id(self, user_id: str) -> Optional[UserRecord]:
                result = self._db.table(self._table).select("*").eq("user_id", user_id).execute()
                if not result.data:
                    return None
                return UserRecord.model_validate(result.data[0])
    """

    def __init__(self, db: Client, table: str) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
            table: Name of the table this repository reads and writes.
        """
        self._db = db
        self._table = table
