"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import Any, Generic, Optional, TypeVar
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# Characters with special meaning in a Postgres regular expression
_REGEX_SPECIAL = set("\\.^$*+?()[]{}|")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Helpers for building PostgREST filters safely

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class TaskRepository(BaseRepository[Task]):
            def find_one(self, task_id: str, owner_id: str) -> Optional[Task]:
                result = (
                    self._db.table("tasks").select("*")
                    .eq("id", task_id).eq("owner_id", owner_id).execute()
                )
                if not result.data:
                    return None
                return self._map_to_task(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    @staticmethod
    def canonical_uuid(value: Any) -> Optional[str]:
        """
        Return value as a lowercase hyphenated UUID, or None.

        Only the 8-4-4-4-12 layout is accepted. Python's UUID() also parses
        urn:uuid: prefixes and misplaced hyphens, which Postgres rejects.
        """
        text = str(value)
        try:
            canonical = str(UUID(text))
        except ValueError:
            return None
        return canonical if text.lower() == canonical else None

    @staticmethod
    def is_unique_violation(error: APIError) -> bool:
        """Whether a PostgREST error was raised by a unique constraint."""
        return getattr(error, "code", None) == UNIQUE_VIOLATION

    @staticmethod
    def quote_filter_value(value: Any) -> str:
        """
        Quote a value for use inside a PostgREST or=(...) filter.

        Values containing reserved characters (commas, dots, colons,
        parentheses) must be double-quoted, with backslashes and quotes escaped.
        """
        text = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{text}"'

    @staticmethod
    def regex_literal(term: str) -> str:
        """
        Escape term for a PostgREST match/imatch filter.

        The result is a POSIX regex that matches term as a plain substring,
        * included (PostgREST rewrites * to % only in like/ilike values).
        """
        return "".join(f"\\{c}" if c in _REGEX_SPECIAL else c for c in term)
