"""
Account repository for database access.

Encapsulates all Supabase queries and data mapping for the accounts table.
Username and email uniqueness is backed by unique constraints in the
schema; insert() turns a constraint violation into AccountConflictError.
"""

import logging
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import AccountConflictError
from .models import Account

logger = logging.getLogger(__name__)


class AccountRepository(BaseRepository[Account]):
    """Repository for account data access."""

    table_name = "accounts"

    def find_by_username(self, username: str) -> Optional[Account]:
        """
        Get an account by username.

        Returns:
            Account if found, None otherwise
        """
        result = self._table().select("*").eq("username", username).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def exists_with_username_or_email(self, username: str, email: str) -> bool:
        """Whether either value is already taken by some account."""
        condition = (
            f"username.eq.{self.quote_filter_value(username)},"
            f"email.eq.{self.quote_filter_value(email)}"
        )
        result = self._table().select("id").or_(condition).limit(1).execute()
        return bool(result.data)

    def insert(self, username: str, email: str, password_hash: str) -> Account:
        """
        Create a new account record.

        Raises:
            AccountConflictError: If the store rejects a duplicate username or email
        """
        data = {
            "username": username,
            "email": email,
            "password_hash": password_hash,
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if self.is_unique_violation(e):
                logger.info("Registration rejected by unique constraint: %s", e.message)
                raise AccountConflictError() from e
            raise
        return self._map_to_account(result.data[0])

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map database row to Account model."""
        return Account(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data.get("created_at"),
        )
