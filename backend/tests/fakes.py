"""
In-memory repositories for tests.

They honour the same contracts as the Supabase repositories, including
the unique constraints on accounts and owner filtering on every task
operation, so service and route tests exercise real behaviour.
"""

import itertools
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from modules.auth.exceptions import AccountConflictError
from modules.auth.models import Account
from modules.tasks.models import Task, TaskStatus
from modules.tasks.query import TaskQuery
from shared.repository import BaseRepository

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class InMemoryAccountRepository:
    """Accounts keyed by ID; rejects duplicate usernames and emails."""

    def __init__(self):
        self.accounts: dict[str, Account] = {}

    def find_by_username(self, username: str) -> Optional[Account]:
        for account in self.accounts.values():
            if account.username == username:
                return account
        return None

    def exists_with_username_or_email(self, username: str, email: str) -> bool:
        return any(
            a.username == username or a.email == email for a in self.accounts.values()
        )

    def insert(self, username: str, email: str, password_hash: str) -> Account:
        if self.exists_with_username_or_email(username, email):
            raise AccountConflictError()
        account = Account(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=datetime.now(timezone.utc),
        )
        self.accounts[account.id] = account
        return account


class InMemoryTaskRepository:
    """
    Task rows held as dicts, filtered and sorted like the Postgres store.

    Filters here are plain Python comparisons. PostgREST operator semantics
    (wildcards in search terms, id casting, bigint offsets) are covered by
    tests/modules/tasks/test_repository.py against a mocked client instead.
    """

    def __init__(self):
        self.rows: dict[str, dict[str, Any]] = {}
        # Strictly increasing creation times so ordering is deterministic
        self._clock = itertools.count()

    def _now(self) -> datetime:
        return _EPOCH + timedelta(seconds=next(self._clock))

    def insert(self, data: dict[str, Any]) -> Task:
        now = self._now()
        row = {
            "id": str(uuid.uuid4()),
            "description": None,
            "due_date": None,
            **data,
            "created_at": now,
            "updated_at": now,
        }
        self.rows[row["id"]] = row
        return self._to_task(row)

    def find(self, query: TaskQuery) -> list[Task]:
        rows = [r for r in self.rows.values() if self._matches(r, query)]
        rows.sort(key=lambda r: (r["created_at"], r["id"]))
        # NULLs sort last ascending and first descending, as in Postgres
        rows.sort(
            key=lambda r: (r[query.sort_field] is None, r[query.sort_field] or ""),
            reverse=query.descending,
        )
        page = rows[query.offset:query.offset + query.limit]
        return [self._to_task(r) for r in page]

    def count(self, query: TaskQuery) -> int:
        return sum(1 for r in self.rows.values() if self._matches(r, query))

    def find_one(self, task_id: str, owner_id: str) -> Optional[Task]:
        row = self.rows.get(BaseRepository.canonical_uuid(task_id))
        if row is None or row["owner_id"] != owner_id:
            return None
        return self._to_task(row)

    def update(
        self, task_id: str, owner_id: str, changes: dict[str, Any]
    ) -> Optional[Task]:
        row = self.rows.get(BaseRepository.canonical_uuid(task_id))
        if row is None or row["owner_id"] != owner_id:
            return None
        row.update({k: v for k, v in changes.items() if k not in ("id", "owner_id")})
        row["updated_at"] = self._now()
        return self._to_task(row)

    def delete(self, task_id: str, owner_id: str) -> bool:
        row = self.rows.get(BaseRepository.canonical_uuid(task_id))
        if row is None or row["owner_id"] != owner_id:
            return False
        del self.rows[row["id"]]
        return True

    @staticmethod
    def _due(row: dict[str, Any]) -> Optional[date]:
        value = row.get("due_date")
        return date.fromisoformat(value) if isinstance(value, str) else value

    def _matches(self, row: dict[str, Any], query: TaskQuery) -> bool:
        if row["owner_id"] != query.owner_id:
            return False
        if query.status is not None and row["status"] != query.status:
            return False
        due = self._due(row)
        if query.due_from is not None and (due is None or due < query.due_from):
            return False
        if query.due_to is not None and (due is None or due > query.due_to):
            return False
        if query.search is not None:
            term = query.search.lower()
            haystacks = (row["title"], row.get("description") or "")
            if not any(term in h.lower() for h in haystacks):
                return False
        return True

    def _to_task(self, row: dict[str, Any]) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            description=row.get("description"),
            status=TaskStatus(row["status"]),
            due_date=row.get("due_date"),
            owner_id=row["owner_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
