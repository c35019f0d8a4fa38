"""Tests for the tasks repository."""

import pytest
from datetime import date
from unittest.mock import MagicMock, call

from modules.tasks.models import Task, TaskStatus
from modules.tasks.query import TaskQuery
from modules.tasks.repository import TaskRepository

TASK_ID = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
OWNER_ID = "9b2d3c1e-0000-4000-8000-000000000001"

_BUILDER_METHODS = [
    "select", "insert", "update", "delete",
    "eq", "gte", "lte", "or_", "order", "range", "limit",
]


def create_mock_task_data(
    task_id: str = TASK_ID,
    owner_id: str = OWNER_ID,
    title: str = "Buy milk",
    status: str = "pending",
) -> dict:
    """Helper to create mock task row."""
    return {
        "id": task_id,
        "title": title,
        "description": None,
        "status": status,
        "due_date": "2024-10-10",
        "owner_id": owner_id,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }


@pytest.fixture
def builder():
    """Query builder mock whose chaining methods all return itself."""
    mock = MagicMock()
    for name in _BUILDER_METHODS:
        getattr(mock, name).return_value = mock
    mock.execute.return_value.data = []
    mock.execute.return_value.count = 0
    return mock


@pytest.fixture
def mock_db(builder):
    db = MagicMock()
    db.table.return_value = builder
    return db


@pytest.fixture
def repository(mock_db):
    return TaskRepository(mock_db)


class TestFind:
    def test_owner_scoping_only(self, repository, mock_db, builder):
        builder.execute.return_value.data = [create_mock_task_data()]

        tasks = repository.find(TaskQuery(owner_id=OWNER_ID))

        assert len(tasks) == 1
        assert isinstance(tasks[0], Task)
        assert tasks[0].due_date == date(2024, 10, 10)
        mock_db.table.assert_called_with("tasks")
        builder.eq.assert_called_once_with("owner_id", OWNER_ID)
        builder.gte.assert_not_called()
        builder.lte.assert_not_called()
        builder.or_.assert_not_called()

    def test_all_filters(self, repository, builder):
        query = TaskQuery(
            owner_id=OWNER_ID,
            status="completed",
            due_from=date(2024, 10, 1),
            due_to=date(2024, 10, 31),
            search="milk",
        )

        repository.find(query)

        assert builder.eq.call_args_list == [
            call("owner_id", OWNER_ID),
            call("status", "completed"),
        ]
        builder.gte.assert_called_once_with("due_date", "2024-10-01")
        builder.lte.assert_called_once_with("due_date", "2024-10-31")
        builder.or_.assert_called_once_with(
            'title.imatch."milk",description.imatch."milk"'
        )

    def test_order_and_range(self, repository, builder):
        query = TaskQuery(
            owner_id=OWNER_ID, sort_field="status", descending=True, page=2, limit=10
        )

        repository.find(query)

        assert builder.order.call_args_list == [
            call("status", desc=True),
            call("created_at"),
            call("id"),
        ]
        builder.range.assert_called_once_with(10, 19)

    def test_search_wildcards_match_literally(self, repository, builder):
        repository.find(TaskQuery(owner_id=OWNER_ID, search="50%"))
        builder.or_.assert_called_once_with(
            'title.imatch."50%",description.imatch."50%"'
        )

    def test_search_star_is_not_a_wildcard(self, repository, builder):
        """A bare * must not turn into a match-everything pattern."""
        expected = 'title.imatch."\\\\*",description.imatch."\\\\*"'

        repository.find(TaskQuery(owner_id=OWNER_ID, search="*"))
        repository.count(TaskQuery(owner_id=OWNER_ID, search="*"))

        assert builder.or_.call_args_list == [call(expected), call(expected)]

    def test_search_regex_characters_are_escaped(self, repository, builder):
        repository.find(TaskQuery(owner_id=OWNER_ID, search="a.b"))
        builder.or_.assert_called_once_with(
            'title.imatch."a\\\\.b",description.imatch."a\\\\.b"'
        )


class TestCount:
    def test_count(self, repository, builder):
        builder.execute.return_value.count = 15

        assert repository.count(TaskQuery(owner_id=OWNER_ID, status="pending")) == 15
        builder.select.assert_called_once_with("id", count="exact", head=True)
        builder.range.assert_not_called()

    def test_count_missing(self, repository, builder):
        builder.execute.return_value.count = None
        assert repository.count(TaskQuery(owner_id=OWNER_ID)) == 0


class TestSingleTask:
    def test_insert(self, repository, builder):
        builder.execute.return_value.data = [create_mock_task_data()]
        data = {"title": "Buy milk", "status": "pending", "owner_id": OWNER_ID}

        task = repository.insert(data)

        assert task.id == TASK_ID
        assert task.status is TaskStatus.PENDING
        builder.insert.assert_called_once_with(data)

    def test_find_one(self, repository, builder):
        builder.execute.return_value.data = [create_mock_task_data()]

        task = repository.find_one(TASK_ID, OWNER_ID)

        assert task.owner_id == OWNER_ID
        assert builder.eq.call_args_list == [call("id", TASK_ID), call("owner_id", OWNER_ID)]

    def test_find_one_other_owner(self, repository, builder):
        builder.execute.return_value.data = []
        assert repository.find_one(TASK_ID, "someone-else") is None

    def test_non_uuid_ids_are_not_found(self, repository, mock_db):
        """Malformed ids never reach the store."""
        assert repository.find_one("abc", OWNER_ID) is None
        assert repository.update("abc", OWNER_ID, {"title": "x"}) is None
        assert repository.delete("abc", OWNER_ID) is False
        mock_db.table.assert_not_called()

    def test_non_canonical_uuid_spellings_are_not_found(self, repository, mock_db):
        for task_id in (f"urn:uuid:{TASK_ID}", "3-f2504e04f8911d39a0c0305e82c3301"):
            assert repository.find_one(task_id, OWNER_ID) is None
            assert repository.update(task_id, OWNER_ID, {"title": "x"}) is None
            assert repository.delete(task_id, OWNER_ID) is False
        mock_db.table.assert_not_called()

    def test_ids_are_sent_in_canonical_form(self, repository, builder):
        builder.execute.return_value.data = [create_mock_task_data()]

        repository.find_one(TASK_ID.upper(), OWNER_ID)
        repository.update(TASK_ID.upper(), OWNER_ID, {"title": "x"})
        repository.delete(TASK_ID.upper(), OWNER_ID)

        assert builder.eq.call_args_list == [call("id", TASK_ID), call("owner_id", OWNER_ID)] * 3

    def test_update_never_changes_owner(self, repository, builder):
        builder.execute.return_value.data = [create_mock_task_data(title="New")]

        task = repository.update(
            TASK_ID, OWNER_ID, {"title": "New", "owner_id": "thief", "id": "other"}
        )

        assert task.title == "New"
        sent = builder.update.call_args.args[0]
        assert sent["title"] == "New"
        assert "owner_id" not in sent
        assert "id" not in sent
        assert "updated_at" in sent

    def test_update_missing(self, repository, builder):
        builder.execute.return_value.data = []
        assert repository.update(TASK_ID, OWNER_ID, {"title": "x"}) is None

    def test_delete(self, repository, builder):
        builder.execute.return_value.data = [create_mock_task_data()]
        assert repository.delete(TASK_ID, OWNER_ID) is True
        assert builder.eq.call_args_list == [call("id", TASK_ID), call("owner_id", OWNER_ID)]

    def test_delete_missing(self, repository, builder):
        builder.execute.return_value.data = []
        assert repository.delete(TASK_ID, OWNER_ID) is False
