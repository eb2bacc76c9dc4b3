"""Tests for shared/repository.py."""

from datetime import datetime, timezone
from typing import Optional
from unittest.mock import MagicMock

from shared.repository import BaseRepository, to_column


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client_and_table(self):
        """Should store the database client and table name."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db, "users")
        assert repo._db is mock_db
        assert repo._table == "users"

    def test_subclass_queries_its_table(self):
        """Subclass should query the table it was created with."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                return self._db.table(self._table).select("*").execute().data

            def get_by_id(self, id: str) -> Optional[dict]:
                return None

        repo = TestRepository(mock_db, "accounts")
        result = repo.get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("accounts")


class TestToColumn:
    def test_datetime_becomes_iso_string(self):
        value = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert to_column(value) == "2026-01-15T12:00:00+00:00"

    def test_enum_becomes_value(self):
        from modules.auth.models import UserStatus

        assert to_column(UserStatus.ACTIVE) == "active"

    def test_other_values_unchanged(self):
        assert to_column(None) is None
        assert to_column("Admin") == "Admin"
