"""
User repositories.

SupabaseUserRepository stores users in a Postgres table through the
Supabase client. InMemoryUserRepository keeps them in process memory for
local development and tests. Both implement IUserRepository.
"""

import logging
import threading
from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository, to_column
from .exceptions import DuplicateUserError, UserNotFoundError
from .models import ADMIN_ROLE, UserRecord, UserStatus

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

USERS_TABLE = "users"
CREATE_USER_FUNCTION = "create_user_record"


class SupabaseUserRepository(BaseRepository[UserRecord]):
    """
    Repository for the users table.

    Lookups by email and token are equality filters served by the
    indexes created in migrations/001_create_users.sql. Inserts go through
    the create_user_record database function, which checks for a duplicate
    email and an empty table under a table lock.
    """

    def __init__(self, db: Client) -> None:
        super().__init__(db, USERS_TABLE)

    def list_all(self) -> list[UserRecord]:
        result = self._db.table(self._table).select("*").order("created_at").execute()
        return [self._map_to_user(row) for row in result.data]

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self._get_one("user_id", user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return self._get_one("email", email)

    def get_by_token(self, token: str) -> Optional[UserRecord]:
        return self._get_one("token", token)

    def list_by_role_status(self, role: str, status: UserStatus) -> list[UserRecord]:
        result = (
            self._db.table(self._table)
            .select("*")
            .eq("role", role)
            .eq("status", status.value)
            .execute()
        )
        return [self._map_to_user(row) for row in result.data]

    def create(self, user: UserRecord, promote_first: bool = False) -> UserRecord:
        """
        Insert a user atomically via the create_user_record function.

        Args:
            user: Record to insert.
            promote_first: Store the user as an active Admin if the table is empty.

        Returns:
            The row as stored.

        Raises:
            DuplicateUserError: If the email is already registered.
        """
        row = user.model_dump(mode="json")
        try:
            result = self._db.rpc(
                CREATE_USER_FUNCTION,
                {"p_user": row, "p_promote_first": promote_first},
            ).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateUserError(user.email) from e
            raise

        return self._map_to_user(result.data[0])

    def update(self, user_id: str, changes: dict[str, Any]) -> None:
        data = {field: to_column(value) for field, value in changes.items()}
        result = self._db.table(self._table).update(data).eq("user_id", user_id).execute()
        if not result.data:
            raise UserNotFoundError(user_id)

    def delete(self, user_id: str) -> None:
        result = self._db.table(self._table).delete().eq("user_id", user_id).execute()
        if not result.data:
            raise UserNotFoundError(user_id)

    def _get_one(self, column: str, value: str) -> Optional[UserRecord]:
        result = (
            self._db.table(self._table)
            .select("*")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, row: dict[str, Any]) -> UserRecord:
        return UserRecord.model_validate(row)


class InMemoryUserRepository:
    """
    Process-local user store with email and token indexes.

    A single lock serializes writes, so create() is atomic with respect to
    its duplicate and empty-store checks. Records are copied on the way in
    and out; callers never hold a live reference to stored state.
    """

    def __init__(self, users: Optional[list[UserRecord]] = None) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, UserRecord] = {}
        self._by_email: dict[str, str] = {}
        self._by_token: dict[str, str] = {}
        for user in users or []:
            self._store(user.model_copy(deep=True))

    def list_all(self) -> list[UserRecord]:
        with self._lock:
            users = sorted(self._users.values(), key=lambda u: u.created_at)
            return [u.model_copy(deep=True) for u in users]

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._copy(self._users.get(user_id))

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            user_id = self._by_email.get(email)
            return self._copy(self._users.get(user_id)) if user_id else None

    def get_by_token(self, token: str) -> Optional[UserRecord]:
        with self._lock:
            user_id = self._by_token.get(token)
            return self._copy(self._users.get(user_id)) if user_id else None

    def list_by_role_status(self, role: str, status: UserStatus) -> list[UserRecord]:
        with self._lock:
            return [
                u.model_copy(deep=True)
                for u in self._users.values()
                if u.role == role and u.status == status
            ]

    def create(self, user: UserRecord, promote_first: bool = False) -> UserRecord:
        with self._lock:
            if user.email in self._by_email:
                raise DuplicateUserError(user.email)

            stored = user.model_copy(deep=True)
            if promote_first and not self._users:
                stored.role = ADMIN_ROLE
                stored.status = UserStatus.ACTIVE
                logger.info(f"Bootstrapping first user {stored.user_id} as {ADMIN_ROLE}")

            self._store(stored)
            return stored.model_copy(deep=True)

    def update(self, user_id: str, changes: dict[str, Any]) -> None:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise UserNotFoundError(user_id)

            updated = current.model_copy(update=changes, deep=True)
            self._unindex(current)
            self._store(updated)

    def delete(self, user_id: str) -> None:
        with self._lock:
            current = self._users.pop(user_id, None)
            if current is None:
                raise UserNotFoundError(user_id)
            self._unindex(current)

    def _store(self, user: UserRecord) -> None:
        self._users[user.user_id] = user
        self._by_email[user.email] = user.user_id
        if user.token:
            self._by_token[user.token] = user.user_id

    def _unindex(self, user: UserRecord) -> None:
        self._by_email.pop(user.email, None)
        if user.token:
            self._by_token.pop(user.token, None)

    @staticmethod
    def _copy(user: Optional[UserRecord]) -> Optional[UserRecord]:
        return user.model_copy(deep=True) if user is not None else None
