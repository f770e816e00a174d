"""
Table access for users.

``UserRepository`` is the contract the ``UserService`` relies on.
``SQLiteUserRepository`` implements it on top of the ``users`` table
created by ``core.db.init_db``.  All queries use parameterized
statements; each call opens and closes its own connection.

A write that violates the ``UNIQUE`` constraint on ``email`` raises
``sqlite3.IntegrityError`` to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from user_management_api.app.core.db import get_cursor
from user_management_api.app.models.user import User


logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Storage operations required by the user service."""

    @abstractmethod
    def find_all(self) -> List[User]:
        """Return every stored user.  Callers must not rely on the order."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool: ...

    @abstractmethod
    def exists_by_email(self, email: str) -> bool: ...

    @abstractmethod
    def save(self, user: User) -> Optional[User]:
        """Insert ``user`` when it has no id, otherwise update it.

        Returns the stored record; on insert it carries the new id.
        Returns ``None`` when an update matched no row.
        """

    @abstractmethod
    def delete_by_id(self, user_id: int) -> bool:
        """Delete a user.  Returns ``True`` if a row was removed."""

    @abstractmethod
    def count(self) -> int: ...


class SQLiteUserRepository(UserRepository):
    """``UserRepository`` backed by the SQLite ``users`` table."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        # ``None`` means the path configured in settings.
        self.database_path = database_path

    def find_all(self) -> List[User]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute("SELECT id, name, email FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return self._row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE email = ?", (email,)
            ).fetchone()
        return self._row_to_user(row) if row else None

    def exists_by_id(self, user_id: int) -> bool:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
        return row is not None

    def exists_by_email(self, email: str) -> bool:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE email = ?", (email,)).fetchone()
        return row is not None

    def save(self, user: User) -> Optional[User]:
        with get_cursor(self.database_path) as cursor:
            if not user.is_persisted:
                cursor.execute(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    (user.name, user.email),
                )
                user_id = cursor.lastrowid
                logger.debug("Inserted user %s", user_id)
            else:
                cursor.execute(
                    "UPDATE users SET name = ?, email = ?, updated_at = CURRENT_TIMESTAMP "
                    "WHERE id = ?",
                    (user.name, user.email, user.id),
                )
                if cursor.rowcount == 0:
                    logger.debug("Update matched no user %s", user.id)
                    return None
                user_id = user.id
                logger.debug("Updated user %s", user_id)
        return User(id=user_id, name=user.name, email=user.email)

    def delete_by_id(self, user_id: int) -> bool:
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            deleted = cursor.rowcount > 0
        return deleted

    def count(self) -> int:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        return int(row["count"])

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        """Convert a database row to a ``User`` entity."""
        return User(id=row["id"], name=row["name"], email=row["email"])
