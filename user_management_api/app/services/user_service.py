"""
Business logic for users.

``UserService`` is constructed with a ``UserRepository`` and exposes
the list/get/create/update/delete operations used by the API layer.
Lookups that find nothing return ``None`` (or ``False`` for delete)
rather than raising; the only error raised is ``DuplicateEmailError``.
"""

import logging
import sqlite3
from typing import List, Optional

from user_management_api.app.models.user import User
from user_management_api.app.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)


class DuplicateEmailError(ValueError):
    """Raised when a user with the given email is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email {email} already exists")


class UserService:
    """Service for managing user records."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_all_users(self) -> List[User]:
        users = self.repository.find_all()
        logger.debug("Loaded %d users", len(users))
        return users

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        logger.debug("Looking up user %s", user_id)
        return self.repository.find_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        logger.debug("Looking up user by email %s", email)
        return self.repository.find_by_email(email)

    def _email_taken(self, email: str, user_id: Optional[int] = None) -> bool:
        """Whether ``email`` belongs to a user other than ``user_id``."""
        owner = self.repository.find_by_email(email)
        return owner is not None and owner.id != user_id

    async def create_user(self, name: str, email: str) -> User:
        """Register a new user and return the stored record.

        Raises ``DuplicateEmailError`` when the email is already taken,
        whether that is seen by the pre-check or by the storage unique
        constraint (a concurrent create won the race).  Other constraint
        violations propagate as ``sqlite3.IntegrityError``.
        """
        if self.repository.exists_by_email(email):
            logger.info("Rejected user creation, email %s already registered", email)
            raise DuplicateEmailError(email)
        try:
            user = self.repository.save(User(name=name, email=email))
        except sqlite3.IntegrityError as exc:
            if not self._email_taken(email):
                raise
            logger.warning("Storage rejected user %s: %s", email, exc)
            raise DuplicateEmailError(email) from exc
        logger.info("Created user %s (%s)", user.id, email)
        return user

    async def update_user(self, user_id: int, name: str, email: str) -> Optional[User]:
        """Replace the name and email of an existing user.

        Returns ``None`` when no user has ``user_id``, including when the
        row disappears before the write lands.  Unlike ``create_user``
        there is no email pre-check; only the storage constraint guards
        uniqueness here.
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            return None
        user.name = name
        user.email = email
        try:
            updated = self.repository.save(user)
        except sqlite3.IntegrityError as exc:
            if not self._email_taken(email, user_id):
                raise
            logger.warning("Storage rejected update of user %s: %s", user_id, exc)
            raise DuplicateEmailError(email) from exc
        if updated is None:
            logger.info("User %s vanished before update", user_id)
            return None
        logger.info("Updated user %s", user_id)
        return updated

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user.  Returns ``False`` if there was nothing to delete."""
        if not self.repository.delete_by_id(user_id):
            return False
        logger.info("Deleted user %s", user_id)
        return True

    async def get_user_count(self) -> int:
        count = self.repository.count()
        logger.debug("User count is %d", count)
        return count
