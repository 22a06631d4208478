"""User store interface with an in-memory implementation."""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from common.exceptions import DuplicateIdError, UserNotFoundError
from common.models.page import Page
from common.models.user import User
from common.services.pagination import MAX_PAGE_SIZE, calculate_page

logger = logging.getLogger(__name__)


class UpsertOutcome(str, Enum):
    """What an update-or-insert did."""

    CREATED = "CREATED"
    REPLACED = "REPLACED"


class UpsertResult(BaseModel):
    """Stored user and whether it was created or replaced."""

    user: User = Field(..., description="User as stored after the call")
    outcome: UpsertOutcome = Field(..., description="Whether the user was created or replaced")

    @property
    def inserted(self) -> bool:
        return self.outcome is UpsertOutcome.CREATED


class UserStore(ABC):
    """Abstract interface for user storage.

    Implementations hand out copies, so callers can never modify a stored
    record without going through :meth:`update` or :meth:`update_or_insert`.
    """

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> User | None:
        """Get a user by ID."""
        pass

    @abstractmethod
    def insert(self, user: User) -> User:
        """Store a new user, assigning an ID when it has none.

        Raises:
            DuplicateIdError: If the user carries an ID that is already taken
        """
        pass

    @abstractmethod
    def update(self, user: User) -> None:
        """Replace the stored user with the same ID.

        Raises:
            UserNotFoundError: If no user has that ID
        """
        pass

    @abstractmethod
    def update_or_insert(self, user: User) -> UpsertResult:
        """Replace the user with the same ID, or create it under that ID."""
        pass

    @abstractmethod
    def delete(self, user_id: UUID) -> bool:
        """Delete a user.

        Returns:
            True if a user was removed, False if none had that ID
        """
        pass

    @abstractmethod
    def get_page(self, page_number: int, page_size: int) -> Page[User]:
        """Get one page of users in creation order."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every user."""
        pass


class InMemoryUserStore(UserStore):
    """Thread-safe, process-local implementation of UserStore.

    Users are kept in a dict so that iteration follows insertion order; a
    replacement keeps the user's original position.
    """

    def __init__(self, max_page_size: int = MAX_PAGE_SIZE) -> None:
        """Initialize an empty store.

        Args:
            max_page_size: Upper bound applied to page sizes in get_page
        """
        self._users: dict[UUID, User] = {}
        self._lock = threading.RLock()
        self.max_page_size = max_page_size

    def find_by_id(self, user_id: UUID) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user is not None else None

    def insert(self, user: User) -> User:
        with self._lock:
            user_id = user.id or uuid.uuid4()
            if user_id in self._users:
                raise DuplicateIdError(user_id)
            stored = user.model_copy(update={"id": user_id})
            self._users[user_id] = stored
            logger.info("Created user %s", user_id)
            return stored.model_copy()

    def update(self, user: User) -> None:
        with self._lock:
            if user.id is None or user.id not in self._users:
                raise UserNotFoundError(user.id)
            self._users[user.id] = user.model_copy()
            logger.info("Updated user %s", user.id)

    def update_or_insert(self, user: User) -> UpsertResult:
        if user.id is None:
            raise ValueError("update_or_insert requires a user with an ID")

        with self._lock:
            outcome = UpsertOutcome.REPLACED if user.id in self._users else UpsertOutcome.CREATED
            stored = user.model_copy()
            self._users[user.id] = stored
            logger.info("Upserted user %s (%s)", user.id, outcome.value)
            return UpsertResult(user=stored.model_copy(), outcome=outcome)

    def delete(self, user_id: UUID) -> bool:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return False
            logger.info("Deleted user %s", user_id)
            return True

    def get_page(self, page_number: int, page_size: int) -> Page[User]:
        with self._lock:
            info = calculate_page(page_number, page_size, len(self._users), self.max_page_size)
            start = (info.page_number - 1) * info.page_size
            users = list(self._users.values())[start : start + info.page_size]
            items = [user.model_copy() for user in users]

        return Page[User](
            items=items,
            total_count=info.total_count,
            page_number=info.page_number,
            page_size=info.page_size,
            has_previous=info.has_previous,
            has_next=info.has_next,
        )

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            logger.debug("Cleared user store")
