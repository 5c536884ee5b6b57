"""
In‑memory storage for user records.

``UserStore`` is the data layer of the application.  Records live in
a plain list kept in insertion order and lookups are linear scans;
the collection is meant for demonstrations and tests, not for large
data sets.  Identifiers come from a counter that only moves forward,
so an id is never handed out twice, even after its record has been
deleted.

All operations take an internal lock.  FastAPI runs synchronous
handlers in a thread pool, so two requests may reach the store at the
same time.
"""

import logging
import threading
from typing import List, Optional

from ..schemas.user import User

logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    ("Juan Pérez", "juan@example.com"),
    ("María García", "maria@example.com"),
)

NOT_FOUND_MESSAGE = "Usuario no encontrado"


class UserStore:
    """Owner of all user records.

    Parameters
    ----------
    seed : bool
        When true (the default) the store starts with the two sample
        users from ``SAMPLE_USERS`` under ids 1 and 2.
    """

    def __init__(self, seed: bool = True) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._lock = threading.Lock()
        if seed:
            for name, email in SAMPLE_USERS:
                self.create(name, email)
        logger.debug("UserStore ready with %d users", len(self._users))

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def save(self, user: User) -> User:
        """Store ``user`` and return the stored copy.

        A record without an id receives the next free one.  A record
        that already carries an id keeps it and replaces any stored
        record with the same id in place; the counter then moves past
        that id so ``create`` never hands it out again.
        """
        with self._lock:
            stored = user.model_copy()
            if stored.id is None:
                stored.id = self._next_id
                self._next_id += 1
                self._users.append(stored)
                return stored.model_copy()

            self._next_id = max(self._next_id, stored.id + 1)
            for index, existing in enumerate(self._users):
                if existing.id == stored.id:
                    self._users[index] = stored
                    break
            else:
                self._users.append(stored)
            return stored.model_copy()

    def create(self, name: Optional[str], email: Optional[str]) -> User:
        """Create a record from ``name`` and ``email`` and return it with its id."""
        return self.save(User(name=name, email=email))

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the first record with ``user_id`` or ``None``."""
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user.model_copy()
        return None

    def find_all(self) -> List[User]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def delete_by_id(self, user_id: int) -> None:
        """Remove every record with ``user_id``.  Unknown ids are ignored."""
        with self._lock:
            self._users = [user for user in self._users if user.id != user_id]

    def describe(self, user_id: int) -> str:
        user = self.find_by_id(user_id)
        if user is None:
            return NOT_FOUND_MESSAGE
        return f"Usuario encontrado: {user.name} ({user.email})"
