"""
Business logic for users.

``UserService`` sits between the HTTP handlers and ``UserStore``.  It
adds no rules of its own; every method forwards to the store and logs
the operation.  The store is passed in by whoever builds the service
(see ``main.create_app``), which keeps the service easy to test with
a fresh store.
"""

import logging
from typing import List, Optional

from ..core.store import UserStore
from ..schemas.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Operations on user records backed by a ``UserStore``."""

    def __init__(self, store: UserStore) -> None:
        if store is None:
            raise ValueError("UserStore must not be None")
        self.store = store

    def create_user(self, name: Optional[str], email: Optional[str]) -> User:
        """Create a user and return it with its assigned id."""
        user = self.store.create(name, email)
        logger.info("Created user %s <%s> with id %s", user.name, user.email, user.id)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        """Return the user with ``user_id`` or ``None`` if there is none."""
        user = self.store.find_by_id(user_id)
        logger.debug("Lookup of user %s: %s", user_id, "found" if user else "not found")
        return user

    def list_users(self) -> List[User]:
        users = self.store.find_all()
        logger.debug("Listing %d users", len(users))
        return users

    def delete_user(self, user_id: int) -> None:
        """Delete the user with ``user_id``.

        Deleting an id that does not exist is not an error.
        """
        self.store.delete_by_id(user_id)
        logger.info("Deleted user with id %s", user_id)

    def get_user_info(self, user_id: int) -> str:
        """Return a one‑line, human readable description of the user."""
        return self.store.describe(user_id)
