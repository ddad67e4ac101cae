"""
User service orchestrator.

Coordinates user lifecycle operations over an in-memory collection seeded
with example records.

Dependencies: microservices.core.exceptions
System role: User management use cases (service-a)
"""

import logging
from typing import Any

from microservices.core.exceptions import UserNotFoundError

from .store_utils import generate_record_id, utc_now

logger = logging.getLogger(__name__)


def _seed_users() -> dict[str, dict[str, Any]]:
    now = utc_now()
    return {
        "1": {
            "id": "1",
            "email": "john.doe@example.com",
            "name": "John Doe",
            "role": "admin",
            "created_at": now,
            "updated_at": now,
        },
        "2": {
            "id": "2",
            "email": "jane.smith@example.com",
            "name": "Jane Smith",
            "role": "user",
            "created_at": now,
            "updated_at": now,
        },
    }


class UserService:
    """User service orchestrator."""

    def __init__(self, users: dict[str, dict[str, Any]] | None = None) -> None:
        """
        Initialize user service.

        Args:
            users: Initial users keyed by ID (defaults to the seed records)
        """
        self._users = _seed_users() if users is None else users

    async def create_user(self, email: str, name: str, role: str) -> dict:
        """
        Create a new user.

        Args:
            email: User email address
            name: Full name
            role: "admin" or "user"

        Returns:
            dict: Created user
        """
        now = utc_now()
        user = {
            "id": generate_record_id(self._users),
            "email": email,
            "name": name,
            "role": role,
            "created_at": now,
            "updated_at": now,
        }
        self._users[user["id"]] = user
        logger.info("User created", extra={"user_id": user["id"]})
        return dict(user)

    async def get_all_users(self) -> list[dict]:
        """Get all users in insertion order."""
        users = [dict(user) for user in self._users.values()]
        logger.info(f"Retrieved {len(users)} users")
        return users

    async def get_user(self, user_id: str) -> dict:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            dict: User data

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = self._users.get(user_id)
        if user is None:
            logger.warning("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        return dict(user)

    async def update_user(self, user_id: str, **changes: Any) -> dict:
        """
        Apply a partial update to a user.

        Args:
            user_id: User ID
            **changes: Fields to overwrite; None values are ignored

        Returns:
            dict: Updated user

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = self._users.get(user_id)
        if user is None:
            logger.warning("User not found for update", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)

        user.update({key: value for key, value in changes.items() if value is not None})
        user["updated_at"] = utc_now()
        logger.info("User updated", extra={"user_id": user_id})
        return dict(user)

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user.

        Args:
            user_id: User ID

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        if self._users.pop(user_id, None) is None:
            logger.warning("User not found for deletion", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
