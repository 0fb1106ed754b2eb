"""Library users, their roles and the rules their details must follow."""

from __future__ import annotations

import enum
import logging
import re
import string
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_NAME_CHARS = frozenset(string.ascii_letters + " -'")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


class UserRole(enum.IntEnum):
    """The part a user plays in the library."""

    STUDENT = 0
    TEACHER = 1
    LIBRARY_EMPLOYEE = 2
    LIBRARY_ADMIN = 3


def is_valid_email(email: str) -> bool:
    """Return True for a plausible e-mail address of at most 100 characters."""
    if not email or len(email) > 100:
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_user_id(user_id: str) -> bool:
    """Return True for 3 to 20 ASCII letters, digits, '_' or '-'."""
    if not 3 <= len(user_id) <= 20:
        return False
    return all(c in _ID_CHARS for c in user_id)


def is_valid_name(name: str) -> bool:
    """Return True for 1 to 50 ASCII letters, spaces, hyphens or apostrophes."""
    if not name or len(name) > 50:
        return False
    return all(c in _NAME_CHARS for c in name)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number")
    return int(value)


class User:
    """A library user.

    Invalid details given to the constructor are replaced by empty strings;
    invalid details assigned later raise ValueError and leave the user as it was.
    """

    def __init__(
        self,
        user_id: str = "",
        name: str = "",
        email: str = "",
        role: UserRole = UserRole.STUDENT,
    ) -> None:
        if user_id and not is_valid_user_id(user_id):
            logger.warning("Invalid user ID %r provided; using an empty one", user_id)
            user_id = ""
        if name and not is_valid_name(name):
            logger.warning("Invalid name %r provided; using an empty one", name)
            name = ""
        if email and not is_valid_email(email):
            logger.warning("Invalid email %r provided; using an empty one", email)
            email = ""
        self._user_id = user_id
        self._name = name
        self._email = email
        self.role = UserRole(role)

    @property
    def user_id(self) -> str:
        return self._user_id

    @user_id.setter
    def user_id(self, value: str) -> None:
        if value and not is_valid_user_id(value):
            raise ValueError("Invalid User ID format")
        self._user_id = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value and not is_valid_name(value):
            raise ValueError("Invalid name format")
        self._name = value

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        if value and not is_valid_email(value):
            raise ValueError("Invalid email format")
        self._email = value

    def __repr__(self) -> str:
        return (
            f"User(user_id={self._user_id!r}, name={self._name!r}, "
            f"email={self._email!r}, role={self.role.name})"
        )

    def to_json(self) -> dict[str, Any]:
        """Return the user as a JSON-ready dictionary."""
        return {
            "userId": self._user_id,
            "name": self._name,
            "email": self._email,
            "role": int(self.role),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from a dictionary; a malformed one yields an empty user."""
        try:
            return cls(
                _string(data, "userId"),
                _string(data, "name"),
                _string(data, "email"),
                UserRole(_integer(data, "role")),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Error parsing User from JSON: %s", exc)
            return cls()