"""Messages sent to library users."""

from __future__ import annotations

import string
import time
from typing import Any, Mapping

_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_REQUIRED_FIELDS = ("notificationId", "userId", "message", "sentDate", "readFlag")


def _validate_identifier(value: str, label: str, max_length: int) -> None:
    if not value:
        raise ValueError(f"{label} cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"{label} too long (max {max_length} characters)")
    if any(c not in _ID_CHARS for c in value):
        raise ValueError(f"{label} contains invalid characters")


def _validate_message(message: str) -> None:
    if not message:
        raise ValueError("Message cannot be empty")
    if len(message) > 500:
        raise ValueError("Message too long (max 500 characters)")


def _validate_sent_date(date: int) -> None:
    if date < 0:
        raise ValueError("Invalid sent date")
    # One day of slack allows for clocks in other time zones.
    if date > int(time.time()) + 86400:
        raise ValueError("Sent date cannot be in the future")


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


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean")
    return value


class Notification:
    """A message for a user; invalid details raise ValueError."""

    def __init__(
        self,
        notification_id: str = "",
        user_id: str = "",
        message: str = "",
        sent_date: int = 0,
        read: bool = False,
    ) -> None:
        _validate_identifier(notification_id, "Notification ID", 50)
        _validate_identifier(user_id, "User ID", 30)
        _validate_message(message)
        _validate_sent_date(sent_date)
        self.notification_id = notification_id
        self.user_id = user_id
        self.message = message
        self.sent_date = sent_date
        self.read = read

    def __repr__(self) -> str:
        return (
            f"Notification(notification_id={self.notification_id!r}, "
            f"user_id={self.user_id!r}, read={self.read})"
        )

    def mark_read(self) -> None:
        """Mark the notification as read."""
        self.read = True

    def to_json(self) -> dict[str, Any]:
        """Return the notification as a JSON-ready dictionary."""
        return {
            "notificationId": self.notification_id,
            "userId": self.user_id,
            "message": self.message,
            "sentDate": self.sent_date,
            "readFlag": self.read,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Notification":
        """Build a notification from a dictionary, raising ValueError if it is unusable."""
        try:
            if any(key not in data for key in _REQUIRED_FIELDS):
                raise ValueError("Missing required fields in JSON")
            return cls(
                _string(data, "notificationId"),
                _string(data, "userId"),
                _string(data, "message"),
                _integer(data, "sentDate"),
                _boolean(data, "readFlag"),
            )
        except TypeError as exc:
            raise ValueError(f"JSON parsing error: {exc}") from exc
        except ValueError as exc:
            raise ValueError(f"Failed to create notification from JSON: {exc}") from exc