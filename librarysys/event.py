"""Events held by the library, such as readings and workshops."""

from __future__ import annotations

import string
import time
from typing import Any, Mapping

_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_WHITESPACE = " \t\n\r"
_REQUIRED_FIELDS = ("eventId", "title", "description", "eventDate", "location")
_ONE_DAY = 86400
_ONE_YEAR = 365 * _ONE_DAY


def _validate_event_id(event_id: str) -> None:
    if not event_id:
        raise ValueError("Event ID cannot be empty")
    if len(event_id) > 30:
        raise ValueError("Event ID too long (max 30 characters)")
    if any(c not in _ID_CHARS for c in event_id):
        raise ValueError("Event ID contains invalid characters")


def _validate_text(value: str, label: str, max_length: int) -> None:
    if not value:
        raise ValueError(f"{label} cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"{label} too long (max {max_length} characters)")
    if not value.strip(_WHITESPACE):
        raise ValueError(f"{label} cannot be only whitespace")


def _validate_event_date(date: int) -> None:
    if date <= 0:
        raise ValueError("Invalid event date")
    now = int(time.time())
    # Events from yesterday are still accepted.
    if date < now - _ONE_DAY:
        raise ValueError("Event date cannot be in the past")
    if date > now + _ONE_YEAR:
        raise ValueError("Event date too far in the future (max 1 year)")


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number")
    return int(value)


class LibraryEvent:
    """A scheduled library event; invalid details raise ValueError."""

    def __init__(
        self,
        event_id: str = "",
        title: str = "",
        description: str = "",
        event_date: int = 0,
        location: str = "",
    ) -> None:
        _validate_event_id(event_id)
        _validate_text(title, "Event title", 100)
        _validate_text(description, "Event description", 1000)
        _validate_event_date(event_date)
        _validate_text(location, "Event location", 200)
        self._event_id = event_id
        self._title = title
        self._description = description
        self._event_date = event_date
        self._location = location

    @property
    def event_id(self) -> str:
        return self._event_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def event_date(self) -> int:
        return self._event_date

    @property
    def location(self) -> str:
        return self._location

    def __repr__(self) -> str:
        return (
            f"LibraryEvent(event_id={self._event_id!r}, title={self._title!r}, "
            f"event_date={self._event_date})"
        )

    def to_json(self) -> dict[str, Any]:
        """Return the event as a JSON-ready dictionary."""
        return {
            "eventId": self._event_id,
            "title": self._title,
            "description": self._description,
            "eventDate": self._event_date,
            "location": self._location,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "LibraryEvent":
        """Build an event from a dictionary, raising ValueError if it is unusable."""
        try:
            if any(key not in data for key in _REQUIRED_FIELDS):
                raise ValueError("Missing required fields in JSON")
            return cls(
                _string(data, "eventId"),
                _string(data, "title"),
                _string(data, "description"),
                _integer(data, "eventDate"),
                _string(data, "location"),
            )
        except TypeError as exc:
            raise ValueError(f"JSON parsing error: {exc}") from exc
        except ValueError as exc:
            raise ValueError(f"Failed to create event from JSON: {exc}") from exc