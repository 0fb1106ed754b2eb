"""Reservations of library resources by users."""

from __future__ import annotations

import enum
import logging
import string
import time
from typing import Any, Mapping

from .loan import is_valid_id

logger = logging.getLogger(__name__)

_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_ONE_YEAR = 365 * 24 * 60 * 60


class ReservationStatus(enum.Enum):
    """Where a reservation stands."""

    PENDING = "Pending"
    FULFILLED = "Fulfilled"
    CANCELED = "Canceled"


class ReservationError(Exception):
    """Raised when a reservation cannot be canceled or fulfilled."""


def _now() -> int:
    return int(time.time())


def _is_valid_reservation_id(reservation_id: str) -> bool:
    return 3 <= len(reservation_id) <= 30 and all(c in _ID_CHARS for c in reservation_id)


def _is_valid_date(date: int) -> bool:
    if date < 0:
        return False
    now = _now()
    return now - _ONE_YEAR <= date <= now + _ONE_YEAR


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


class Reservation:
    """A user's claim on a resource.

    Invalid IDs given to the constructor are replaced by empty strings; a
    missing or invalid reservation date is replaced by the current time.
    """

    def __init__(
        self,
        reservation_id: str = "",
        user_id: str = "",
        resource_id: str = "",
        reservation_date: int = 0,
    ) -> None:
        if reservation_id and not _is_valid_reservation_id(reservation_id):
            logger.warning("Invalid reservation ID %r provided; using an empty one", reservation_id)
            reservation_id = ""
        if user_id and not is_valid_id(user_id):
            logger.warning("Invalid user ID %r provided; using an empty one", user_id)
            user_id = ""
        if resource_id and not is_valid_id(resource_id):
            logger.warning("Invalid resource ID %r provided; using an empty one", resource_id)
            resource_id = ""
        if reservation_date != 0 and not _is_valid_date(reservation_date):
            logger.warning(
                "Invalid reservation date %r provided; using the current time", reservation_date
            )
            reservation_date = 0
        if reservation_date == 0:
            reservation_date = _now()

        self.reservation_id = reservation_id
        self.user_id = user_id
        self.resource_id = resource_id
        self.reservation_date = reservation_date
        self.fulfillment_date = 0
        self.status = ReservationStatus.PENDING

    def __repr__(self) -> str:
        return (
            f"Reservation(reservation_id={self.reservation_id!r}, user_id={self.user_id!r}, "
            f"resource_id={self.resource_id!r}, status={self.status.value})"
        )

    def _require_complete(self, action: str) -> None:
        if not (self.reservation_id and self.user_id and self.resource_id):
            raise ReservationError(f"Cannot {action} reservation with missing information")

    def cancel(self) -> None:
        """Cancel a pending reservation."""
        self._require_complete("cancel")
        if not self.is_pending():
            raise ReservationError("Can only cancel pending reservations")
        self.status = ReservationStatus.CANCELED

    def fulfill(self) -> None:
        """Fulfil a pending reservation and record when it happened."""
        self._require_complete("fulfill")
        if not self.is_pending():
            raise ReservationError("Can only fulfill pending reservations")
        self.status = ReservationStatus.FULFILLED
        self.fulfillment_date = _now()

    def is_pending(self) -> bool:
        return self.status is ReservationStatus.PENDING

    def is_canceled(self) -> bool:
        return self.status is ReservationStatus.CANCELED

    def is_fulfilled(self) -> bool:
        return self.status is ReservationStatus.FULFILLED

    def to_json(self) -> dict[str, Any]:
        """Return the reservation as a JSON-ready dictionary."""
        return {
            "reservationId": self.reservation_id,
            "userId": self.user_id,
            "resourceId": self.resource_id,
            "reservationDate": self.reservation_date,
            "fulfillmentDate": self.fulfillment_date,
            "status": self.status.value,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Reservation":
        """Build a reservation from a dictionary; a malformed one yields an empty reservation."""
        try:
            reservation = cls(
                _string(data, "reservationId"),
                _string(data, "userId"),
                _string(data, "resourceId"),
                _integer(data, "reservationDate"),
            )
            reservation.fulfillment_date = _integer(data, "fulfillmentDate")
            status = _string(data, "status")
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Error parsing Reservation from JSON: %s", exc)
            return cls()

        try:
            reservation.status = ReservationStatus(status)
        except ValueError:
            logger.warning("Invalid status %r in JSON; using Pending", status)
            reservation.status = ReservationStatus.PENDING

        if reservation.fulfillment_date < 0:
            logger.warning("Invalid fulfillment date in JSON; using 0")
            reservation.fulfillment_date = 0
        return reservation