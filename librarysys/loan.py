"""Loans of library resources to users."""

from __future__ import annotations

import logging
import string
import time
from typing import Any, ClassVar, Mapping

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400
_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
_MAX_FUTURE_SECONDS = 365 * SECONDS_PER_DAY * 10


class LoanError(Exception):
    """Raised when a loan cannot be renewed or returned."""


def _now() -> int:
    return int(time.time())


def _is_valid_identifier(value: str, max_length: int) -> bool:
    return 3 <= len(value) <= max_length and all(c in _ID_CHARS for c in value)


def is_valid_loan_id(loan_id: str) -> bool:
    """Return True for 3 to 30 ASCII letters, digits, '_' or '-'."""
    return _is_valid_identifier(loan_id, 30)


def is_valid_id(value: str) -> bool:
    """Return True for a user or resource ID: 3 to 20 allowed characters."""
    return _is_valid_identifier(value, 20)


def is_valid_date(date: int) -> bool:
    """Return True for a non-negative timestamp at most ten years ahead."""
    return 0 <= date <= _now() + _MAX_FUTURE_SECONDS


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


class Loan:
    """A resource lent to a user, with renewal limits shared by all loans.

    Invalid details given to the constructor are replaced by empty strings or
    zero timestamps.
    """

    max_renewals: ClassVar[int] = 2
    loan_period: ClassVar[int] = 14 * SECONDS_PER_DAY

    def __init__(
        self,
        loan_id: str = "",
        user_id: str = "",
        resource_id: str = "",
        borrow_date: int = 0,
        due_date: int = 0,
    ) -> None:
        self.loan_id = loan_id
        self.user_id = user_id
        self.resource_id = resource_id
        self.borrow_date = borrow_date
        self.due_date = due_date
        self.return_date = 0
        self.renewal_count = 0
        self.is_returned = False

        if loan_id and not is_valid_loan_id(loan_id):
            logger.warning("Invalid loan ID %r provided; using an empty one", loan_id)
            self.loan_id = ""
        if user_id and not is_valid_id(user_id):
            logger.warning("Invalid user ID %r provided; using an empty one", user_id)
            self.user_id = ""
        if resource_id and not is_valid_id(resource_id):
            logger.warning("Invalid resource ID %r provided; using an empty one", resource_id)
            self.resource_id = ""
        if borrow_date != 0 and not is_valid_date(borrow_date):
            logger.warning("Invalid borrow date %r provided; using 0", borrow_date)
            self.borrow_date = 0
        if due_date != 0 and not is_valid_date(due_date):
            logger.warning("Invalid due date %r provided; using 0", due_date)
            self.due_date = 0
        if borrow_date != 0 and due_date != 0 and due_date <= borrow_date:
            logger.warning("Due date must follow borrow date; using borrow date plus loan period")
            self.due_date = borrow_date + type(self).loan_period

    def __repr__(self) -> str:
        return (
            f"Loan(loan_id={self.loan_id!r}, user_id={self.user_id!r}, "
            f"resource_id={self.resource_id!r}, due_date={self.due_date})"
        )

    def _is_complete(self) -> bool:
        return bool(self.loan_id and self.user_id and self.resource_id)

    def is_overdue(self) -> bool:
        """Return True if the loan is still out and its due date has passed."""
        if self.is_returned:
            return False
        return _now() > self.due_date

    def renew(self) -> int:
        """Extend the due date by one loan period and return the new due date."""
        if self.is_returned:
            raise LoanError("Cannot renew a returned loan")
        if self.renewal_count >= type(self).max_renewals:
            raise LoanError("Maximum renewal limit reached")
        if _now() > self.due_date:
            raise LoanError("Cannot renew overdue loan")
        if not self._is_complete():
            raise LoanError("Cannot renew loan with missing information")
        self.due_date += type(self).loan_period
        self.renewal_count += 1
        return self.due_date

    def mark_returned(self) -> None:
        """Record the return of the loan; returning it twice changes nothing."""
        if self.is_returned:
            logger.warning("Loan %r already marked as returned", self.loan_id)
            return
        if not self._is_complete():
            raise LoanError("Cannot return loan with missing information")
        self.return_date = _now()
        self.is_returned = True

    @classmethod
    def set_max_renewals(cls, value: int = 2) -> None:
        """Set the renewal limit for all loans, kept between 0 and 10."""
        if value < 0:
            logger.warning("Invalid max renewals value %d; using the default (2)", value)
            value = 2
        elif value > 10:
            logger.warning("Max renewals %d too high; using 10", value)
            value = 10
        cls.max_renewals = value

    @classmethod
    def set_loan_period(cls, days: int) -> None:
        """Set the loan period for all loans in days, kept between 1 and 365."""
        if days < 1:
            logger.warning("Invalid loan period %d; using the default (14 days)", days)
            days = 14
        if days > 365:
            logger.warning("Loan period %d too long; using 365 days", days)
            days = 365
        cls.loan_period = days * SECONDS_PER_DAY

    def to_json(self) -> dict[str, Any]:
        """Return the loan as a JSON-ready dictionary."""
        return {
            "loanId": self.loan_id,
            "userId": self.user_id,
            "resourceId": self.resource_id,
            "borrowDate": self.borrow_date,
            "dueDate": self.due_date,
            "returnDate": self.return_date,
            "isReturned": self.is_returned,
            "renewalCount": self.renewal_count,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Loan":
        """Build a loan from a dictionary; a malformed one yields an empty loan."""
        try:
            loan = cls(
                _string(data, "loanId"),
                _string(data, "userId"),
                _string(data, "resourceId"),
                _integer(data, "borrowDate"),
                _integer(data, "dueDate"),
            )
            loan.return_date = _integer(data, "returnDate")
            loan.is_returned = _boolean(data, "isReturned")
            loan.renewal_count = _integer(data, "renewalCount")
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Error parsing Loan from JSON: %s", exc)
            return cls()

        if loan.renewal_count < 0:
            logger.warning("Invalid renewal count in JSON; using 0")
            loan.renewal_count = 0
        if loan.renewal_count > cls.max_renewals:
            logger.warning("Renewal count exceeds maximum; using the maximum")
            loan.renewal_count = cls.max_renewals
        return loan