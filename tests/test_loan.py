import time

import pytest

from librarysys.loan import (
    SECONDS_PER_DAY,
    Loan,
    LoanError,
    is_valid_date,
    is_valid_id,
    is_valid_loan_id,
)


@pytest.fixture(autouse=True)
def _reset_loan_settings():
    Loan.set_max_renewals(2)
    Loan.set_loan_period(14)
    yield
    Loan.set_max_renewals(2)
    Loan.set_loan_period(14)


def now():
    return int(time.time())


def active_loan():
    start = now() - 1000
    return Loan("L-001", "user1", "res1", start, start + 10 * SECONDS_PER_DAY)


def renewal_extension():
    loan = active_loan()
    before = loan.due_date
    return loan.renew() - before


def test_default_settings():
    assert renewal_extension() == 1209600
    loan = active_loan()
    loan.renew()
    loan.renew()
    with pytest.raises(LoanError):
        loan.renew()
    assert loan.renewal_count == 2


@pytest.mark.parametrize(
    "loan_id, expected",
    [("ab", False), ("abc", True), ("L" * 30, True), ("L" * 31, False), ("L 01", False)],
)
def test_is_valid_loan_id(loan_id, expected):
    assert is_valid_loan_id(loan_id) is expected


@pytest.mark.parametrize(
    "value, expected",
    [("ab", False), ("r_1", True), ("r" * 20, True), ("r" * 21, False), ("r#1", False)],
)
def test_is_valid_id(value, expected):
    assert is_valid_id(value) is expected


def test_is_valid_date_bounds():
    assert is_valid_date(0) is True
    assert is_valid_date(-1) is False
    assert is_valid_date(now()) is True
    assert is_valid_date(now() + 20 * 365 * SECONDS_PER_DAY) is False


def test_constructor_keeps_valid_details():
    loan = active_loan()
    assert loan.loan_id == "L-001"
    assert loan.user_id == "user1"
    assert loan.resource_id == "res1"
    assert loan.due_date - loan.borrow_date == 10 * SECONDS_PER_DAY
    assert loan.return_date == 0
    assert loan.renewal_count == 0
    assert loan.is_returned is False


def test_due_date_before_borrow_date_is_corrected():
    start = now()
    loan = Loan("L-001", "user1", "res1", start, start - 100)
    assert loan.due_date == start + 14 * SECONDS_PER_DAY


def test_is_overdue():
    start = now() - 20 * SECONDS_PER_DAY
    loan = Loan("L-001", "user1", "res1", start, start + SECONDS_PER_DAY)
    assert loan.is_overdue() is True
    loan.mark_returned()
    assert loan.is_overdue() is False
    assert active_loan().is_overdue() is False


def test_renew_extends_due_date():
    loan = active_loan()
    before = loan.due_date
    new_due = loan.renew()
    assert new_due == loan.due_date == before + 14 * SECONDS_PER_DAY
    assert loan.renewal_count == 1


def test_renew_stops_at_limit():
    loan = active_loan()
    loan.renew()
    loan.renew()
    with pytest.raises(LoanError, match="Maximum renewal limit"):
        loan.renew()
    assert loan.renewal_count == 2


def test_renew_returned_loan_fails():
    loan = active_loan()
    loan.mark_returned()
    with pytest.raises(LoanError, match="returned"):
        loan.renew()


def test_renew_overdue_loan_fails():
    start = now() - 20 * SECONDS_PER_DAY
    loan = Loan("L-001", "user1", "res1", start, start + SECONDS_PER_DAY)
    with pytest.raises(LoanError, match="overdue"):
        loan.renew()


def test_renew_incomplete_loan_fails():
    start = now()
    loan = Loan("", "user1", "res1", start, start + SECONDS_PER_DAY)
    with pytest.raises(LoanError, match="missing information"):
        loan.renew()


def test_mark_returned_records_time():
    loan = active_loan()
    before = now()
    loan.mark_returned()
    assert loan.is_returned is True
    assert before <= loan.return_date <= now()


def test_mark_returned_twice_keeps_first_date():
    loan = active_loan()
    loan.mark_returned()
    first = loan.return_date
    loan.mark_returned()
    assert loan.return_date == first
    assert loan.is_returned is True


def test_mark_returned_incomplete_loan_fails():
    loan = Loan("L-001", "", "res1")
    with pytest.raises(LoanError, match="missing information"):
        loan.mark_returned()
    assert loan.is_returned is False


@pytest.mark.parametrize("value, expected", [(-1, 2), (11, 10), (5, 5), (0, 0), (10, 10)])
def test_set_max_renewals(value, expected):
    Loan.set_max_renewals(value)
    assert Loan.max_renewals == expected


@pytest.mark.parametrize(
    "days, expected_seconds",
    [(7, 7 * 86400), (0, 1209600), (365, 31536000), (400, 31536000)],
)
def test_set_loan_period(days, expected_seconds):
    Loan.set_loan_period(days)
    assert renewal_extension() == expected_seconds


def test_to_json_keys():
    data = active_loan().to_json()
    assert set(data) == {
        "loanId",
        "userId",
        "resourceId",
        "borrowDate",
        "dueDate",
        "returnDate",
        "isReturned",
        "renewalCount",
    }


def test_json_round_trip():
    loan = active_loan()
    loan.renew()
    loan.mark_returned()
    again = Loan.from_json(loan.to_json())
    assert again.to_json() == loan.to_json()


def test_from_json_clamps_renewal_count():
    data = active_loan().to_json()
    data["renewalCount"] = 9
    assert Loan.from_json(data).renewal_count == 2
    data["renewalCount"] = -3
    assert Loan.from_json(data).renewal_count == 0


def test_from_json_missing_field_gives_empty_loan():
    data = active_loan().to_json()
    del data["dueDate"]
    assert Loan.from_json(data).to_json() == Loan().to_json()


def test_from_json_wrong_type_gives_empty_loan():
    data = active_loan().to_json()
    data["isReturned"] = "no"
    assert Loan.from_json(data).loan_id == ""