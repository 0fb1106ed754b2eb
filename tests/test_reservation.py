import time

import pytest

from librarysys.reservation import Reservation, ReservationError, ReservationStatus


def _reservation(date=None):
    if date is None:
        date = int(time.time()) - 60
    return Reservation("RSV-001", "user_01", "RES-001", date)


def test_new_reservation_is_pending():
    reservation = _reservation()
    assert reservation.is_pending()
    assert not reservation.is_canceled()
    assert not reservation.is_fulfilled()
    assert reservation.fulfillment_date == 0
    assert reservation.status is ReservationStatus.PENDING


def test_valid_date_is_kept():
    date = int(time.time()) - 3600
    assert _reservation(date).reservation_date == date


def test_zero_date_becomes_now():
    before = int(time.time())
    reservation = Reservation("RSV-001", "user_01", "RES-001")
    after = int(time.time())
    assert before <= reservation.reservation_date <= after


def test_date_out_of_range_becomes_now():
    before = int(time.time())
    reservation = _reservation(date=before - 2 * 365 * 86400)
    assert before <= reservation.reservation_date <= int(time.time())


def test_invalid_ids_become_empty():
    reservation = Reservation("r!", "u", "x" * 21, int(time.time()))
    assert reservation.reservation_id == ""
    assert reservation.user_id == ""
    assert reservation.resource_id == ""


def test_reservation_id_may_be_thirty_characters():
    reservation = Reservation("R" * 30, "user_01", "RES-001")
    assert reservation.reservation_id == "R" * 30


def test_cancel_pending():
    reservation = _reservation()
    reservation.cancel()
    assert reservation.is_canceled()


def test_cancel_twice_fails():
    reservation = _reservation()
    reservation.cancel()
    with pytest.raises(ReservationError, match="Can only cancel pending"):
        reservation.cancel()


def test_fulfill_records_date():
    reservation = _reservation()
    before = int(time.time())
    reservation.fulfill()
    assert reservation.is_fulfilled()
    assert before <= reservation.fulfillment_date <= int(time.time())


def test_fulfill_after_cancel_fails():
    reservation = _reservation()
    reservation.cancel()
    with pytest.raises(ReservationError, match="Can only fulfill pending"):
        reservation.fulfill()
    assert reservation.is_canceled()


def test_incomplete_reservation_cannot_change():
    reservation = Reservation("", "user_01", "RES-001")
    with pytest.raises(ReservationError, match="missing information"):
        reservation.cancel()
    with pytest.raises(ReservationError, match="missing information"):
        reservation.fulfill()
    assert reservation.is_pending()


def test_to_json_status_string():
    reservation = _reservation()
    reservation.fulfill()
    assert reservation.to_json()["status"] == "Fulfilled"


def test_round_trip():
    reservation = _reservation()
    reservation.cancel()
    copy = Reservation.from_json(reservation.to_json())
    assert copy.to_json() == reservation.to_json()


def test_from_json_unknown_status_is_pending():
    data = _reservation().to_json()
    data["status"] = "Lost"
    assert Reservation.from_json(data).is_pending()


def test_from_json_negative_fulfillment_date():
    data = _reservation().to_json()
    data["fulfillmentDate"] = -10
    assert Reservation.from_json(data).fulfillment_date == 0


def test_from_json_malformed_gives_empty_reservation():
    data = _reservation().to_json()
    del data["userId"]
    reservation = Reservation.from_json(data)
    assert reservation.reservation_id == ""
    assert reservation.user_id == ""
    assert reservation.resource_id == ""