import time

import pytest

from librarysys.notification import Notification


def now():
    return int(time.time())


def sample():
    return Notification("N-1", "user1", "Your book is ready", now() - 60)


def test_constructor_stores_details():
    sent = now() - 60
    note = Notification("N-1", "user1", "Your book is ready", sent)
    assert note.notification_id == "N-1"
    assert note.user_id == "user1"
    assert note.message == "Your book is ready"
    assert note.sent_date == sent
    assert note.read is False


def test_mark_read():
    note = sample()
    note.mark_read()
    assert note.read is True


@pytest.mark.parametrize(
    "notification_id, message",
    [
        ("", "Notification ID cannot be empty"),
        ("n" * 51, "Notification ID too long"),
        ("n 1", "Notification ID contains invalid characters"),
    ],
)
def test_invalid_notification_id(notification_id, message):
    with pytest.raises(ValueError, match=message):
        Notification(notification_id, "user1", "hello", 0)


@pytest.mark.parametrize(
    "user_id, message",
    [
        ("", "User ID cannot be empty"),
        ("u" * 31, "User ID too long"),
        ("u@1", "User ID contains invalid characters"),
    ],
)
def test_invalid_user_id(user_id, message):
    with pytest.raises(ValueError, match=message):
        Notification("N-1", user_id, "hello", 0)


def test_ids_at_maximum_length_are_accepted():
    note = Notification("n" * 50, "u" * 30, "hello", 0)
    assert len(note.notification_id) == 50
    assert len(note.user_id) == 30


def test_message_limits():
    assert len(Notification("N-1", "user1", "m" * 500, 0).message) == 500
    with pytest.raises(ValueError, match="Message too long"):
        Notification("N-1", "user1", "m" * 501, 0)
    with pytest.raises(ValueError, match="Message cannot be empty"):
        Notification("N-1", "user1", "", 0)


def test_sent_date_limits():
    with pytest.raises(ValueError, match="Invalid sent date"):
        Notification("N-1", "user1", "hello", -1)
    with pytest.raises(ValueError, match="cannot be in the future"):
        Notification("N-1", "user1", "hello", now() + 2 * 86400)
    soon = now() + 3600
    assert Notification("N-1", "user1", "hello", soon).sent_date == soon


def test_to_json_keys():
    assert set(sample().to_json()) == {
        "notificationId",
        "userId",
        "message",
        "sentDate",
        "readFlag",
    }


@pytest.mark.parametrize("read", [False, True])
def test_json_round_trip(read):
    note = sample()
    if read:
        note.mark_read()
    again = Notification.from_json(note.to_json())
    assert again.to_json() == note.to_json()
    assert again.read is read


def test_from_json_missing_field():
    data = sample().to_json()
    del data["readFlag"]
    with pytest.raises(ValueError, match="Missing required fields in JSON"):
        Notification.from_json(data)


def test_from_json_wrong_type():
    data = sample().to_json()
    data["sentDate"] = "yesterday"
    with pytest.raises(ValueError, match="JSON parsing error"):
        Notification.from_json(data)


def test_from_json_invalid_value():
    data = sample().to_json()
    data["userId"] = "bad id"
    with pytest.raises(ValueError, match="Failed to create notification from JSON"):
        Notification.from_json(data)