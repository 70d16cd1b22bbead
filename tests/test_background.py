import copy
import json
from datetime import datetime, timedelta, timezone

from nutrix.background import check_expiration_dates
from nutrix.notifications import NotificationService


class FakeCollection:
    def __init__(self, docs):
        self.docs = docs

    def find(self, query):
        return [copy.deepcopy(d) for d in self.docs]


class FakeDatabase:
    def __init__(self, materials):
        self.collections = {"materials": FakeCollection(materials)}

    def __getitem__(self, name):
        return self.collections[name]


class RecordingNotifications(NotificationService):
    def __init__(self):
        self.sent = []

    def send_to_topic(self, topic_name, message):
        self.sent.append((topic_name, message))


def _material(entries):
    return {"id": "m1", "name": "Milk (seeded)", "entries": entries}


def test_soon_expiring_entry_is_announced():
    now = datetime.now(timezone.utc)
    db = FakeDatabase([_material([{"id": "e1", "expiration_date": now + timedelta(days=3)}])])
    notifications = RecordingNotifications()

    warnings = check_expiration_dates(db, notifications)

    expected = "Material Milk (seeded), entry e1 will expire within 2 weeks"
    assert warnings == [expected]
    topic, payload = notifications.sent[0]
    assert topic == "expire_soon"
    message = json.loads(payload)
    assert message["topic_name"] == "expire_soon"
    assert message["type"] == "topic_message"
    assert message["severity"] == "warn"
    assert message["message"] == expected


def test_far_expiry_is_not_announced():
    now = datetime.now(timezone.utc)
    db = FakeDatabase([_material([{"id": "e1", "expiration_date": now + timedelta(days=100)}])])
    notifications = RecordingNotifications()

    assert check_expiration_dates(db, notifications) == []
    assert notifications.sent == []


def test_naive_dates_and_mixed_entries():
    naive_now = datetime.now(timezone.utc).replace(tzinfo=None)
    db = FakeDatabase(
        [
            _material(
                [
                    {"id": "old", "expiration_date": naive_now - timedelta(days=1)},
                    {"id": "fresh", "expiration_date": naive_now + timedelta(days=60)},
                ]
            )
        ]
    )
    notifications = RecordingNotifications()

    warnings = check_expiration_dates(db, notifications)

    assert len(warnings) == len(notifications.sent) == 1
    assert "entry old" in warnings[0]


def test_entry_without_date_counts_as_expired():
    db = FakeDatabase([_material([{"id": "e9"}])])
    notifications = RecordingNotifications()

    warnings = check_expiration_dates(db, notifications)

    assert warnings == ["Material Milk (seeded), entry e9 will expire within 2 weeks"]