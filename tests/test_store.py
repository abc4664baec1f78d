from datetime import date, time

import orjson
import pytest

from recurcal.data import EventNotFoundError, JsonEventStore, OccurrenceIndex, StorageError, group_index
from recurcal.domain import EventOccurrence, RepeatRule, RepeatType


class TestJsonEventStore:
    """Test the JSON file store behind the persistence operations."""

    def test_missing_file_is_created_empty(self, store, events_path):
        assert store.list() == []
        assert orjson.loads(events_path.read_bytes())["events"] == []

    def test_batch_is_persisted_and_reloaded(self, store, events_path, make_event):
        rule = RepeatRule(type=RepeatType.DAILY, interval=1, end_date=date(2025, 10, 2), group_id="g1")
        store.create_many(
            [
                make_event(id="a", date=date(2025, 10, 1), repeat=rule),
                make_event(id="b", date=date(2025, 10, 2), repeat=rule),
            ]
        )
        reloaded = JsonEventStore(events_path).list()
        assert [event.id for event in reloaded] == ["a", "b"]
        assert reloaded[0].repeat == rule
        assert reloaded[1].start_time == time(9, 0)

    def test_record_layout(self, store, events_path, make_event):
        store.create_one(make_event(id="a", notification_minutes=60))
        record = orjson.loads(events_path.read_bytes())["events"][0]
        assert record["date"] == "2025-10-15"
        assert record["start_time"] == "09:00"
        assert record["repeat"] == {"type": "none", "interval": 0}
        assert record["notification_minutes"] == 60

    def test_events_need_ids(self, store, make_event):
        with pytest.raises(StorageError):
            store.create_one(make_event(id=None))

    def test_update_and_delete(self, store, make_event):
        store.create_one(make_event(id="a"))
        store.update_one(make_event(id="a", title="Renamed"))
        assert store.list()[0].title == "Renamed"
        store.delete_one("a")
        assert store.list() == []

    def test_unknown_ids_raise(self, store, make_event):
        with pytest.raises(EventNotFoundError):
            store.update_one(make_event(id="nope"))
        with pytest.raises(EventNotFoundError):
            store.delete_one("nope")

    def test_failed_mutation_leaves_state_untouched(self, store, make_event):
        store.create_one(make_event(id="a"))
        with pytest.raises(EventNotFoundError):
            store.delete_one("nope")
        assert [event.id for event in store.list()] == ["a"]

    def test_failed_write_leaves_state_untouched(self, store, events_path, make_event):
        store.create_one(make_event(id="a"))
        events_path.unlink()
        events_path.mkdir()
        with pytest.raises(StorageError):
            store.create_one(make_event(id="b"))
        with pytest.raises(StorageError):
            store.delete_one("a")
        assert [event.id for event in store.list()] == ["a"]

    def test_corrupt_file(self, events_path):
        events_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonEventStore(events_path).list()

    def test_backfills_missing_keys(self, events_path):
        events_path.write_bytes(orjson.dumps({"metadata": {"schema_version": 1}}))
        assert JsonEventStore(events_path).list() == []


class TestRecords:
    """Test conversion between stored records and domain objects."""

    def test_from_record_accepts_loose_input(self):
        event = EventOccurrence.from_record(
            {
                "id": 7,
                "title": "Gym",
                "date": "2025-10-15T00:00:00",
                "start_time": "7:05",
                "end_time": "08:00",
                "repeat": {"type": "weekly", "interval": "2", "end_date": "2025-12-01"},
            }
        )
        assert event.id == "7"
        assert event.date == date(2025, 10, 15)
        assert event.start_time == time(7, 5)
        assert event.repeat.interval == 2
        assert event.repeat.end_date == date(2025, 12, 1)
        assert event.notification_minutes == 10

    def test_bad_time_raises(self):
        with pytest.raises(ValueError):
            EventOccurrence.from_record({"title": "x", "date": "2025-10-15", "start_time": "25:00", "end_time": "26:00"})

    def test_bad_repeat_type_raises(self):
        with pytest.raises(ValueError):
            RepeatRule.from_record({"type": "hourly", "interval": 1})


class TestOccurrenceIndex:
    """Test the id and repeat-group lookups built from a store listing."""

    @pytest.fixture
    def index(self, make_event):
        rule = RepeatRule(type=RepeatType.DAILY, interval=1, group_id="g1")
        index = OccurrenceIndex()
        index.hydrate(
            [
                make_event(id="a", date=date(2025, 10, 1), repeat=rule),
                make_event(id="b", date=date(2025, 10, 2), repeat=rule),
                make_event(id="c", date=date(2025, 10, 2)),
                make_event(id=None, date=date(2025, 10, 3), repeat=rule),
            ]
        )
        return index

    def test_lookup_by_id(self, index):
        assert [event.id for event in index.all()] == ["a", "b", "c"]
        assert index.get("b").date == date(2025, 10, 2)
        assert index.get("missing") is None

    def test_group_members(self, index):
        assert [event.id for event in index.group_members("g1")] == ["a", "b"]
        assert index.group_members("unknown") == []

    def test_hydrate_replaces_previous_contents(self, index, make_event):
        index.hydrate([make_event(id="z")])
        assert [event.id for event in index.all()] == ["z"]
        assert index.group_members("g1") == []

    def test_group_index(self, index):
        assert group_index(index.all()) == {"g1": ["a", "b"]}
