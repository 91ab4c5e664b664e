"""Tests for events, the event collection, its aggregators and queries."""
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from conftest import make_read, make_write
from models.enums import EventAvailability, EventType
from models.events import (
    AggregationError, DURATION, PATH, Event, EventCollection, attribute_equals, type_is,
)
from models.queries import FILE_WRITE_QUERY, EventQuery, query_for


# ── Event ───────────────────────────────────────────────

def test_event_attribute_lookup():
    ev = make_write(250, path="/tmp/x", bytes_written=10, start_time=5.0)
    assert ev.get(DURATION) == 250
    assert ev.get("start_time") == 5.0
    assert ev.get(PATH) == "/tmp/x"
    assert ev.get("missing") is None
    assert ev.get("missing", 7) == 7


def test_event_attributes_are_read_only():
    attrs = {"path": "/tmp/x"}
    ev = Event(type_id="jdk.FileWrite", duration_ms=1, attributes=attrs)
    attrs["path"] = "/changed"
    assert ev.get(PATH) == "/tmp/x"
    with pytest.raises(TypeError):
        ev.attributes["path"] = "/other"


# ── Filtering ───────────────────────────────────────────

def test_of_type_keeps_order(sample_items):
    writes = sample_items.of_type(EventType.FILE_WRITE)
    assert len(writes) == 3
    assert [ev.duration_ms for ev in writes] == [1000, 4500, 2000]


def test_apply_does_not_touch_source(sample_items):
    only_a = sample_items.apply(attribute_equals(PATH, "/data/a.log"))
    assert len(only_a) == 2
    assert len(sample_items) == 4


def test_type_is_accepts_enum_and_string():
    items = EventCollection([make_write(1), make_read(2)])
    assert len(items.apply(type_is(EventType.FILE_READ))) == 1
    assert len(items.apply(type_is("jdk.FileWrite"))) == 1


# ── Aggregation ─────────────────────────────────────────

def test_item_with_max(sample_items):
    longest = sample_items.of_type(EventType.FILE_WRITE).item_with_max(DURATION)
    assert longest.duration_ms == 4500
    assert longest.get(PATH) == "/data/b.log"


def test_item_with_max_empty_is_none():
    assert EventCollection().item_with_max(DURATION) is None


def test_item_with_max_tie_picks_first_in_collection_order():
    first = make_write(3000, path="/first")
    second = make_write(3000, path="/second")
    items = EventCollection([make_write(100), first, second])
    assert items.item_with_max(DURATION) is first
    reversed_items = EventCollection([second, first])
    assert reversed_items.item_with_max(DURATION) is second


def test_sum_and_avg(sample_items):
    writes = sample_items.of_type(EventType.FILE_WRITE)
    assert writes.sum(DURATION) == 7500
    assert writes.avg(DURATION) == pytest.approx((1000 + 4500 + 2000) / 3)


def test_sum_for_single_path(sample_items):
    writes = sample_items.of_type(EventType.FILE_WRITE)
    assert writes.apply(attribute_equals(PATH, "/data/a.log")).sum(DURATION) == 3000


def test_empty_aggregates():
    items = EventCollection()
    assert items.sum(DURATION) == 0
    assert items.avg(DURATION) is None
    assert items.group_sum(PATH, DURATION) == {}


def test_group_sum(sample_items):
    totals = sample_items.of_type(EventType.FILE_WRITE).group_sum(PATH, DURATION)
    assert totals == {"/data/a.log": 3000, "/data/b.log": 4500}
    assert list(totals) == ["/data/a.log", "/data/b.log"]


def test_missing_values_are_skipped():
    items = EventCollection([make_write(10, bytes_written=None), make_write(20, bytes_written=5)])
    assert items.sum("bytes_written") == 5
    assert items.item_with_max("bytes_written").duration_ms == 20


def test_non_numeric_value_raises():
    items = EventCollection([make_write(10), make_write("slow")])
    with pytest.raises(AggregationError) as exc:
        items.item_with_max(DURATION)
    assert exc.value.attribute == DURATION
    assert exc.value.value == "slow"


# ── Availability ────────────────────────────────────────

def test_availability_with_events(sample_items):
    assert sample_items.availability(EventType.FILE_WRITE) == EventAvailability.AVAILABLE


def test_availability_enabled_without_events():
    items = EventCollection([], type_settings={"jdk.FileWrite": True})
    assert items.availability(EventType.FILE_WRITE) == EventAvailability.AVAILABLE


def test_availability_disabled():
    items = EventCollection([make_read(1)], type_settings={"jdk.FileWrite": False})
    assert items.availability(EventType.FILE_WRITE) == EventAvailability.DISABLED


def test_availability_unknown():
    items = EventCollection([], known_types=["jdk.FileWrite"])
    assert items.availability(EventType.FILE_WRITE) == EventAvailability.UNKNOWN


def test_availability_unavailable():
    items = EventCollection([make_read(1)])
    assert items.availability(EventType.FILE_WRITE) == EventAvailability.UNAVAILABLE


def test_filtered_collection_keeps_settings():
    items = EventCollection([make_read(1)], type_settings={"jdk.FileWrite": False})
    subset = items.of_type(EventType.FILE_READ)
    assert subset.availability(EventType.FILE_WRITE) == EventAvailability.DISABLED


# ── Queries ─────────────────────────────────────────────

def test_file_write_query_reruns(sample_items):
    rerun = FILE_WRITE_QUERY.run(sample_items)
    assert len(rerun) == 3
    assert all(ev.type_id == "jdk.FileWrite" for ev in rerun)


def test_query_for_and_to_dict():
    q = query_for(EventType.FILE_READ)
    assert q == EventQuery(type_ids=("jdk.FileRead",))
    assert FILE_WRITE_QUERY.to_dict()["group_by"] == "path"
