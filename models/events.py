"""Recorded runtime events and the read-only collection rules query."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional

from models.enums import EventAvailability

# Attribute names understood by Event.get()
DURATION = "duration"
START_TIME = "start_time"
PATH = "path"
BYTES_WRITTEN = "bytes_written"


class AggregationError(ValueError):
    """An aggregated attribute holds a value that is not a number."""

    def __init__(self, attribute, value, event=None):
        self.attribute = attribute
        self.value = value
        self.event = event
        super().__init__(f"Attribute '{attribute}' is not numeric: {value!r}")


@dataclass(frozen=True)
class Event:
    type_id: str
    start_time: float = 0.0
    duration_ms: float = 0.0
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def get(self, name, default=None):
        if name == DURATION:
            return self.duration_ms
        if name == START_TIME:
            return self.start_time
        return self.attributes.get(name, default)


def type_is(type_id) -> Callable[[Event], bool]:
    type_id = str(getattr(type_id, "value", type_id))
    return lambda ev: ev.type_id == type_id


def attribute_equals(name, value) -> Callable[[Event], bool]:
    return lambda ev: ev.get(name) == value


def _type_key(type_id):
    return str(getattr(type_id, "value", type_id))


class EventCollection:
    """Immutable, ordered view over events plus the trace's recording settings.

    ``type_settings`` maps event type id -> enabled flag as recorded in the
    trace. ``known_types`` lists types declared by the trace metadata even if
    no event of that type was written. Filtering returns a new collection
    sharing both, so availability answers stay the same on any subset.
    """

    def __init__(self, events: Iterable[Event] = (), type_settings=None, known_types=None):
        self._events = tuple(events)
        self._settings = MappingProxyType(
            {_type_key(k): bool(v) for k, v in (type_settings or {}).items()}
        )
        self._known = frozenset(_type_key(t) for t in (known_types or ()))

    def __iter__(self):
        return iter(self._events)

    def __len__(self):
        return len(self._events)

    def __bool__(self):
        return bool(self._events)

    def __repr__(self):
        return f"EventCollection({len(self._events)} events)"

    @property
    def type_settings(self):
        return self._settings

    @property
    def known_types(self):
        return self._known | {ev.type_id for ev in self._events}

    def apply(self, predicate: Callable[[Event], bool]) -> "EventCollection":
        return EventCollection(
            (ev for ev in self._events if predicate(ev)),
            type_settings=self._settings,
            known_types=self._known,
        )

    def of_type(self, type_id) -> "EventCollection":
        return self.apply(type_is(type_id))

    def has_events(self, type_id) -> bool:
        key = _type_key(type_id)
        return any(ev.type_id == key for ev in self._events)

    def availability(self, type_id) -> EventAvailability:
        key = _type_key(type_id)
        if self.has_events(key):
            return EventAvailability.AVAILABLE
        if key in self._settings:
            # Enabled with zero events still counts as available: the
            # aggregation reports "no events" on its own.
            if self._settings[key]:
                return EventAvailability.AVAILABLE
            return EventAvailability.DISABLED
        if key in self._known:
            return EventAvailability.UNKNOWN
        return EventAvailability.UNAVAILABLE

    # ── Aggregation ─────────────────────────────────────

    def _values(self, attribute):
        for ev in self._events:
            value = ev.get(attribute)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise AggregationError(attribute, value, ev)
            yield ev, value

    def item_with_max(self, attribute) -> Optional[Event]:
        """Event holding the largest value; the first one wins on ties."""
        best = None
        best_value = None
        for ev, value in self._values(attribute):
            if best is None or value > best_value:
                best, best_value = ev, value
        return best

    def sum(self, attribute) -> float:
        return float(sum(value for _, value in self._values(attribute)))

    def avg(self, attribute) -> Optional[float]:
        total = 0.0
        count = 0
        for _, value in self._values(attribute):
            total += value
            count += 1
        if count == 0:
            return None
        return total / count

    def group_sum(self, key_attribute, value_attribute) -> dict:
        """Sum of ``value_attribute`` per distinct ``key_attribute``, in first-seen order."""
        totals = {}
        for ev, value in self._values(value_attribute):
            key = ev.get(key_attribute)
            totals[key] = totals.get(key, 0.0) + value
        return totals
