"""Re-runnable queries pointing a host at the events behind a finding."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.enums import EventType
from models.events import BYTES_WRITTEN, DURATION, PATH, START_TIME, EventCollection


@dataclass(frozen=True)
class EventQuery:
    type_ids: Tuple[str, ...]
    columns: Tuple[str, ...] = field(default_factory=tuple)
    group_by: Optional[str] = None

    def run(self, items: EventCollection) -> EventCollection:
        wanted = set(self.type_ids)
        return items.apply(lambda ev: ev.type_id in wanted)

    def to_dict(self):
        return {
            "type_ids": list(self.type_ids),
            "columns": list(self.columns),
            "group_by": self.group_by,
        }


def query_for(*type_ids):
    return EventQuery(type_ids=tuple(str(getattr(t, "value", t)) for t in type_ids))


FILE_WRITE_QUERY = EventQuery(
    type_ids=(EventType.FILE_WRITE.value,),
    columns=(START_TIME, DURATION, PATH, BYTES_WRITTEN),
    group_by=PATH,
)
