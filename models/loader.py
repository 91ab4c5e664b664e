"""Load an already-materialized event dump (JSON or YAML) into an EventCollection."""
import json
import logging
from pathlib import Path

import yaml

from models.events import Event, EventCollection
from utils.formatters import parse_duration

logger = logging.getLogger("iorules.models.loader")

_RESERVED = {"type", "start_time", "duration", "duration_ms"}


def _parse_event(raw, index):
    if not isinstance(raw, dict) or "type" not in raw:
        raise ValueError(f"Event #{index} must be an object with a 'type' field")
    if "duration_ms" in raw:
        duration_ms = float(raw["duration_ms"])
    else:
        duration_ms = parse_duration(raw.get("duration", 0))
    attributes = {k: v for k, v in raw.items() if k not in _RESERVED}
    return Event(
        type_id=str(raw["type"]),
        start_time=float(raw.get("start_time", 0.0)),
        duration_ms=duration_ms,
        attributes=attributes,
    )


def parse_events(data):
    """Build a collection from a decoded dump: {settings, types, events}."""
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("Event dump must be a mapping with an 'events' list")
    settings = data.get("settings") or {}
    if not isinstance(settings, dict):
        raise ValueError("'settings' must map event type ids to enabled flags")
    known_types = data.get("types") or []
    if not isinstance(known_types, list):
        raise ValueError("'types' must be a list of event type ids")
    raw_events = data.get("events") or []
    if not isinstance(raw_events, list):
        raise ValueError("'events' must be a list")
    events = [_parse_event(raw, i) for i, raw in enumerate(raw_events)]
    return EventCollection(
        events,
        type_settings=settings,
        known_types=known_types,
    )


def load_events(path):
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {path}: {e}") from e
    else:
        data = json.loads(text)
    items = parse_events(data)
    logger.debug(f"Loaded {len(items)} events from {path}")
    return items
