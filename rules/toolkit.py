"""Shared helpers for rules: availability checks, score mapping and output sanitizing."""
import html
import math
import re

from models.enums import EventAvailability
from models.results import NOT_APPLICABLE, RuleResult
from models.queries import query_for
from rules import messages

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

# Worst first; the first one found among the requested types wins.
_AVAILABILITY_ORDER = (
    EventAvailability.UNAVAILABLE,
    EventAvailability.DISABLED,
    EventAvailability.UNKNOWN,
)


def get_event_availability(items, *type_ids):
    """Least favourable availability over all given event types."""
    if not type_ids:
        raise ValueError("At least one event type is required")
    found = {items.availability(t) for t in type_ids}
    for availability in _AVAILABILITY_ORDER:
        if availability in found:
            return availability
    return EventAvailability.AVAILABLE


def get_event_availability_result(rule, availability, *type_ids, query=None):
    """Canned result explaining why a rule could not look at its events."""
    availability = EventAvailability(availability)
    if availability == EventAvailability.AVAILABLE:
        raise ValueError("No availability result for available events")
    short, long = messages.AVAILABILITY_TEXTS[availability.value]
    types = ", ".join(str(getattr(t, "value", t)) for t in type_ids)
    return RuleResult(
        rule_id=rule.rule_id,
        rule_name=rule.name,
        topic=rule.topic,
        score=NOT_APPLICABLE,
        short_message=short.format(types=types),
        long_message=long.format(types=types),
        suggested_query=query or query_for(*type_ids),
    )


def map_exp(value, ymax, x1, y1, x2, y2):
    """Exponential map through (x1, y1) and (x2, y2), approaching ymax from below.

    Growth is flat well below x1. Past x2 the curve switches to a hyperbolic
    tail with the same value and slope at x2, so it keeps climbing without
    reaching ymax in floating point. Results are clamped at 0.
    """
    if not (x2 > x1 and 0 < y1 < y2 < ymax):
        raise ValueError(f"Invalid anchors: ({x1}, {y1}), ({x2}, {y2}), ymax={ymax}")
    if math.isnan(value):
        raise ValueError("Cannot map NaN")
    ratio = (ymax - y2) / (ymax - y1)
    t = (value - x1) / (x2 - x1)
    # Below this point the curve is negative; skip the pow to avoid overflow.
    if t <= math.log(ymax / (ymax - y1)) / math.log(ratio):
        return 0.0
    if t > 1:
        return ymax - (ymax - y2) / (1 - math.log(ratio) * (t - 1))
    return max(0.0, ymax - (ymax - y1) * ratio ** t)


def map_exp100(value, info_limit, warning_limit):
    """Score in [0, 100): info_limit maps to 25 (INFO), warning_limit to 75 (WARNING)."""
    return map_exp(value, 100.0, info_limit, 25.0, warning_limit, 75.0)


def sanitize_file_name(path):
    """Make an externally supplied path safe to show or export."""
    if not path:
        return messages.UNKNOWN_FILE_NAME
    cleaned = _CONTROL_CHARS.sub("", str(path))
    if not cleaned:
        return messages.UNKNOWN_FILE_NAME
    return html.escape(cleaned, quote=True)
