"""Data models."""
from models.enums import Severity, EventAvailability, Topic, EventType
from models.events import Event, EventCollection, AggregationError
from models.queries import EventQuery, FILE_WRITE_QUERY
from models.results import RuleResult, NOT_APPLICABLE
from models.thresholds import WriteLimits
from models.preferences import TypedPreference, PreferenceProvider
