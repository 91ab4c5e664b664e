"""Rule flagging long file write operations."""
import logging

from models.enums import EventAvailability, EventType, Severity, Topic
from models.events import BYTES_WRITTEN, DURATION, PATH, attribute_equals
from models.preferences import duration_preference
from models.queries import FILE_WRITE_QUERY
from models.results import RuleResult
from models.thresholds import WriteLimits
from rules import messages
from rules.base import Rule
from rules.toolkit import (
    get_event_availability,
    get_event_availability_result,
    map_exp100,
    sanitize_file_name,
)
from utils.formatters import format_bytes, format_duration

logger = logging.getLogger("iorules.rules.file_write")

WRITE_WARNING_LIMIT = duration_preference(
    "io.file.write.warning.limit",
    messages.FILE_WRITE_CONFIG_WARNING_LIMIT,
    messages.FILE_WRITE_CONFIG_WARNING_LIMIT_LONG,
    default_ms=4000,
)


class FileWriteRule(Rule):
    rule_id = "FileWrite"
    name = messages.FILE_WRITE_RULE_NAME
    topic = Topic.FILE_IO.value
    configuration_attributes = (WRITE_WARNING_LIMIT,)

    def limits(self, preferences):
        return WriteLimits(preferences.get_preference_value(WRITE_WARNING_LIMIT))

    def _result(self, score, short, long=None):
        return RuleResult(
            rule_id=self.rule_id,
            rule_name=self.name,
            topic=self.topic,
            score=score,
            short_message=short,
            long_message=long,
            suggested_query=FILE_WRITE_QUERY,
        )

    def get_result(self, items, preferences):
        limits = self.limits(preferences)

        availability = get_event_availability(items, EventType.FILE_WRITE)
        if availability != EventAvailability.AVAILABLE:
            logger.debug(f"{self.rule_id}: {EventType.FILE_WRITE.value} is {availability.value}")
            return get_event_availability_result(
                self, availability, EventType.FILE_WRITE, query=FILE_WRITE_QUERY,
            )

        writes = items.of_type(EventType.FILE_WRITE)
        longest = writes.item_with_max(DURATION)
        if longest is None:
            return self._result(0.0, messages.FILE_WRITE_NO_EVENTS)

        peak = format_duration(longest.duration_ms)
        score = map_exp100(longest.duration_ms, limits.info_limit_ms, limits.warning_limit_ms)
        severity = Severity.from_score(score)
        logger.debug(f"{self.rule_id}: peak={longest.duration_ms}ms score={score:.2f} ({severity.value})")

        if severity not in (Severity.INFO, Severity.WARNING):
            return self._result(score, messages.FILE_WRITE_OK.format(peak=peak))

        path = longest.get(PATH)
        path_total = writes.apply(attribute_equals(PATH, path)).sum(DURATION)
        long = messages.FILE_WRITE_WARN_LONG.format(
            peak=peak,
            path=sanitize_file_name(path),
            amount=format_bytes(longest.get(BYTES_WRITTEN)),
            average=format_duration(writes.avg(DURATION)),
            total=format_duration(writes.sum(DURATION)),
            path_total=format_duration(path_total),
        )
        return self._result(score, messages.FILE_WRITE_WARN.format(peak=peak), long)
