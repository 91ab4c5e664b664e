"""Immutable rule findings."""
from dataclasses import dataclass
from typing import Optional

from models.enums import Severity
from models.queries import EventQuery

NOT_APPLICABLE = -1.0


@dataclass(frozen=True)
class RuleResult:
    rule_id: str
    rule_name: str
    topic: str
    score: float
    short_message: str
    long_message: Optional[str] = None
    suggested_query: Optional[EventQuery] = None

    @property
    def severity(self):
        return Severity.from_score(self.score)

    def to_dict(self):
        return {
            "rule_id": self.rule_id,
            "rule_name": self.rule_name,
            "topic": self.topic,
            "score": self.score,
            "severity": self.severity.value,
            "short_message": self.short_message,
            "long_message": self.long_message,
            "suggested_query": self.suggested_query.to_dict() if self.suggested_query else None,
        }
