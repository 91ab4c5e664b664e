"""Contract every rule implements for the host that schedules it."""
from abc import ABC, abstractmethod

from models.preferences import PreferenceProvider
from rules.evaluation import EvaluationTask


class Rule(ABC):
    rule_id = ""
    name = ""
    topic = ""
    configuration_attributes = ()

    @abstractmethod
    def get_result(self, items, preferences):
        """Run the evaluation synchronously and return a RuleResult."""

    def evaluate(self, items, preferences=None):
        """Deferred evaluation; the host starts it with ``task.run()``."""
        return EvaluationTask(self.rule_id, self.get_result, items, preferences or PreferenceProvider())

    def __repr__(self):
        return f"<{type(self).__name__} {self.rule_id}>"
