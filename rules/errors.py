"""Rule evaluation errors."""


class RuleEvaluationError(Exception):
    """An evaluation failed on an unexpected fault; the host decides what to do next."""

    def __init__(self, rule_id, message=None):
        self.rule_id = rule_id
        super().__init__(message or f"Evaluation of rule '{rule_id}' failed")
