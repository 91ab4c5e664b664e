"""Diagnostic rules over recorded events."""
from rules.errors import RuleEvaluationError
from rules.evaluation import EvaluationTask
from rules.base import Rule
from rules.file_write import FileWriteRule, WRITE_WARNING_LIMIT
from rules.registry import RulesManager
from rules.runner import RuleRunner
