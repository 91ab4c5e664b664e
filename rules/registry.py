"""Rule lookup and enablement."""
import logging

from rules.file_write import FileWriteRule

logger = logging.getLogger("iorules.rules.registry")

RULE_CLASSES = (FileWriteRule,)


class RulesManager:
    def __init__(self, enabled=None, rule_classes=RULE_CLASSES):
        self.rules = [cls() for cls in rule_classes]
        known = {r.rule_id for r in self.rules}
        self.enabled = set(enabled or ())
        unknown = sorted(self.enabled - known)
        if unknown:
            logger.warning(f"Unknown rule ids in config: {unknown}")

    @classmethod
    def from_config(cls, config):
        return cls(enabled=config.get("rules", {}).get("enabled") or ())

    def get_enabled_rules(self):
        if not self.enabled:
            return list(self.rules)
        return [r for r in self.rules if r.rule_id in self.enabled]

    def get_rule(self, rule_id):
        for r in self.rules:
            if r.rule_id == rule_id:
                return r
        return None

    def get_all_rules(self):
        return self.rules
