"""Configuration management."""
import logging
import os
from pathlib import Path

import yaml

from models.thresholds import WriteLimits
from utils.formatters import parse_duration

logger = logging.getLogger("iorules.config")

_config = None
_DEFAULT_CONFIG = Path(__file__).parent / "default_config.yaml"

WRITE_WARNING_LIMIT_ID = "io.file.write.warning.limit"

ENV_OVERRIDES = {
    "IORULES_LOG_LEVEL": ("logging", "level"),
    "IORULES_MAX_WORKERS": ("runner", "max_workers"),
    "IORULES_WRITE_WARNING_LIMIT": ("preferences", WRITE_WARNING_LIMIT_ID),
}


def load_config(path=None):
    """Load config from YAML, merging defaults with optional overrides."""
    global _config

    with open(_DEFAULT_CONFIG) as f:
        config = yaml.safe_load(f)

    if path:
        if not Path(path).exists():
            raise ValueError(f"Config file not found: {path}")
        with open(path) as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        config = _deep_merge(config, overrides)

    for env_key, config_path in ENV_OVERRIDES.items():
        val = os.environ.get(env_key)
        if val:
            d = config
            for k in config_path[:-1]:
                d = d.setdefault(k, {})
            try:
                d[config_path[-1]] = int(val)
            except ValueError:
                d[config_path[-1]] = val
            logger.debug(f"{env_key} overrides {'.'.join(config_path)}")

    _validate_config(config)
    _config = config
    return config


def get_config(path=None):
    """Return cached config; loads it on first use or when a path is given."""
    global _config
    if _config is None or path:
        _config = load_config(path)
    return _config


def reset_config():
    global _config
    _config = None


def _deep_merge(base, override, prefix=""):
    """Merge override into base. Sections stay mappings; preference ids stay flat keys."""
    result = base.copy()
    for key, val in override.items():
        dotted = f"{prefix}{key}"
        if isinstance(result.get(key), dict):
            if not isinstance(val, dict):
                raise ValueError(f"Config section '{dotted}' must be a mapping, got {val!r}")
            result[key] = _deep_merge(result[key], val, f"{dotted}.")
        else:
            result[key] = val
            logger.debug(f"Config override: {dotted} = {val!r}")
    return result


def _validate_config(config):
    """Basic config validation."""
    required_sections = ["logging", "runner", "rules", "preferences"]
    for section in required_sections:
        if not isinstance(config.get(section), dict):
            raise ValueError(f"Missing required config section: {section}")

    workers = config["runner"].get("max_workers")
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ValueError(f"runner.max_workers must be an integer >= 1, got {workers!r}")

    enabled = config["rules"].get("enabled") or []
    if not isinstance(enabled, list):
        raise ValueError("rules.enabled must be a list of rule ids")

    limit = config["preferences"].get(WRITE_WARNING_LIMIT_ID)
    if limit is not None:
        try:
            WriteLimits(parse_duration(limit))
        except ValueError as e:
            raise ValueError(f"Invalid preferences.{WRITE_WARNING_LIMIT_ID}: {e}") from e
