"""Typed threshold records."""
import math
from dataclasses import dataclass

INFO_LIMIT_FACTOR = 0.5


@dataclass(frozen=True)
class WriteLimits:
    """Write latency limits, in milliseconds.

    Only the warning limit is configured; the info limit is always half of it.
    """
    warning_limit_ms: float = 4000.0

    def __post_init__(self):
        value = self.warning_limit_ms
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"warning_limit_ms must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"warning_limit_ms must be a positive finite number, got {value!r}")
        object.__setattr__(self, "warning_limit_ms", float(value))

    @property
    def info_limit_ms(self):
        return self.warning_limit_ms * INFO_LIMIT_FACTOR
