"""Formatting and parsing utilities for durations and sizes."""
import math
import re

_DURATION_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*([a-zµ]*)\s*$")

# Unit -> milliseconds
_DURATION_UNITS = {
    "": 1.0,
    "ns": 1e-6,
    "us": 1e-3,
    "µs": 1e-3,
    "ms": 1.0,
    "s": 1000.0,
    "sec": 1000.0,
    "min": 60_000.0,
    "h": 3_600_000.0,
}

_BYTE_UNITS = ["KiB", "MiB", "GiB", "TiB"]


def parse_duration(value):
    """Parse a duration into milliseconds. Bare numbers are milliseconds: 4000, '4 s', '250ms'."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid duration: {value!r}")
    match = _DURATION_RE.match(value.lower())
    if not match or match.group(2) not in _DURATION_UNITS:
        raise ValueError(f"Invalid duration: {value!r}")
    return float(match.group(1)) * _DURATION_UNITS[match.group(2)]


def format_duration(ms):
    """Format milliseconds using the most readable unit."""
    if ms is None:
        return "N/A"
    ms = float(ms)
    if not math.isfinite(ms):
        return str(ms)
    magnitude = abs(ms)
    if magnitude < 1:
        return f"{ms * 1000:.0f} µs"
    if magnitude < 1000:
        return f"{ms:.1f} ms"
    if magnitude < 60_000:
        return f"{ms / 1000:.3f} s"
    return f"{ms / 60_000:.2f} min"


def format_bytes(n):
    """Format a byte count with binary prefixes: 1536 -> '1.5 KiB'."""
    if n is None:
        return "N/A"
    value = float(n)
    if abs(value) < 1024:
        return f"{int(value)} B"
    for unit in _BYTE_UNITS:
        value /= 1024
        if abs(value) < 1024 or unit == _BYTE_UNITS[-1]:
            return f"{value:.1f} {unit}"


def format_score(score):
    if score is None:
        return "N/A"
    return f"{float(score):.1f}"
