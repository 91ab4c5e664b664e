"""Tests for duration and size formatting."""
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.formatters import format_bytes, format_duration, format_score, parse_duration


def test_format_duration():
    assert format_duration(0.25) == "250 µs"
    assert format_duration(12.34) == "12.3 ms"
    assert format_duration(4500) == "4.500 s"
    assert format_duration(90_000) == "1.50 min"
    assert format_duration(None) == "N/A"


def test_format_bytes():
    assert format_bytes(512) == "512 B"
    assert format_bytes(1536) == "1.5 KiB"
    assert format_bytes(5 * 1024 ** 2) == "5.0 MiB"
    assert format_bytes(3 * 1024 ** 5) == "3072.0 TiB"
    assert format_bytes(None) == "N/A"


def test_format_score():
    assert format_score(81.04) == "81.0"
    assert format_score(None) == "N/A"


@pytest.mark.parametrize("raw,expected", [
    (4000, 4000.0),
    (2.5, 2.5),
    ("4000", 4000.0),
    ("250ms", 250.0),
    ("4 s", 4000.0),
    ("1.5 min", 90_000.0),
    ("800 us", 0.8),
    ("2 S", 2000.0),
])
def test_parse_duration(raw, expected):
    assert parse_duration(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "fast", "4 weeks", "-1 s", None, True, [1]])
def test_parse_duration_invalid(raw):
    with pytest.raises(ValueError):
        parse_duration(raw)
