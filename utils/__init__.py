"""Utility modules for iorules."""
from utils.logger import setup_logging
from utils.formatters import format_duration, format_bytes, format_score, parse_duration
