"""Utility modules"""

from .encoding import detect_encoding
from .numbers import to_number, round_half_up, js_string
from .dates import is_temporal, format_date, format_time, format_timestamp
from .formatting import format_axis_tick
from .log import setup_logging

__all__ = [
    "detect_encoding",
    "to_number",
    "round_half_up",
    "js_string",
    "is_temporal",
    "format_date",
    "format_time",
    "format_timestamp",
    "format_axis_tick",
    "setup_logging",
]
