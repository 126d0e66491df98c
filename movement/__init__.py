"""Start time plus a running offset, shown on a 12h or 24h clock with day rollover."""

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Time pattern components
TIME_COMPONENTS = {
    'field': r'[+-]?\d+',                   # Lenient field, any width
    'hours': r'(\d+)',                      # Durations may run past 24
    'clock_hours': r'(\d{1,2})',            # 0-23, or 1-12 with a meridiem
    'minutes': r'(?::(\d{1,2}))?',          # :00-:59
    'seconds': r'(?::(\d{1,2}))?',          # :00-:59
    'meridiem': r'(?:([ap])\.?\s*(?:m\.?)?)?',  # a/p/am/pm/a.m./p.m.
    'spaces': r'\s*',                       # Optional spaces
}

def build_field_pattern():
    """Build the pattern a single lenient H/M/S field must match"""
    return TIME_COMPONENTS['field']

def build_duration_pattern():
    """Build strict duration pattern from components"""
    return (f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['hours']}"
            f"{TIME_COMPONENTS['minutes']}"
            f"{TIME_COMPONENTS['seconds']}"
            f"{TIME_COMPONENTS['spaces']}")

def build_clock_pattern():
    """Build strict clock time pattern from components"""
    return (f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['clock_hours']}"
            f"{TIME_COMPONENTS['minutes']}"
            f"{TIME_COMPONENTS['seconds']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['meridiem']}"
            f"{TIME_COMPONENTS['spaces']}")

from .parser import TimeParseError, time_to_seconds, parse_time_strict  # noqa: E402
from .formatters import format_24h, format_12h, format_day_suffix, format_span  # noqa: E402
from .watch import Watch, to_delta  # noqa: E402

__version__ = '0.1.0'

__all__ = [
    'SECONDS_PER_DAY',
    'SECONDS_PER_HOUR',
    'TimeParseError',
    'Watch',
    'format_12h',
    'format_24h',
    'format_day_suffix',
    'format_span',
    'parse_time_strict',
    'time_to_seconds',
    'to_delta',
]
