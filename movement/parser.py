import re
from datetime import datetime

from dateutil import parser

from . import SECONDS_PER_HOUR, build_field_pattern, build_duration_pattern, build_clock_pattern
from .logger import setup_logger
from .config import get_testing_mode

# Get logger
logger = setup_logger(__name__, testing=get_testing_mode())

FIELD_NAMES = ('hours', 'minutes', 'seconds')

# Only the time of day is read back from the parsed datetime
CLOCK_DEFAULT = datetime(2000, 1, 1)

field_pattern = re.compile(build_field_pattern(), re.ASCII)
duration_pattern = re.compile(build_duration_pattern(), re.ASCII)
clock_pattern = re.compile(build_clock_pattern(), re.ASCII | re.IGNORECASE)


class TimeParseError(ValueError):
    """Raised by the strict parser when a time string is malformed"""


def _parse_field(value: str, name: str, text: str) -> int:
    """Parse one H/M/S field, falling back to 0 when it isn't a number"""
    if field_pattern.fullmatch(value):
        return int(value)
    if value:
        logger.debug(f"Field {name}={value!r} in {text!r} is not a number, using 0")
    return 0


def time_to_seconds(text: str, absolute: bool = False) -> int:
    """Convert "H[:MM[:SS]] [AM|PM]" to seconds.

    Malformed or missing fields count as zero and nothing is raised. A PM
    marker adds 12 hours only when ``absolute`` is set; durations ignore it.
    No range checks are made, so "25:00" is more than a day of seconds.
    """
    pm = absolute and 'PM' in text.replace('.', '').upper()

    fields = text.split(' ')[0].split(':')
    fields = (fields + [''] * len(FIELD_NAMES))[:len(FIELD_NAMES)]
    hours, minutes, seconds = (_parse_field(value, name, text)
                               for value, name in zip(fields, FIELD_NAMES))

    if pm:
        hours += 12
    return hours * SECONDS_PER_HOUR + minutes * 60 + seconds


def _parse_duration_strict(text: str) -> int:
    match = duration_pattern.fullmatch(text)
    if not match:
        raise TimeParseError(f"Invalid duration: {text!r}")

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    seconds = int(match.group(3)) if match.group(3) else 0
    if minutes > 59 or seconds > 59:
        raise TimeParseError(f"Minutes and seconds must be below 60: {text!r}")
    return hours * SECONDS_PER_HOUR + minutes * 60 + seconds


def _parse_clock_strict(text: str) -> int:
    match = clock_pattern.fullmatch(text)
    if not match:
        raise TimeParseError(f"Invalid time: {text!r}")

    # Rebuild a canonical string so dateutil never reads a bare hour as a day
    hour = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    seconds = int(match.group(3)) if match.group(3) else 0
    canonical = f"{hour}:{minutes:02}:{seconds:02}"
    if match.group(4):
        # 12-hour clocks run 12, 1, ..., 11
        if hour == 0:
            raise TimeParseError(f"Invalid hour for 12-hour clock: {text!r}")
        canonical += ' PM' if match.group(4).lower() == 'p' else ' AM'

    try:
        parsed = parser.parse(canonical, default=CLOCK_DEFAULT)
    except (ValueError, OverflowError) as e:
        raise TimeParseError(f"Invalid time: {text!r} ({e})") from e
    return parsed.hour * SECONDS_PER_HOUR + parsed.minute * 60 + parsed.second


def parse_time_strict(text: str, absolute: bool = False) -> int:
    """Like time_to_seconds, but raise TimeParseError on malformed input.

    Durations must be digits-only "H[:MM[:SS]]". Clock times also accept
    a/am/p/pm (with or without periods) and follow 12-hour clock rules, so
    "12:00 PM" is noon while "0:30 PM" and "13:00 PM" are rejected.
    """
    if not isinstance(text, str):
        raise TimeParseError(f"Expected a time string, got {type(text).__name__}")
    if absolute:
        return _parse_clock_strict(text)
    return _parse_duration_strict(text)
