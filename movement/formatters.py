from typing import Tuple

from dateutil.relativedelta import relativedelta

from . import SECONDS_PER_HOUR, SECONDS_PER_DAY


def _split(secs: int) -> Tuple[int, int, int]:
    """Split seconds into hour of day, minutes and seconds"""
    hours = secs // SECONDS_PER_HOUR % 24
    minutes = secs % SECONDS_PER_HOUR // 60
    seconds = secs % 60
    return hours, minutes, seconds


def format_24h(secs: int) -> str:
    """Format seconds within a day as HH:MM:SS"""
    hours, minutes, seconds = _split(secs)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def format_12h(secs: int) -> str:
    """Format seconds within a day as HH:MM:SS AM/PM"""
    hours, minutes, seconds = _split(secs)

    if hours >= 12:
        hours -= 12
        meridiem = 'PM'
    else:
        meridiem = 'AM'

    # No zero hour on a 12-hour clock
    if hours == 0:
        hours = 12

    return f"{hours:02}:{minutes:02}:{seconds:02} {meridiem}"


def format_day_suffix(diff: int) -> str:
    """Turn a difference in seconds into a " +N days" / " -N days" suffix"""
    days = abs(diff) // SECONDS_PER_DAY
    if days == 0:
        return ''
    if diff > 0:
        return f" +{days} days"
    return f" -{days} days"


def span_of(secs: int) -> relativedelta:
    """Break seconds down into days, hours, minutes and seconds"""
    return relativedelta(seconds=secs)


def format_span(secs: int) -> str:
    """Format a span of seconds as "[-]D days, HH:MM:SS" """
    sign = '-' if secs < 0 else ''
    span = span_of(abs(secs))
    return f"{sign}{span.days} days, {span.hours:02}:{span.minutes:02}:{span.seconds:02}"
