import copy
from typing import Union

from dateutil.relativedelta import relativedelta

from . import SECONDS_PER_DAY
from .parser import time_to_seconds, parse_time_strict
from .formatters import format_24h, format_12h, format_day_suffix, span_of
from .logger import setup_logger
from .config import get_testing_mode

# Get logger
logger = setup_logger(__name__, testing=get_testing_mode())

Delta = Union[int, str]


def _is_delta(operand) -> bool:
    return isinstance(operand, (int, str)) and not isinstance(operand, bool)


def to_delta(operand: Delta, strict: bool = False) -> int:
    """Normalize an operand to seconds.

    Integers are taken as seconds and strings as durations ("01:23:45"),
    where an AM/PM marker means nothing.
    """
    # bool is an int subclass, but True seconds is never what was meant
    if isinstance(operand, bool):
        raise TypeError("Cannot apply a bool to a watch")
    if isinstance(operand, int):
        return operand
    if isinstance(operand, str):
        if strict:
            return parse_time_strict(operand, absolute=False)
        return time_to_seconds(operand, absolute=False)
    raise TypeError(f"Cannot apply {type(operand).__name__} to a watch, use int seconds or a duration string")


class Watch:
    """A fixed start time plus an offset that grows and shrinks.

    ``+=`` and ``-=`` change the watch in place, ``+`` and ``-`` return a
    changed copy. Operands are int seconds or duration strings. The end
    time ``start + offset`` is always computed, never stored.

    >>> watch = Watch("13:34", True)
    >>> watch += "01:23:45"
    >>> watch += 43434343
    >>> str(watch)
    '08:03:28 AM +503 days'
    """

    def __init__(self, time: str, meridiem: bool = False, strict: bool = False):
        if strict:
            self._start = parse_time_strict(time, absolute=True)
        else:
            self._start = time_to_seconds(time, absolute=True)
        self.offset = 0
        self.meridiem = meridiem
        self.strict = strict

    @classmethod
    def zero(cls, meridiem: bool = False) -> 'Watch':
        """Watch starting at midnight with no offset"""
        watch = cls.__new__(cls)
        watch._start = 0
        watch.offset = 0
        watch.meridiem = meridiem
        watch.strict = False
        return watch

    @property
    def start(self) -> int:
        """Start time in seconds, fixed at construction"""
        return self._start

    def add_offset(self) -> int:
        """Return the end time of the watch in seconds, not wrapped to a day"""
        return self._start + self.offset

    def change_meridiem(self, meridiem: bool):
        """Switch between 12h (True) and 24h (False) display"""
        self.meridiem = meridiem

    def apply_delta(self, operand: Delta, sign: int = 1) -> 'Watch':
        """Move the offset by ``operand`` (int seconds or duration string)"""
        delta = to_delta(operand, strict=self.strict)
        self.offset += sign * delta
        logger.debug(f"Applied {'+' if sign >= 0 else '-'}{operand!r} ({delta}s), offset now {self.offset}")
        return self

    def span(self) -> relativedelta:
        """Offset broken down into days, hours, minutes and seconds"""
        return span_of(self.offset)

    def to_display_string(self) -> str:
        end = self.add_offset() % SECONDS_PER_DAY
        diff = self.offset + self._start - end

        if self.meridiem:
            end_str = format_12h(end)
        else:
            end_str = format_24h(end)

        return f"{end_str}{format_day_suffix(diff)}"

    # Operations
    def __add__(self, other):
        if not _is_delta(other):
            return NotImplemented
        return copy.copy(self).apply_delta(other)

    def __sub__(self, other):
        if not _is_delta(other):
            return NotImplemented
        return copy.copy(self).apply_delta(other, sign=-1)

    def __iadd__(self, other):
        if not _is_delta(other):
            return NotImplemented
        return self.apply_delta(other)

    def __isub__(self, other):
        if not _is_delta(other):
            return NotImplemented
        return self.apply_delta(other, sign=-1)

    # Display and formatting
    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"Watch(start={self._start}, offset={self.offset}, meridiem={self.meridiem})"
