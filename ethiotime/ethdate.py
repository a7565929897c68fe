"""Ethiopian calendar dates and times derived from Gregorian moments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from datetime import datetime
from enum import IntEnum
from typing import Tuple

from ethiotime.layout import LONG_DAY_NAMES, LONG_MONTH_NAMES, format_time

JULIAN_OFFSET_ETH = 1723856
JULIAN_OFFSET_COPT = 1824665
JULIAN_OFFSET_GREG = 1721426


def _quo(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _rem(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _quo(a, b)


class Month(IntEnum):
    """A month of the Ethiopian year (Meskerem = 1, ...)."""

    MESKEREM = 1
    TIKMT = 2
    HIDAR = 3
    TAHSAS = 4
    TIR = 5
    YEKATIT = 6
    MEGABIT = 7
    MIYAZIYA = 8
    GINBOT = 9
    SENE = 10
    HAMLE = 11
    NEHASE = 12
    PAGUMEN = 13

    def __str__(self) -> str:
        return LONG_MONTH_NAMES[self.value - 1]


class Weekday(IntEnum):
    """A day of the week (Sunday = 0, ...)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return LONG_DAY_NAMES[self.value]


def gregorian_to_jdn(dt: _date) -> int:
    """Julian Day Number of a Gregorian date."""
    year, month, day = dt.year, dt.month, dt.day
    s = (
        _quo(year, 4) - _quo(year - 1, 4)
        - _quo(year, 100) + _quo(year - 1, 100)
        + _quo(year, 400) - _quo(year - 1, 400)
    )
    t = _quo(14 - month, 12)
    n = (
        31 * t * (month - 1)
        + (1 - t) * (59 + s + 30 * (month - 3))
        + _quo(3 * month - 7, 5)
        + day
        - 1
    )
    return (
        JULIAN_OFFSET_GREG
        + 365 * (year - 1)
        + _quo(year - 1, 4)
        - _quo(year - 1, 100)
        + _quo(year - 1, 400)
        + n
    )


@dataclass(frozen=True)
class Time:
    """An Ethiopian calendar date and time, kept with its Gregorian moment."""

    jdn: int
    moment: datetime

    def date(self) -> Tuple[int, Month, int]:
        """Ethiopian year, month and day."""
        offset = self.jdn - JULIAN_OFFSET_ETH
        r = _rem(offset, 1461)
        n = _rem(r, 365) + 365 * _quo(r, 1460)
        year = 4 * _quo(offset, 1461) + _quo(r, 365) - _quo(r, 1460)
        month = Month(_quo(n, 30) + 1)
        day = _rem(n, 30) + 1
        return year, month, day

    def clock(self) -> Tuple[int, int, int]:
        """Hour, minute and second in Ethiopian reckoning, six hours behind."""
        hour = self.moment.hour - 6
        if hour < 0:
            hour += 24
        return hour, self.moment.minute, self.moment.second

    def weekday(self) -> Weekday:
        return Weekday(((self.jdn % 7) + 1) % 7)

    def gregorian(self) -> datetime:
        """The Gregorian moment this time was made from."""
        return self.moment

    def format(self, layout: str) -> str:
        return format_time(self, layout)

    def __str__(self) -> str:
        hour, minute, _ = self.clock()
        return f"{self.format('January 02, 2006')} {hour:02d}:{minute:02d}"


def from_gregorian(dt: datetime) -> Time:
    """Ethiopian time for a Gregorian datetime."""
    return Time(gregorian_to_jdn(dt), dt)


def now() -> Time:
    """The current local time in the Ethiopian calendar."""
    return from_gregorian(datetime.now())