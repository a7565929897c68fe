"""Layout-driven formatting of Ethiopian calendar times.

A layout shows how a reference moment ("Monday, January 02, 2006 03:04 PM")
would be written. Each recognised token is replaced by the matching field of
the Ethiopian date, rendered with Amharic names.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Protocol, Tuple

LONG_DAY_NAMES = (
    "እሁድ",
    "ሰኞ",
    "ማክሰኞ",
    "ረቡዕ",
    "ሐሙስ",
    "አርብ",
    "ቅዳሜ",
)

SHORT_DAY_NAMES = (
    "እሁ",
    "ሰኞ",
    "ማክ",
    "ረቡ",
    "ሐሙ",
    "አር",
    "ቅዳ",
)

SHORT_MONTH_NAMES = (
    "መስ",
    "ጥቅ",
    "ህዳ",
    "ታህ",
    "ጥር",
    "የካ",
    "መጋ",
    "ሚያ",
    "ግን",
    "ሰኔ",
    "ሐም",
    "ነሐ",
    "ጳጉ",
)

LONG_MONTH_NAMES = (
    "መስከረም",
    "ጥቅምት",
    "ኅዳር",
    "ታኅሣሥ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዝያ",
    "ግንቦት",
    "ሰኔ",
    "ሐምሌ",
    "ነሐሴ",
    "ጳጉሜን",
)


class Std(Enum):
    """Layout tokens, valued by the text that stands for them."""

    LONG_MONTH = "January"
    MONTH = "Jan"
    NUM_MONTH = "1"
    ZERO_MONTH = "01"
    LONG_WEEKDAY = "Monday"
    WEEKDAY = "Mon"
    DAY = "2"
    UNDER_DAY = "_2"
    ZERO_DAY = "02"
    UNDER_YEAR_DAY = "__2"
    ZERO_YEAR_DAY = "002"
    HOUR = "15"
    HOUR12 = "3"
    ZERO_HOUR12 = "03"
    MINUTE = "4"
    ZERO_MINUTE = "04"
    SECOND = "5"
    ZERO_SECOND = "05"
    LONG_YEAR = "2006"
    YEAR = "06"
    PM = "PM"
    PM_LOWER = "pm"
    TZ = "MST"
    ISO8601_TZ = "Z0700"
    ISO8601_SECONDS_TZ = "Z070000"
    ISO8601_SHORT_TZ = "Z07"
    ISO8601_COLON_TZ = "Z07:00"
    ISO8601_COLON_SECONDS_TZ = "Z07:00:00"
    NUM_TZ = "-0700"
    NUM_SECONDS_TZ = "-070000"
    NUM_SHORT_TZ = "-07"
    NUM_COLON_TZ = "-07:00"
    NUM_COLON_SECONDS_TZ = "-07:00:00"
    FRAC_SECOND0 = ".0"
    FRAC_SECOND9 = ".9"

    @property
    def needs_date(self) -> bool:
        return self in _NEEDS_DATE

    @property
    def needs_clock(self) -> bool:
        return self in _NEEDS_CLOCK


_NEEDS_DATE = frozenset(
    {
        Std.LONG_MONTH,
        Std.MONTH,
        Std.NUM_MONTH,
        Std.ZERO_MONTH,
        Std.LONG_WEEKDAY,
        Std.WEEKDAY,
        Std.DAY,
        Std.UNDER_DAY,
        Std.ZERO_DAY,
        Std.UNDER_YEAR_DAY,
        Std.ZERO_YEAR_DAY,
        Std.LONG_YEAR,
        Std.YEAR,
    }
)

_NEEDS_CLOCK = frozenset(
    {
        Std.HOUR,
        Std.HOUR12,
        Std.ZERO_HOUR12,
        Std.MINUTE,
        Std.ZERO_MINUTE,
        Std.SECOND,
        Std.ZERO_SECOND,
        Std.PM,
        Std.PM_LOWER,
    }
)

_ZERO_X = {
    "1": Std.ZERO_MONTH,
    "2": Std.ZERO_DAY,
    "3": Std.ZERO_HOUR12,
    "4": Std.ZERO_MINUTE,
    "5": Std.ZERO_SECOND,
    "6": Std.YEAR,
}

_NUM_TZ_TOKENS = (
    Std.NUM_SECONDS_TZ,
    Std.NUM_COLON_SECONDS_TZ,
    Std.NUM_TZ,
    Std.NUM_COLON_TZ,
    Std.NUM_SHORT_TZ,
)

_ISO_TZ_TOKENS = (
    Std.ISO8601_SECONDS_TZ,
    Std.ISO8601_COLON_SECONDS_TZ,
    Std.ISO8601_TZ,
    Std.ISO8601_COLON_TZ,
    Std.ISO8601_SHORT_TZ,
)


class Chunk(NamedTuple):
    """Literal text before a token, the token (None at the end) and the rest."""

    prefix: str
    std: Optional[Std]
    suffix: str
    arg: int = 0


class _Moment(Protocol):
    def date(self) -> Tuple[int, object, int]: ...

    def clock(self) -> Tuple[int, int, int]: ...

    def weekday(self) -> object: ...


def _starts_with_lower(text: str) -> bool:
    return bool(text) and "a" <= text[0] <= "z"


def _is_digit(text: str, index: int) -> bool:
    return index < len(text) and "0" <= text[index] <= "9"


def _utf8_prefix(text: str, size: int) -> str:
    return text.encode("utf-8")[:size].decode("utf-8", errors="ignore")


def next_std_chunk(layout: str) -> Chunk:
    """Split layout at its first token."""
    for i, c in enumerate(layout):
        nxt = layout[i + 1 : i + 2]
        if c == "J":
            if layout.startswith("Jan", i):
                if layout.startswith("January", i):
                    return Chunk(layout[:i], Std.LONG_MONTH, layout[i + 7 :])
                if not _starts_with_lower(layout[i + 3 :]):
                    return Chunk(layout[:i], Std.MONTH, layout[i + 3 :])
        elif c == "M":
            if layout.startswith("Mon", i):
                if layout.startswith("Monday", i):
                    return Chunk(layout[:i], Std.LONG_WEEKDAY, layout[i + 6 :])
                if not _starts_with_lower(layout[i + 3 :]):
                    return Chunk(layout[:i], Std.WEEKDAY, layout[i + 3 :])
            if layout.startswith("MST", i):
                return Chunk(layout[:i], Std.TZ, layout[i + 3 :])
        elif c == "0":
            if nxt and "1" <= nxt <= "6":
                return Chunk(layout[:i], _ZERO_X[nxt], layout[i + 2 :])
            if layout.startswith("002", i):
                return Chunk(layout[:i], Std.ZERO_YEAR_DAY, layout[i + 3 :])
        elif c == "1":
            if nxt == "5":
                return Chunk(layout[:i], Std.HOUR, layout[i + 2 :])
            return Chunk(layout[:i], Std.NUM_MONTH, layout[i + 1 :])
        elif c == "2":
            if layout.startswith("2006", i):
                return Chunk(layout[:i], Std.LONG_YEAR, layout[i + 4 :])
            return Chunk(layout[:i], Std.DAY, layout[i + 1 :])
        elif c == "_":
            if nxt == "2":
                # "_2006" is a literal underscore followed by the long year.
                if layout.startswith("2006", i + 1):
                    return Chunk(layout[: i + 1], Std.LONG_YEAR, layout[i + 5 :])
                return Chunk(layout[:i], Std.UNDER_DAY, layout[i + 2 :])
            if layout.startswith("__2", i):
                return Chunk(layout[:i], Std.UNDER_YEAR_DAY, layout[i + 3 :])
        elif c == "3":
            return Chunk(layout[:i], Std.HOUR12, layout[i + 1 :])
        elif c == "4":
            return Chunk(layout[:i], Std.MINUTE, layout[i + 1 :])
        elif c == "5":
            return Chunk(layout[:i], Std.SECOND, layout[i + 1 :])
        elif c == "P":
            if nxt == "M":
                return Chunk(layout[:i], Std.PM, layout[i + 2 :])
        elif c == "p":
            if nxt == "m":
                return Chunk(layout[:i], Std.PM_LOWER, layout[i + 2 :])
        elif c == "-":
            for token in _NUM_TZ_TOKENS:
                if layout.startswith(token.value, i):
                    return Chunk(layout[:i], token, layout[i + len(token.value) :])
        elif c == "Z":
            for token in _ISO_TZ_TOKENS:
                if layout.startswith(token.value, i):
                    return Chunk(layout[:i], token, layout[i + len(token.value) :])
        elif c == ".":
            if nxt in ("0", "9"):
                j = i + 1
                while j < len(layout) and layout[j] == nxt:
                    j += 1
                # Only a run that is not followed by another digit is a fraction.
                if not _is_digit(layout, j):
                    std = Std.FRAC_SECOND0 if nxt == "0" else Std.FRAC_SECOND9
                    return Chunk(layout[:i], std, layout[j:], j - (i + 1))
    return Chunk(layout, None, "")


def pad_int(x: int, width: int) -> str:
    """Decimal form of x, its digits zero-padded to at least width."""
    sign = "-" if x < 0 else ""
    return sign + str(abs(x)).zfill(width)


def time_period(hour: int) -> str:
    """Amharic name of the part of the day an hour falls in."""
    if 18 <= hour < 24:
        return "ለሊት"
    if 12 <= hour < 18:
        return "ማታ"
    if 6 <= hour < 12:
        return "ከሰአት"
    return "ጠዋት"


def _hour12(hour: int) -> int:
    # Noon is 12PM, midnight is 12AM.
    return hour % 12 or 12


def format_time(t: _Moment, layout: str) -> str:
    """Render an Ethiopian time according to layout."""
    parts = []
    date_fields = None
    clock_fields = None
    year_day = 0

    while layout:
        chunk = next_std_chunk(layout)
        parts.append(chunk.prefix)
        std = chunk.std
        if std is None:
            break
        layout = chunk.suffix

        if date_fields is None and std.needs_date:
            date_fields = t.date()
        if clock_fields is None and std.needs_clock:
            clock_fields = t.clock()
        year, month, day = date_fields or (0, None, 0)
        hour, minute, second = clock_fields or (0, 0, 0)

        if std is Std.YEAR:
            parts.append(pad_int(abs(year) % 100, 2))
        elif std is Std.LONG_YEAR:
            parts.append(pad_int(year, 4))
        elif std is Std.MONTH:
            parts.append(_utf8_prefix(str(month), 6))
        elif std is Std.LONG_MONTH:
            parts.append(str(month))
        elif std is Std.NUM_MONTH:
            parts.append(pad_int(int(month), 0))
        elif std is Std.ZERO_MONTH:
            parts.append(pad_int(int(month), 2))
        elif std is Std.WEEKDAY:
            parts.append(_utf8_prefix(str(t.weekday()), 3))
        elif std is Std.LONG_WEEKDAY:
            parts.append(str(t.weekday()))
        elif std is Std.DAY:
            parts.append(pad_int(day, 0))
        elif std is Std.UNDER_DAY:
            parts.append(pad_int(day, 0).rjust(2))
        elif std is Std.ZERO_DAY:
            parts.append(pad_int(day, 2))
        elif std is Std.UNDER_YEAR_DAY:
            parts.append(pad_int(year_day, 0).rjust(3))
        elif std is Std.ZERO_YEAR_DAY:
            parts.append(pad_int(year_day, 3))
        elif std is Std.HOUR:
            parts.append(pad_int(hour, 2))
        elif std is Std.HOUR12:
            parts.append(pad_int(_hour12(hour), 0))
        elif std is Std.ZERO_HOUR12:
            parts.append(pad_int(_hour12(hour), 2))
        elif std is Std.MINUTE:
            parts.append(pad_int(minute, 0))
        elif std is Std.ZERO_MINUTE:
            parts.append(pad_int(minute, 2))
        elif std is Std.SECOND:
            parts.append(pad_int(second, 0))
        elif std is Std.ZERO_SECOND:
            parts.append(pad_int(second, 2))
        elif std in (Std.PM, Std.PM_LOWER):
            parts.append(time_period(hour))

    return "".join(parts)