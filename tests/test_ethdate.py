from datetime import datetime, timezone

import pytest

from ethiotime.ethdate import (
    Month,
    Weekday,
    from_gregorian,
    gregorian_to_jdn,
    now,
)


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "moment, expected",
    [
        (_utc(2024, 1, 1, 8, 30, 15), (2, 30, 15)),
        (_utc(2024, 1, 1, 14, 0, 0), (8, 0, 0)),
        (_utc(2024, 1, 1, 0, 0, 0), (18, 0, 0)),
        (_utc(2024, 1, 1, 23, 59, 59), (17, 59, 59)),
        (_utc(2024, 1, 1, 6, 0, 0), (0, 0, 0)),
        (_utc(2024, 1, 1, 10, 15, 30), (4, 15, 30)),
        (_utc(2024, 1, 1, 5, 45, 0), (23, 45, 0)),
        (_utc(2024, 1, 1, 12, 0, 0), (6, 0, 0)),
        (_utc(2024, 1, 1, 20, 30, 45), (14, 30, 45)),
        (_utc(2024, 1, 1, 5, 59, 59), (23, 59, 59)),
    ],
)
def test_clock(moment, expected):
    assert from_gregorian(moment).clock() == expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (_utc(2024, 1, 1, 8, 30, 0), "ታኅሣሥ 22, 2016 02:30"),
        (_utc(2024, 1, 1, 14, 45, 0), "ታኅሣሥ 22, 2016 08:45"),
        (_utc(2024, 1, 1, 0, 0, 0), "ታኅሣሥ 22, 2016 18:00"),
        (_utc(2024, 1, 1, 23, 59, 0), "ታኅሣሥ 22, 2016 17:59"),
    ],
)
def test_str(moment, expected):
    assert str(from_gregorian(moment)) == expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 1, 1), (2016, Month.TAHSAS, 22)),
        (datetime(2024, 9, 11), (2017, Month.MESKEREM, 1)),
        (datetime(2024, 9, 12), (2017, Month.MESKEREM, 2)),
        (datetime(2024, 9, 10), (2016, Month.PAGUMEN, 5)),
        (datetime(2023, 9, 11), (2015, Month.PAGUMEN, 6)),
    ],
)
def test_date(moment, expected):
    assert from_gregorian(moment).date() == expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 1, 1), 2460311),
        (datetime(2024, 9, 11), 2460565),
        (datetime(2023, 9, 11), 2460199),
    ],
)
def test_gregorian_to_jdn(moment, expected):
    assert gregorian_to_jdn(moment) == expected


def test_consecutive_days_have_consecutive_jdn():
    assert gregorian_to_jdn(datetime(2024, 3, 1)) - gregorian_to_jdn(
        datetime(2024, 2, 28)
    ) == 2


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 1, 1), Weekday.MONDAY),
        (datetime(2024, 9, 11), Weekday.WEDNESDAY),
        (datetime(2024, 1, 7), Weekday.SUNDAY),
        (datetime(2024, 1, 6), Weekday.SATURDAY),
    ],
)
def test_weekday(moment, expected):
    assert from_gregorian(moment).weekday() is expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 9, 11), "መስከረም"),
        (datetime(2024, 9, 10), "ጳጉሜን"),
        (datetime(2024, 1, 1), "ታኅሣሥ"),
    ],
)
def test_month_names(moment, expected):
    _, month, _ = from_gregorian(moment).date()
    assert str(month) == expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 1, 7), "እሁድ"),
        (datetime(2024, 1, 6), "ቅዳሜ"),
        (datetime(2024, 1, 1), "ሰኞ"),
    ],
)
def test_weekday_names(moment, expected):
    assert str(from_gregorian(moment).weekday()) == expected


def test_gregorian_returns_original_moment():
    moment = _utc(2024, 1, 1, 14, 30, 0)
    assert from_gregorian(moment).gregorian() == moment


def test_format_method():
    t = from_gregorian(_utc(2024, 1, 1, 14, 30, 0))
    assert t.format("Monday 2006") == "ሰኞ 2016"


def test_now_is_current():
    before = datetime.now()
    current = now()
    after = datetime.now()
    assert before <= current.gregorian() <= after
    assert current.jdn == gregorian_to_jdn(current.gregorian())