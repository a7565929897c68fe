# ethiotime

Convert Gregorian `datetime` values to the Ethiopian calendar and format them
with Amharic month, weekday and time-of-day names.

## Installation

```
pip install ethiotime
```

## Usage

```python
from datetime import datetime, timezone

from ethiotime.ethdate import from_gregorian, now

t = from_gregorian(datetime(2024, 1, 1, 14, 30, tzinfo=timezone.utc))

t.date()      # (2016, <Month.TAHSAS: 4>, 22)
t.clock()     # (8, 30, 0)  -- Ethiopian clock, six hours behind
t.weekday()   # <Weekday.MONDAY: 1>
str(t)        # 'ታኅሣሥ 22, 2016 08:30'

t.format("Monday, January 02, 2006 03:04 PM")
# 'ሰኞ, ታኅሣሥ 22, 2016 08:30 ከሰአት'

t.format("01/02/2006")   # '04/22/2016'
t.gregorian()            # the original datetime

current = now()          # the current local time
```

`from_gregorian` returns a frozen `Time` holding the Julian Day Number
(`jdn`) and the original datetime (`moment`). The Ethiopian clock is found by
taking six hours off the datetime's own hour field; no time-zone conversion is
done, so pass the datetime in the zone you want to read it in.

`Month` (`MESKEREM` = 1 … `PAGUMEN` = 13) and `Weekday` (`SUNDAY` = 0 …
`SATURDAY` = 6) are integer enums whose `str()` is the Amharic name.

`gregorian_to_jdn(d)` gives the Julian Day Number of any object with `year`,
`month` and `day` attributes.

### Layouts

A layout shows how a reference moment would be written. These elements are
recognised:

| Element         | Meaning                                           |
|-----------------|---------------------------------------------------|
| `2006`          | year, zero-padded to four digits                  |
| `06`            | last two digits of the year                       |
| `January`       | full Amharic month name                           |
| `Jan`           | first two characters of the month name            |
| `1`, `01`       | month number, zero-padded with `01`               |
| `Monday`        | full Amharic weekday name                         |
| `Mon`           | first character of the weekday name               |
| `2`, `02`, `_2` | day of month: plain, zero-padded, space-padded    |
| `15`            | Ethiopian hour on a 24-hour clock                 |
| `3`, `03`       | Ethiopian hour on a 12-hour clock                 |
| `4`, `04`       | minute                                            |
| `5`, `05`       | second                                            |
| `PM`, `pm`      | Amharic period of the day                         |

The period of the day follows the Ethiopian hour: ጠዋት before 6, ከሰአት from
6, ማታ from 12 and ለሊት from 18.

Because a lone `1`, `2`, `3`, `4` or `5` is an element, digits meant as
literal text are replaced too. Time-zone elements (`MST`, `-0700`, `Z07:00`
and their variants), fractional seconds (`.000`, `.999`) and the day-of-year
elements (`002`, `__2`) are recognised but write no zone or fraction; the
day-of-year elements always write zero. Any other text is copied through
unchanged.

The lower-level helpers `next_std_chunk`, `pad_int`, `time_period` and
`format_time` live in `ethiotime.layout`, together with the `Std` token enum
and the Amharic name tables.

## What it does not do

The package only converts from Gregorian to Ethiopian and formats the result.
It does not parse text into dates, convert Ethiopian dates back to Gregorian,
do date arithmetic, or provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```