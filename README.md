# festcal

Holiday definitions for a number of countries, with rules for working out
the date of each holiday in a given year and the day on which it is
observed when a substitution rule applies.

All calculations use the proleptic Gregorian calendar and return plain
`datetime.date` values.

## Installation

```
pip install festcal
```

## Covered calendars

| Module        | Calendar                               |
|---------------|----------------------------------------|
| `festcal.cz`  | Czech Republic                         |
| `festcal.de`  | Germany, with lists per federal state  |
| `festcal.dk`  | Denmark                                |
| `festcal.ecb` | European Central Bank                  |
| `festcal.es`  | Spain                                  |
| `festcal.fi`  | Finland                                |
| `festcal.fr`  | France                                 |
| `festcal.gb`  | United Kingdom                         |
| `festcal.gr`  | Greece (Orthodox Easter)               |
| `festcal.hr`  | Croatia                                |
| `festcal.ie`  | Republic of Ireland                    |
| `festcal.it`  | Italy                                  |
| `festcal.jp`  | Japan                                  |
| `festcal.lt`  | Lithuania                              |
| `festcal.lv`  | Latvia                                 |

Each module defines one `Holiday` constant per holiday (for example
`festcal.gb.BOXING_DAY`, `festcal.de.KARFREITAG`) and a `HOLIDAYS` tuple
with the standard set. `festcal.de` also has one tuple per federal state,
such as `HOLIDAYS_BY` (Bayern) or `HOLIDAYS_SN` (Sachsen), and
`festcal.jp` has `EXCEPTIONAL_NATIONAL_HOLIDAYS` for the days that occur
only in particular years. `festcal.ie` exports the rule
`calc_if_first_falls_on_friday`, used for Saint Brigid's Day.

## The `Holiday` type

`festcal.holiday.Holiday` is a dataclass describing a holiday: `name`,
`description`, `type` (an `ObservanceType`: `UNKNOWN`, `PUBLIC`, `BANK`,
`RELIGIOUS`, `OTHER`), `start_year` and `end_year` (0 means no limit),
`except_years`, the rule fields `month`, `day`, `weekday`, `offset`,
`calc_offset`, `julian`, the substitution rules `observed`, and the rule
function `func`.

`Holiday.calc(year)` returns a pair `(actual, observed)`. Both are `None`
when the year is outside the start and end years, is one of the exception
years, when there is no `func`, or when `func` returns `None`. Otherwise
`calc_offset` days are added to the computed date, and if its weekday
matches an `AltDay(day, offset)` in `observed`, the observed date is moved
by that offset; the first matching entry wins.

Ready-made rule functions, each taking `(holiday, year)`:

- `calc_day_of_month` – a fixed date, such as 5 November
- `calc_weekday_offset` – the nth `weekday` of `month`; a negative
  `offset` counts from the end of the month, and 0 gives `None`
- `calc_weekday_from` – the nth `weekday` on or after (positive `offset`)
  or on or before (negative `offset`) the date `month`/`day`
- `calc_easter_offset` – `offset` days from Western Easter, or from
  Orthodox Easter when `julian` is true

A rule function may be any callable of that shape; `HolidayFn` is its type.

`Holiday.clone(overrides)` returns a copy, taking the name, description,
type, start and end years, exception years and substitution rules from
`overrides` wherever they are set there.

Weekdays follow Python's numbering: Monday is 0 and Sunday is 6.

## Example

```python
from festcal import gb
from festcal.holiday import AltDay, Holiday, ObservanceType, calc_day_of_month

actual, observed = gb.CHRISTMAS_DAY.calc(2021)
# actual == date(2021, 12, 25), observed == date(2021, 12, 27)

founders_day = Holiday(
    name="Founders' Day",
    type=ObservanceType.OTHER,
    month=3,
    day=11,
    func=calc_day_of_month,
    observed=[AltDay(day=5, offset=2), AltDay(day=6, offset=1)],
)
print(founders_day.calc(2023))
```

## What the package does not do

It only places holidays in a year. It has no calendar object that
combines holiday lists, no business-day or working-hours arithmetic, and
no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```