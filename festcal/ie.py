"""Holiday definitions for the Republic of Ireland."""

from datetime import date
from typing import Optional

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_MONDAY = 0
_FRIDAY = 4


def calc_if_first_falls_on_friday(h: Holiday, year: int) -> Optional[date]:
    """The first day of the month when it is a Friday, else the nth weekday rule."""
    first = date(year, h.month, 1)
    if first.weekday() == _FRIDAY:
        return first
    return calc_weekday_offset(h, year)


def _first_monday(name: str, month: int) -> Holiday:
    return Holiday(
        name=name, month=month, weekday=_MONDAY, offset=1, func=calc_weekday_offset
    )


NEW_YEAR = Holiday(name="New Year's Day", month=1, day=1, func=calc_day_of_month)
"""New Year's Day on 1 January."""

SAINT_BRIGID_DAY = Holiday(
    name="Saint Brigid’s Day",
    month=2,
    weekday=_MONDAY,
    offset=1,
    func=calc_if_first_falls_on_friday,
    start_year=2023,
)
"""Saint Brigid's Day: 1 February if a Friday, else the first Monday of February."""

EXTRA_PUBLIC_HOLIDAY_2022 = Holiday(
    name="Extra Public Holiday 2022",
    month=3,
    day=18,
    start_year=2022,
    end_year=2022,
    func=calc_day_of_month,
)
"""The extra public holiday on 18 March 2022."""

SAINT_PATRICK_DAY = Holiday(
    name="Saint Patrick's Day", month=3, day=17, func=calc_day_of_month
)
"""Saint Patrick's Day on 17 March."""

EASTER_MONDAY = Holiday(name="Easter Monday", offset=1, func=calc_easter_offset)
"""Easter Monday, the day after Easter."""

FIRST_MONDAY_MAY = _first_monday("First Monday in May", 5)
"""The first Monday in May."""

FIRST_MONDAY_JUNE = _first_monday("First Monday in June", 6)
"""The first Monday in June."""

FIRST_MONDAY_AUGUST = _first_monday("First Monday in August", 8)
"""The first Monday in August."""

LAST_MONDAY_IN_OCTOBER = Holiday(
    name="Last Monday in October",
    type=ObservanceType.PUBLIC,
    month=10,
    weekday=_MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)
"""The last Monday in October."""

CHRISTMAS_DAY = Holiday(name="Christmas Day", month=12, day=25, func=calc_day_of_month)
"""Christmas Day on 25 December."""

SAINT_STEPHEN_DAY = Holiday(
    name="Saint Stephen's Day", month=12, day=26, func=calc_day_of_month
)
"""Saint Stephen's Day on 26 December."""

HOLIDAYS = (
    NEW_YEAR,
    EXTRA_PUBLIC_HOLIDAY_2022,
    SAINT_BRIGID_DAY,
    SAINT_PATRICK_DAY,
    EASTER_MONDAY,
    FIRST_MONDAY_MAY,
    FIRST_MONDAY_JUNE,
    FIRST_MONDAY_AUGUST,
    LAST_MONDAY_IN_OCTOBER,
    CHRISTMAS_DAY,
    SAINT_STEPHEN_DAY,
)
"""The standard national holidays."""