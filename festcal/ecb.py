"""Holiday definitions for the European Central Bank."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_BANK = ObservanceType.BANK


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_BANK, month=month, day=day, func=calc_day_of_month)


NEW_YEAR = _fixed("New Year's Day", 1, 1)
"""New Year's Day on 1 January."""

GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)
"""Good Friday, two days before Easter."""

EASTER_MONDAY = Holiday(name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset)
"""Easter Monday, the day after Easter."""

LABOUR_DAY = _fixed("Labour Day", 5, 1)
"""Labour Day on 1 May."""

CHRISTMAS_DAY = _fixed("Christmas Day", 12, 25)
"""Christmas Day on 25 December."""

CHRISTMAS_HOLIDAY = _fixed("Christmas Holiday", 12, 26)
"""The day after Christmas on 26 December."""

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    CHRISTMAS_DAY,
    CHRISTMAS_HOLIDAY,
)
"""The standard ECB holidays."""