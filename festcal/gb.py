"""Holiday definitions for the United Kingdom."""

from festcal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_BANK = ObservanceType.BANK
_MONDAY = 0
_SATURDAY = 5
_SUNDAY = 6

_WEEKEND_ALT = (AltDay(_SATURDAY, 2), AltDay(_SUNDAY, 1))
"""Saturdays and Sundays move to the following Monday."""


def _fixed(name: str, month: int, day: int, **extra) -> Holiday:
    return Holiday(
        name=name, type=_BANK, month=month, day=day, func=calc_day_of_month, **extra
    )


def _monday(name: str, month: int, offset: int, **extra) -> Holiday:
    return Holiday(
        name=name,
        type=_BANK,
        month=month,
        weekday=_MONDAY,
        offset=offset,
        func=calc_weekday_offset,
        **extra,
    )


NEW_YEAR = _fixed("New Year's Day", 1, 1, observed=_WEEKEND_ALT)
"""New Year's Day on 1 January."""

GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)
"""Good Friday, two days before Easter."""

EASTER_MONDAY = Holiday(
    name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset
)
"""Easter Monday, the day after Easter."""

EARLY_MAY = _monday("Early May", 5, 1, except_years=(2020,))
"""Early May bank holiday on the first Monday of May."""

VE_DAY = _fixed("VE Day", 5, 8, start_year=2020, end_year=2020)
"""VE Day, the 75th anniversary of the end of the Second World War, in 2020."""

CORONATION_DAY = _fixed(
    "Coronation of King Charles III", 5, 8, start_year=2023, end_year=2023
)
"""The coronation of King Charles III on 8 May 2023."""

SPRING_HOLIDAY = _monday("Spring Bank Holiday", 5, -1, except_years=(2022,))
"""Spring Bank Holiday on the last Monday of May."""

SPRING_HOLIDAY_2022 = _fixed(
    "Spring Bank Holiday", 6, 2, start_year=2022, end_year=2022
)
"""Spring Bank Holiday on 2 June, in 2022 only."""

PLATINUM_JUBILEE = _fixed(
    "Platinum Jubilee Bank Holiday", 6, 3, start_year=2022, end_year=2022
)
"""Platinum Jubilee Bank Holiday on 3 June, in 2022 only."""

SUMMER_HOLIDAY_SCOTLAND = _monday("Summer Bank Holiday", 8, 1)
"""Summer Bank Holiday in Scotland on the first Monday of August."""

SUMMER_HOLIDAY = _monday("Summer Bank Holiday", 8, -1)
"""Summer Bank Holiday on the last Monday of August."""

CHRISTMAS_DAY = _fixed("Christmas Day", 12, 25, observed=_WEEKEND_ALT)
"""Christmas Day on 25 December."""

BOXING_DAY = _fixed(
    "Boxing Day",
    12,
    26,
    observed=(AltDay(_SATURDAY, 2), AltDay(_SUNDAY, 2), AltDay(_MONDAY, 1)),
)
"""Boxing Day on 26 December."""

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    EARLY_MAY,
    VE_DAY,
    CORONATION_DAY,
    SPRING_HOLIDAY,
    SPRING_HOLIDAY_2022,
    PLATINUM_JUBILEE,
    SUMMER_HOLIDAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)
"""The standard national holidays."""