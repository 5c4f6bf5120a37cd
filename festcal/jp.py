"""Holiday definitions for Japan."""

import dataclasses
import math
from datetime import date
from typing import Optional

from festcal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC
_MONDAY = 0
_THURSDAY = 3
_FRIDAY = 4
_SUNDAY = 6

_WEEKEND_ALT = (AltDay(_SUNDAY, 1),)
"""Sundays move to the following Monday."""


def _equinox_base(year: int) -> float:
    return 0.242194 * (year - 1980) - math.floor((year - 1980) / 4.0)


def _vernal_equinox_day(year: int) -> int:
    val = _equinox_base(year)
    if 1851 <= year <= 1899:
        val += 19.8277
    elif 1900 <= year <= 1979:
        val += 20.8357
    elif 1980 <= year <= 2099:
        val += 20.8431
    elif 2100 <= year <= 2150:
        val += 21.8510
    return math.floor(val)


def _autumnal_equinox_day(year: int) -> int:
    val = _equinox_base(year)
    if 1851 <= year <= 1899:
        val += 22.2588
    elif 1900 <= year <= 1979:
        val += 23.2588
    elif 1980 <= year <= 2099:
        val += 23.2488
    elif 2100 <= year <= 2150:
        val += 24.2488
    return math.floor(val)


def _calc_emperors_birthday(h: Holiday, year: int) -> date:
    # Emperor Akihito abdicated in 2019.
    if year <= 2019:
        return calc_day_of_month(dataclasses.replace(h, month=12, day=23), year)
    return calc_day_of_month(h, year)


def _calc_vernal_equinox(h: Holiday, year: int) -> date:
    return calc_day_of_month(dataclasses.replace(h, day=_vernal_equinox_day(year)), year)


def _calc_autumnal_equinox(h: Holiday, year: int) -> date:
    return calc_day_of_month(
        dataclasses.replace(h, day=_autumnal_equinox_day(year)), year
    )


def _calc_marine_day(h: Holiday, year: int) -> Optional[date]:
    # Moved for the 2020 Summer Olympics.
    if year in (2020, 2021):
        return calc_weekday_offset(
            dataclasses.replace(h, weekday=_THURSDAY, offset=4), year
        )
    return calc_weekday_offset(h, year)


def _calc_sports_day(h: Holiday, year: int) -> Optional[date]:
    # Moved for the 2020 Summer Olympics.
    if year in (2020, 2021):
        return calc_weekday_offset(
            dataclasses.replace(h, month=7, weekday=_FRIDAY, offset=4), year
        )
    return calc_weekday_offset(h, year)


_SILVER_WEEK_DAYS = {2009: 22, 2015: 22, 2026: 22, 2032: 21}


def _calc_silver_week(h: Holiday, year: int) -> Optional[date]:
    # Only dates in September 2009 - 2032 are known.
    day = _SILVER_WEEK_DAYS.get(year)
    if day is None:
        return None
    return date(year, h.month, day)


def _fixed(name: str, month: int, day: int, **extra) -> Holiday:
    return Holiday(
        name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month, **extra
    )


def _monday(name: str, month: int, offset: int) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        weekday=_MONDAY,
        offset=offset,
        func=calc_weekday_offset,
    )


NEW_YEAR = _fixed("New Year's Day", 1, 1, observed=_WEEKEND_ALT)
"""New Year's Day on 1 January."""

COMING_OF_AGE_DAY = _monday("Coming of Age Day", 1, 2)
"""Coming of Age Day on the second Monday of January."""

NATIONAL_FOUNDATION_DAY = _fixed(
    "National Foundation Day", 2, 11, observed=_WEEKEND_ALT
)
"""National Foundation Day on 11 February."""

THE_EMPERORS_BIRTHDAY = Holiday(
    name="The Emperor's Birthday",
    type=_PUBLIC,
    month=2,
    day=23,
    observed=_WEEKEND_ALT,
    func=_calc_emperors_birthday,
)
"""The Emperor's Birthday: 23 February, or 23 December up to 2019."""

VERNAL_EQUINOX_DAY = Holiday(
    name="Vernal Equinox Day",
    type=_PUBLIC,
    month=3,
    observed=_WEEKEND_ALT,
    func=_calc_vernal_equinox,
)
"""Vernal Equinox Day, around 20 March."""

SHOWA_DAY = _fixed("Showa Day", 4, 29, observed=_WEEKEND_ALT)
"""Showa Day on 29 April."""

CONSTITUTION_MEMORIAL_DAY = _fixed(
    "Constitution Memorial Day", 5, 3, observed=(AltDay(_SUNDAY, 3),)
)
"""Constitution Memorial Day on 3 May."""

GREENERY_DAY = _fixed("Greenery Day", 5, 4, observed=(AltDay(_SUNDAY, 2),))
"""Greenery Day on 4 May."""

CHILDRENS_DAY = _fixed("Children's Day", 5, 5, observed=_WEEKEND_ALT)
"""Children's Day on 5 May."""

MARINE_DAY = Holiday(
    name="Marine Day",
    type=_PUBLIC,
    month=7,
    weekday=_MONDAY,
    offset=3,
    func=_calc_marine_day,
)
"""Marine Day on the third Monday of July."""

MOUNTAIN_DAY = _fixed(
    "Mountain Day", 8, 11, observed=_WEEKEND_ALT, start_year=2016
)
"""Mountain Day on 11 August, from 2016."""

RESPECT_FOR_THE_AGED_DAY = _monday("Respect for the Aged Day", 9, 3)
"""Respect for the Aged Day on the third Monday of September."""

AUTUMNAL_EQUINOX_DAY = Holiday(
    name="Autumnal Equinox Day",
    type=_PUBLIC,
    month=9,
    observed=_WEEKEND_ALT,
    func=_calc_autumnal_equinox,
)
"""Autumnal Equinox Day, around 23 September."""

SPORTS_DAY = Holiday(
    name="Sports Day",
    type=_PUBLIC,
    month=10,
    weekday=_MONDAY,
    offset=2,
    func=_calc_sports_day,
)
"""Sports Day on the second Monday of October."""

CULTURE_DAY = _fixed("Culture Day", 11, 3, observed=_WEEKEND_ALT)
"""Culture Day on 3 November."""

LABOR_THANKSGIVING_DAY = _fixed(
    "Labor Thanksgiving Day", 11, 23, observed=_WEEKEND_ALT
)
"""Labor Thanksgiving Day on 23 November."""

NATIONAL_HOLIDAY_BETWEEN_RESPECT_FOR_THE_AGED_DAY_AND_AUTUMNAL_EQUINOX_DAY = Holiday(
    name="National holiday between Respect for the Aged Day and Autumnal Equinox Day",
    type=_PUBLIC,
    month=9,
    func=_calc_silver_week,
)
"""The national holiday between Respect for the Aged Day and Autumnal Equinox Day."""

NATIONAL_HOLIDAY_BETWEEN_SHOWA_DAY_AND_NEW_EMPEROR_ENTHRONEMENT_DAY = _fixed(
    "National Holiday Between Showa Day And New Emperor Enthronement Day",
    4,
    30,
    start_year=2019,
    end_year=2019,
)
"""The national holiday on 30 April 2019."""

THE_NEW_EMPEROR_ENTHRONEMENT_DAY = _fixed(
    "New Emperor Enthronement Day", 5, 1, start_year=2019, end_year=2019
)
"""The New Emperor Enthronement Day on 1 May 2019."""

NATIONAL_HOLIDAY_BETWEEN_THE_NEW_EMPEROR_ENTHRONEMENT_DAY_AND_CONSTITUTION_MEMORIAL_DAY = _fixed(
    "National holiday between New Emperor Enthronement Day and Constitution Memorial Day",
    5,
    2,
    start_year=2019,
    end_year=2019,
)
"""The national holiday on 2 May 2019."""

THE_NEW_EMPEROR_ENTHRONEMENT_CEREMONY = _fixed(
    "The New Emperor Enthronement Ceremony", 10, 22, start_year=2019, end_year=2019
)
"""The New Emperor Enthronement Ceremony on 22 October 2019."""

EXCEPTIONAL_NATIONAL_HOLIDAYS = (
    NATIONAL_HOLIDAY_BETWEEN_RESPECT_FOR_THE_AGED_DAY_AND_AUTUMNAL_EQUINOX_DAY,
    NATIONAL_HOLIDAY_BETWEEN_SHOWA_DAY_AND_NEW_EMPEROR_ENTHRONEMENT_DAY,
    THE_NEW_EMPEROR_ENTHRONEMENT_DAY,
    NATIONAL_HOLIDAY_BETWEEN_THE_NEW_EMPEROR_ENTHRONEMENT_DAY_AND_CONSTITUTION_MEMORIAL_DAY,
    THE_NEW_EMPEROR_ENTHRONEMENT_CEREMONY,
)
"""Holidays that occur only in particular years."""

HOLIDAYS = (
    NEW_YEAR,
    COMING_OF_AGE_DAY,
    NATIONAL_FOUNDATION_DAY,
    THE_EMPERORS_BIRTHDAY,
    VERNAL_EQUINOX_DAY,
    SHOWA_DAY,
    CONSTITUTION_MEMORIAL_DAY,
    GREENERY_DAY,
    CHILDRENS_DAY,
    MARINE_DAY,
    MOUNTAIN_DAY,
    RESPECT_FOR_THE_AGED_DAY,
    AUTUMNAL_EQUINOX_DAY,
    SPORTS_DAY,
    CULTURE_DAY,
    LABOR_THANKSGIVING_DAY,
) + EXCEPTIONAL_NATIONAL_HOLIDAYS
"""The standard national holidays."""