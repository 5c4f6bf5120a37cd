"""Holiday definitions for Latvia."""

from festcal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC
_SATURDAY = 5
_SUNDAY = 6

_WEEKEND_ALT = (AltDay(_SATURDAY, 2), AltDay(_SUNDAY, 1))
"""Saturdays and Sundays move to the following Monday."""


def _fixed(name: str, month: int, day: int, **extra) -> Holiday:
    return Holiday(
        name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month, **extra
    )


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NEW_YEAR = _fixed("Jaunais Gads", 1, 1)
"""New Year's Day on 1 January."""

GOOD_FRIDAY = _easter("Lielā Piektdiena", -2)
"""Good Friday, two days before Easter."""

EASTER = _easter("Pirmās Lieldienas", 0)
"""Easter Sunday."""

EASTER_MONDAY = _easter("Otrās Lieldienas", 1)
"""Easter Monday, the day after Easter."""

LABOUR_DAY = _fixed(
    "Darba svētki, Latvijas Republikas Satversmes sapulces sasaukšanas diena", 5, 1
)
"""International Workers' Day on 1 May."""

STATE_RESTORATION_DAY = _fixed(
    "Latvijas Republikas Neatkarības deklarācijas pasludināšanas diena",
    5,
    4,
    observed=_WEEKEND_ALT,
)
"""Restoration of Independence Day on 4 May."""

MIDSUMMER_EVE = _fixed("Līgo diena", 6, 23)
"""Midsummer Eve on 23 June."""

MIDSUMMER_DAY = _fixed("Jāņu diena (vasaras saulgrieži)", 6, 24)
"""Midsummer Day on 24 June."""

STATE_PROCLAMATION_DAY = _fixed(
    "Latvijas Republikas proklamēšanas diena", 11, 18, observed=_WEEKEND_ALT
)
"""Proclamation Day of the Republic of Latvia on 18 November."""

CHRISTMAS_EVE = _fixed("Ziemassvētku vakars (ziemas saulgrieži)", 12, 24)
"""Christmas Eve on 24 December."""

CHRISTMAS_DAY = _fixed("Pirmie Ziemassvētki (ziemas saulgrieži)", 12, 25)
"""Christmas Day on 25 December."""

CHRISTMAS_DAY2 = _fixed("Otrie Ziemassvētki (ziemas saulgrieži)", 12, 26)
"""The second day of Christmas on 26 December."""

NEW_YEAR_EVE = _fixed("Vecgada vakars", 12, 31)
"""New Year's Eve on 31 December."""

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER,
    EASTER_MONDAY,
    LABOUR_DAY,
    STATE_RESTORATION_DAY,
    MIDSUMMER_EVE,
    MIDSUMMER_DAY,
    STATE_PROCLAMATION_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    CHRISTMAS_DAY2,
    NEW_YEAR_EVE,
)
"""The standard national holidays."""