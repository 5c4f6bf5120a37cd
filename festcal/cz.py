"""Holiday definitions for the Czech Republic."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


NEW_YEAR = _fixed("Nový rok", 1, 1)
"""New Year's Day on 1 January."""

GOOD_FRIDAY = Holiday(
    name="Velký pátek", type=_PUBLIC, offset=-2, func=calc_easter_offset
)
"""Good Friday, two days before Easter."""

EASTER_MONDAY = Holiday(
    name="Velikonoční pondělí", type=_PUBLIC, offset=1, func=calc_easter_offset
)
"""Easter Monday, the day after Easter."""

LABOUR_DAY = _fixed("Svátek práce", 5, 1)
"""Labour Day on 1 May."""

LIBERATION_DAY = _fixed("Den osvobození", 5, 8)
"""Liberation Day on 8 May."""

SAINTS_CYRIL_METHODIUS = _fixed("Den slovanských věrozvěstů Cyrila a Metoděje", 7, 5)
"""Saints Cyril and Methodius Day on 5 July."""

JAN_HUS_DAY = _fixed("Den upálení mistra Jana Husa", 7, 6)
"""Jan Hus Day on 6 July."""

SAINT_WENCESLAS_DAY = _fixed("Den české státnosti", 9, 28)
"""Saint Wenceslas Day on 28 September."""

INDEPENDENCE_DAY = _fixed("Den vzniku samostatného československého státu", 10, 28)
"""Independent Czechoslovak State Day on 28 October."""

FREEDOM_DAY = _fixed("Den boje za svobodu a demokracii", 11, 17)
"""Struggle for Freedom and Democracy Day on 17 November."""

CHRISTMAS_EVE = _fixed("Štědrý den", 12, 24)
"""Christmas Eve on 24 December."""

CHRISTMAS_DAY = _fixed("1. svátek vánoční", 12, 25)
"""Christmas Day on 25 December."""

SAINT_STEPHENS_DAY = _fixed("2. svátek vánoční", 12, 26)
"""Saint Stephen's Day on 26 December."""

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    LIBERATION_DAY,
    SAINTS_CYRIL_METHODIUS,
    JAN_HUS_DAY,
    SAINT_WENCESLAS_DAY,
    INDEPENDENCE_DAY,
    FREEDOM_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    SAINT_STEPHENS_DAY,
)
"""The standard national holidays."""