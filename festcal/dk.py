"""Holiday definitions for Denmark."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int, **extra) -> Holiday:
    return Holiday(
        name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset, **extra
    )


NYTAARSDAG = _fixed("Nytårsdag", 1, 1)
"""New Year's Day on 1 January."""

SKAERTORSDAG = _easter("Skærtorsdag", -3)
"""Maundy Thursday, the Thursday before Easter."""

LANGFREDAG = _easter("Langfredag", -2)
"""Good Friday, the Friday before Easter."""

ANDEN_PAASKEDAG = _easter("Anden påskedag", 1)
"""Easter Monday, the day after Easter."""

STORE_BEDEDAG = _easter("Store bededag", 26, start_year=1686, end_year=2023)
"""General Prayer Day, the fourth Friday after Easter, from 1686 to 2023."""

KRISTI_HIMMELFARTSDAG = _easter("Kristi Himmelfartsdag", 39)
"""Ascension Day, the 39th day after Easter."""

ANDEN_PINSEDAG = _easter("Anden Pinsedag", 50)
"""Pentecost Monday, 50 days after Easter."""

GRUNDLOVSDAG = _fixed("Grundlovsdag", 6, 5)
"""Constitution Day on 5 June."""

JULEDAG = _fixed("Juledag", 12, 25)
"""Christmas Day on 25 December."""

ANDEN_JULEDAG = _fixed("Anden juledag", 12, 26)
"""The second day of Christmas on 26 December."""

HOLIDAYS = (
    NYTAARSDAG,
    SKAERTORSDAG,
    LANGFREDAG,
    ANDEN_PAASKEDAG,
    STORE_BEDEDAG,
    KRISTI_HIMMELFARTSDAG,
    ANDEN_PINSEDAG,
    GRUNDLOVSDAG,
    JULEDAG,
    ANDEN_JULEDAG,
)
"""The standard national holidays."""