"""Holiday definitions for Finland."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
)

_PUBLIC = ObservanceType.PUBLIC
_FRIDAY = 4
_SATURDAY = 5


def _fixed(name: str, month: int, day: int, kind: ObservanceType = _PUBLIC) -> Holiday:
    return Holiday(name=name, type=kind, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


def _first_weekday_from(name: str, month: int, day: int, weekday: int) -> Holiday:
    return Holiday(
        name=name,
        type=_PUBLIC,
        month=month,
        day=day,
        weekday=weekday,
        offset=1,
        func=calc_weekday_from,
    )


UUDENVUODENPAIVA = _fixed("Uudenvuodenpäivä", 1, 1)
"""New Year's Day on 1 January."""

LOPPIAINEN = _fixed("Loppiainen", 1, 6)
"""Epiphany on 6 January."""

PITKAPERJANTAI = _easter("Pitkäperjantai", -2)
"""Good Friday, the Friday before Easter."""

PAASIAISPAIVA = _easter("Pääsiäispäivä", 0)
"""Easter Sunday."""

TOINEN_PAASIAISPAIVA = _easter("Toinen pääsiäispäivä", 1)
"""Easter Monday, the day after Easter."""

VAPPU = _fixed("Vappu", 5, 1)
"""Labour Day on 1 May."""

HELATORSTAI = _easter("Helatorstai", 39)
"""Ascension Day, the 39th day after Easter."""

HELLUNTAIPAIVA = _easter("Helluntaipäivä", 49)
"""Pentecost Sunday, the 49th day after Easter."""

JUHANNUSAATTO = _first_weekday_from("Juhannusaatto", 6, 19, _FRIDAY)
"""Midsummer's Eve, the first Friday from 19 June."""

JUHANNUSPAIVA = _first_weekday_from("Juhannuspäivä", 6, 20, _SATURDAY)
"""Midsummer's Day, the first Saturday from 20 June."""

PYHAINPAIVA = _first_weekday_from("Pyhäinpäivä", 10, 31, _SATURDAY)
"""All Saints' Day, the first Saturday from 31 October."""

ITSENAISYYSPAIVA = _fixed("Itsenäisyyspäivä", 12, 6)
"""Independence Day on 6 December."""

JOULUAATTO = _fixed("Jouluaatto", 12, 24, ObservanceType.OTHER)
"""Christmas Eve on 24 December."""

JOULUPAIVA = _fixed("Joulupäivä", 12, 25)
"""Christmas Day on 25 December."""

TAPANINPAIVA = _fixed("Tapaninpäivä", 12, 26)
"""The second day of Christmas on 26 December."""

HOLIDAYS = (
    UUDENVUODENPAIVA,
    LOPPIAINEN,
    PITKAPERJANTAI,
    PAASIAISPAIVA,
    TOINEN_PAASIAISPAIVA,
    VAPPU,
    HELATORSTAI,
    HELLUNTAIPAIVA,
    JUHANNUSAATTO,
    JUHANNUSPAIVA,
    PYHAINPAIVA,
    ITSENAISYYSPAIVA,
    JOULUAATTO,
    JOULUPAIVA,
    TAPANINPAIVA,
)
"""The standard national holidays."""