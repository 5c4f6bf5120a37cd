"""Holiday definitions for France."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NOUVEL_AN = _fixed("Nouvel an", 1, 1)
"""New Year's Day on 1 January."""

LUNDI_DE_PAQUES = _easter("Lundi de Pâques", 1)
"""Easter Monday, the day after Easter."""

FETE_DU_TRAVAIL = _fixed("Fête du Travail", 5, 1)
"""Labour Day on 1 May."""

FETE_DE_LA_VICTOIRE = _fixed("Fête de la Victoire", 5, 8)
"""Victory in Europe Day on 8 May."""

ASCENSION = _easter("Ascension", 39)
"""Ascension Day, the 39th day after Easter."""

LUNDI_DE_PENTECOTE = _easter("Lundi de Pentecôte", 50)
"""Pentecost Monday, 50 days after Easter."""

FETE_NATIONALE = _fixed("Fête Nationale", 7, 14)
"""Bastille Day on 14 July."""

ASSOMPTION = _fixed("Assomption", 8, 15)
"""Assumption of Mary on 15 August."""

TOUSSAINT = _fixed("Toussaint", 11, 1)
"""All Saints' Day on 1 November."""

ARMISTICE_1918 = _fixed("Armistice de 1918", 11, 11)
"""Armistice Day on 11 November."""

NOEL = _fixed("Noël", 12, 25)
"""Christmas Day on 25 December."""

HOLIDAYS = (
    NOUVEL_AN,
    LUNDI_DE_PAQUES,
    FETE_DU_TRAVAIL,
    FETE_DE_LA_VICTOIRE,
    ASCENSION,
    LUNDI_DE_PENTECOTE,
    FETE_NATIONALE,
    ASSOMPTION,
    TOUSSAINT,
    ARMISTICE_1918,
    NOEL,
)
"""The standard national holidays."""