"""Holiday definitions for Italy."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


CAPODANNO = _fixed("Capodanno", 1, 1)
"""New Year's Day on 1 January."""

EPIFANIA = _fixed("Epifania", 1, 6)
"""Epiphany on 6 January."""

PASQUETTA = Holiday(name="Pasquetta", type=_PUBLIC, offset=1, func=calc_easter_offset)
"""Easter Monday, the day after Easter."""

FESTA_DELLA_LIBERAZIONE = _fixed("Festa della Liberazione", 4, 25)
"""Liberation Day on 25 April."""

FESTA_DEL_LAVORO = _fixed("Festa del Lavoro", 5, 1)
"""Labour Day on 1 May."""

FESTA_DELLA_REPUBBLICA = _fixed("Festa della Repubblica", 6, 2)
"""Republic Day on 2 June."""

ASSUNZIONE = _fixed("Assunzione", 8, 15)
"""Assumption of Mary on 15 August."""

TUTTI_I_SANTI = _fixed("Tutti i santi", 11, 1)
"""All Saints' Day on 1 November."""

IMMACOLATA = _fixed("Immacolata Concezione", 12, 8)
"""Immaculate Conception on 8 December."""

NATALE = _fixed("Natale", 12, 25)
"""Christmas Day on 25 December."""

SANTO_STEFANO = _fixed("Santo Stefano", 12, 26)
"""Saint Stephen's Day on 26 December."""

HOLIDAYS = (
    CAPODANNO,
    EPIFANIA,
    PASQUETTA,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA,
    ASSUNZIONE,
    TUTTI_I_SANTI,
    IMMACOLATA,
    NATALE,
    SANTO_STEFANO,
)
"""The standard national holidays."""