"""Holiday definitions for Spain."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


ANO_NUEVO = _fixed("Año Nuevo", 1, 1)
"""New Year's Day on 1 January."""

REYES = _fixed("Día de Reyes", 1, 6)
"""Epiphany on 6 January."""

VIERNES_SANTO = Holiday(
    name="Viernes Santo", type=_PUBLIC, offset=-2, func=calc_easter_offset
)
"""Good Friday, the Friday before Easter."""

TRABAJADOR = _fixed("Día del Trabajador", 5, 1)
"""Labour Day on 1 May."""

ASUNCION = _fixed("Asunción", 8, 15)
"""Assumption of Mary on 15 August."""

FIESTA_NACIONAL_DE_ESPANA = _fixed("Fiesta Nacional de España", 10, 12)
"""Spanish National Day on 12 October."""

TODOS_LOS_SANTOS = _fixed("Día de todos los Santos", 11, 1)
"""All Saints' Day on 1 November."""

CONSTITUCION = _fixed("Día de la Constitución", 12, 6)
"""Constitution Day on 6 December."""

INMACULADA_CONCEPCION = _fixed("Inmaculada Concepción", 12, 8)
"""Immaculate Conception on 8 December."""

NAVIDAD = _fixed("Navidad", 12, 25)
"""Christmas Day on 25 December."""

HOLIDAYS = (
    ANO_NUEVO,
    REYES,
    VIERNES_SANTO,
    TRABAJADOR,
    ASUNCION,
    FIESTA_NACIONAL_DE_ESPANA,
    TODOS_LOS_SANTOS,
    CONSTITUCION,
    INMACULADA_CONCEPCION,
    NAVIDAD,
)
"""The standard national holidays."""