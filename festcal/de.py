"""Holiday definitions for Germany, nationwide and per federal state."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
)

_PUBLIC = ObservanceType.PUBLIC
_WEDNESDAY = 2


def _fixed(name: str, month: int, day: int, **extra) -> Holiday:
    return Holiday(
        name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month, **extra
    )


def _easter(name: str, offset: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, offset=offset, func=calc_easter_offset)


NEUJAHR = _fixed("Neujahrstag", 1, 1)
"""New Year's Day on 1 January."""

HEILIGE_DREI_KOENIGE = _fixed("Heilige Drei Könige", 1, 6)
"""Epiphany on 6 January."""

FRAUENTAG = _fixed("Frauentag", 3, 8)
"""Women's Day on 8 March."""

KARFREITAG = _easter("Karfreitag", -2)
"""Good Friday, the Friday before Easter."""

OSTERMONTAG = _easter("Ostermontag", 1)
"""Easter Monday, the day after Easter."""

TAG_DER_ARBEIT = _fixed("Tag der Arbeit", 5, 1)
"""Labour Day on 1 May."""

CHRISTI_HIMMELFAHRT = _easter("Christi Himmelfahrt", 39)
"""Ascension Day, the 39th day after Easter."""

PFINGSTMONTAG = _easter("Pfingstmontag", 50)
"""Pentecost Monday, 50 days after Easter."""

FRONLEICHNAM = _easter("Fronleichnam", 60)
"""Corpus Christi, the 60th day after Easter."""

MARIA_HIMMELFAHRT = _fixed("Mariä Himmelfahrt", 8, 15)
"""Assumption of Mary on 15 August."""

WELTKINDERTAG = _fixed("Weltkindertag", 9, 20, start_year=2019)
"""World Children's Day on 20 September, from 2019."""

DEUTSCHEN_EINHEIT = _fixed("Tag der Deutschen Einheit", 10, 3)
"""German Unity Day on 3 October."""

REFORMATIONSTAG = _fixed("Reformationstag", 10, 31)
"""Reformation Day on 31 October."""

ALLERHEILIGEN = _fixed("Allerheiligen", 11, 1)
"""All Saints' Day on 1 November."""

BUSS_UND_BETTAG = Holiday(
    name="Buß- und Bettag",
    type=_PUBLIC,
    month=11,
    day=16,
    weekday=_WEDNESDAY,
    offset=1,
    func=calc_weekday_from,
)
"""Repentance and Prayer Day, the first Wednesday from 16 November."""

WEIHNACHTSTAG = _fixed("Weihnachtstag", 12, 25)
"""Christmas Day on 25 December."""

ZWEITER_WEIHNACHTSFEIERTAG = _fixed("Zweiter Weihnachtsfeiertag", 12, 26)
"""Boxing Day on 26 December."""

HOLIDAYS = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""The standard national holidays."""

HOLIDAYS_BW = (
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Baden-Württemberg."""

HOLIDAYS_BY = (
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Bayern."""

HOLIDAYS_BE = (
    NEUJAHR,
    FRAUENTAG,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Berlin."""

_NATIONAL_WITH_REFORMATION = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)

HOLIDAYS_BB = _NATIONAL_WITH_REFORMATION
"""Holidays in Brandenburg."""

HOLIDAYS_HB = _NATIONAL_WITH_REFORMATION
"""Holidays in Bremen."""

HOLIDAYS_HH = _NATIONAL_WITH_REFORMATION
"""Holidays in Hamburg."""

HOLIDAYS_HE = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Hessen."""

HOLIDAYS_MV = _NATIONAL_WITH_REFORMATION
"""Holidays in Mecklenburg-Vorpommern."""

HOLIDAYS_NI = _NATIONAL_WITH_REFORMATION
"""Holidays in Niedersachsen."""

HOLIDAYS_NW = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Nordrhein-Westfalen."""

HOLIDAYS_RP = HOLIDAYS_NW
"""Holidays in Rheinland-Pfalz."""

HOLIDAYS_SL = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    FRONLEICHNAM,
    MARIA_HIMMELFAHRT,
    DEUTSCHEN_EINHEIT,
    ALLERHEILIGEN,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Saarland."""

HOLIDAYS_SN = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    BUSS_UND_BETTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Sachsen."""

HOLIDAYS_ST = (
    NEUJAHR,
    HEILIGE_DREI_KOENIGE,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Sachsen-Anhalt."""

HOLIDAYS_SH = _NATIONAL_WITH_REFORMATION
"""Holidays in Schleswig-Holstein."""

HOLIDAYS_TH = (
    NEUJAHR,
    KARFREITAG,
    OSTERMONTAG,
    TAG_DER_ARBEIT,
    CHRISTI_HIMMELFAHRT,
    PFINGSTMONTAG,
    WELTKINDERTAG,
    DEUTSCHEN_EINHEIT,
    REFORMATIONSTAG,
    WEIHNACHTSTAG,
    ZWEITER_WEIHNACHTSFEIERTAG,
)
"""Holidays in Thüringen."""