from datetime import date

import pytest

from festcal import de
from festcal.holiday import Holiday

YEARS = range(2015, 2023)


def _yearly(holiday, month, day):
    return [(holiday, y, date(y, month, day), date(y, month, day)) for y in YEARS]


def _listed(holiday, dates):
    return [(holiday, d.year, d, d) for d in dates]


CASES = (
    _yearly(de.NEUJAHR, 1, 1)
    + _yearly(de.HEILIGE_DREI_KOENIGE, 1, 6)
    + _yearly(de.FRAUENTAG, 3, 8)
    + _listed(
        de.KARFREITAG,
        [
            date(2015, 4, 3),
            date(2016, 3, 25),
            date(2017, 4, 14),
            date(2018, 3, 30),
            date(2019, 4, 19),
            date(2020, 4, 10),
            date(2021, 4, 2),
            date(2022, 4, 15),
        ],
    )
    + _listed(
        de.OSTERMONTAG,
        [
            date(2015, 4, 6),
            date(2016, 3, 28),
            date(2017, 4, 17),
            date(2018, 4, 2),
            date(2019, 4, 22),
            date(2020, 4, 13),
            date(2021, 4, 5),
            date(2022, 4, 18),
        ],
    )
    + _yearly(de.TAG_DER_ARBEIT, 5, 1)
    + _listed(
        de.CHRISTI_HIMMELFAHRT,
        [
            date(2015, 5, 14),
            date(2016, 5, 5),
            date(2017, 5, 25),
            date(2018, 5, 10),
            date(2019, 5, 30),
            date(2020, 5, 21),
            date(2021, 5, 13),
            date(2022, 5, 26),
        ],
    )
    + _listed(
        de.PFINGSTMONTAG,
        [
            date(2015, 5, 25),
            date(2016, 5, 16),
            date(2017, 6, 5),
            date(2018, 5, 21),
            date(2019, 6, 10),
            date(2020, 6, 1),
            date(2021, 5, 24),
            date(2022, 6, 6),
        ],
    )
    + _listed(
        de.FRONLEICHNAM,
        [
            date(2015, 6, 4),
            date(2016, 5, 26),
            date(2017, 6, 15),
            date(2018, 5, 31),
            date(2019, 6, 20),
            date(2020, 6, 11),
            date(2021, 6, 3),
            date(2022, 6, 16),
        ],
    )
    + _yearly(de.MARIA_HIMMELFAHRT, 8, 15)
    + [(de.WELTKINDERTAG, y, None, None) for y in range(2015, 2019)]
    + _listed(
        de.WELTKINDERTAG,
        [date(2019, 9, 20), date(2020, 9, 20), date(2021, 9, 20), date(2022, 9, 20)],
    )
    + _yearly(de.DEUTSCHEN_EINHEIT, 10, 3)
    + _yearly(de.REFORMATIONSTAG, 10, 31)
    + _yearly(de.ALLERHEILIGEN, 11, 1)
    + _listed(
        de.BUSS_UND_BETTAG,
        [
            date(2015, 11, 18),
            date(2016, 11, 16),
            date(2017, 11, 22),
            date(2018, 11, 21),
            date(2019, 11, 20),
            date(2020, 11, 18),
            date(2021, 11, 17),
            date(2022, 11, 16),
        ],
    )
    + _yearly(de.WEIHNACHTSTAG, 12, 25)
    + _yearly(de.ZWEITER_WEIHNACHTSFEIERTAG, 12, 26)
)


@pytest.mark.parametrize(
    "holiday, year, want_actual, want_observed",
    CASES,
    ids=[f"{c[0].name}-{c[1]}" for c in CASES],
)
def test_holidays(holiday, year, want_actual, want_observed):
    actual, observed = Holiday.calc(holiday, year)
    assert actual == want_actual
    assert observed == want_observed


def test_saxony_holiday_dates_2022():
    dates = [Holiday.calc(h, 2022)[0] for h in de.HOLIDAYS_SN]
    assert dates == [
        date(2022, 1, 1),
        date(2022, 4, 15),
        date(2022, 4, 18),
        date(2022, 5, 1),
        date(2022, 5, 26),
        date(2022, 6, 6),
        date(2022, 10, 3),
        date(2022, 10, 31),
        date(2022, 11, 16),
        date(2022, 12, 25),
        date(2022, 12, 26),
    ]


def test_thuringia_includes_children_day_only_from_2019():
    dates_2018 = {Holiday.calc(h, 2018)[0] for h in de.HOLIDAYS_TH}
    dates_2019 = {Holiday.calc(h, 2019)[0] for h in de.HOLIDAYS_TH}
    assert None in dates_2018
    assert date(2019, 9, 20) in dates_2019
    assert de.WELTKINDERTAG.calc(2018) == (None, None)


def test_national_list_names():
    assert [h.name for h in de.HOLIDAYS] == [
        "Neujahrstag",
        "Karfreitag",
        "Ostermontag",
        "Tag der Arbeit",
        "Christi Himmelfahrt",
        "Pfingstmontag",
        "Tag der Deutschen Einheit",
        "Weihnachtstag",
        "Zweiter Weihnachtsfeiertag",
    ]
    assert [Holiday.calc(h, 2021)[0] for h in de.HOLIDAYS] == [
        date(2021, 1, 1),
        date(2021, 4, 2),
        date(2021, 4, 5),
        date(2021, 5, 1),
        date(2021, 5, 13),
        date(2021, 5, 24),
        date(2021, 10, 3),
        date(2021, 12, 25),
        date(2021, 12, 26),
    ]