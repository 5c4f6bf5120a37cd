from datetime import date

import pytest

from festcal import dk
from festcal.holiday import Holiday

YEARS = range(2015, 2023)


def _yearly(holiday, month, day):
    return [(holiday, y, date(y, month, day), date(y, month, day)) for y in YEARS]


def _listed(holiday, dates):
    return [(holiday, d.year, d, d) for d in dates]


CASES = (
    _yearly(dk.NYTAARSDAG, 1, 1)
    + _listed(
        dk.SKAERTORSDAG,
        [
            date(2015, 4, 2),
            date(2016, 3, 24),
            date(2017, 4, 13),
            date(2018, 3, 29),
            date(2019, 4, 18),
            date(2020, 4, 9),
            date(2021, 4, 1),
            date(2022, 4, 14),
        ],
    )
    + _listed(
        dk.LANGFREDAG,
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
        dk.ANDEN_PAASKEDAG,
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
    + [(dk.STORE_BEDEDAG, 1685, None, None)]
    + _listed(
        dk.STORE_BEDEDAG,
        [
            date(1686, 5, 10),
            date(2015, 5, 1),
            date(2016, 4, 22),
            date(2017, 5, 12),
            date(2018, 4, 27),
            date(2019, 5, 17),
            date(2020, 5, 8),
            date(2021, 4, 30),
            date(2022, 5, 13),
            date(2023, 5, 5),
        ],
    )
    + [(dk.STORE_BEDEDAG, 2024, None, None), (dk.STORE_BEDEDAG, 2025, None, None)]
    + _listed(
        dk.KRISTI_HIMMELFARTSDAG,
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
        dk.ANDEN_PINSEDAG,
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
    + _yearly(dk.GRUNDLOVSDAG, 6, 5)
    + _yearly(dk.JULEDAG, 12, 25)
    + _yearly(dk.ANDEN_JULEDAG, 12, 26)
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


def test_general_prayer_day_dropped_from_list_after_2023():
    dates_2023 = [Holiday.calc(h, 2023)[0] for h in dk.HOLIDAYS]
    dates_2024 = [Holiday.calc(h, 2024)[0] for h in dk.HOLIDAYS]
    assert date(2023, 5, 5) in dates_2023
    assert dates_2024.count(None) == 1


def test_store_bededag_is_always_a_friday():
    for year in range(2000, 2024):
        actual, _ = dk.STORE_BEDEDAG.calc(year)
        assert actual.weekday() == 4