from datetime import date

import pytest

from festcal import ie
from festcal.holiday import Holiday

CASES = [
    (ie.NEW_YEAR, 2020, date(2020, 1, 1)),
    (ie.NEW_YEAR, 2021, date(2021, 1, 1)),
    (ie.NEW_YEAR, 2022, date(2022, 1, 1)),
    (ie.EXTRA_PUBLIC_HOLIDAY_2022, 2022, date(2022, 3, 18)),
    (ie.SAINT_BRIGID_DAY, 2023, date(2023, 2, 6)),
    (ie.SAINT_BRIGID_DAY, 2024, date(2024, 2, 5)),
    (ie.SAINT_BRIGID_DAY, 2030, date(2030, 2, 1)),
    (ie.SAINT_PATRICK_DAY, 2020, date(2020, 3, 17)),
    (ie.SAINT_PATRICK_DAY, 2021, date(2021, 3, 17)),
    (ie.SAINT_PATRICK_DAY, 2022, date(2022, 3, 17)),
    (ie.EASTER_MONDAY, 2020, date(2020, 4, 13)),
    (ie.EASTER_MONDAY, 2021, date(2021, 4, 5)),
    (ie.EASTER_MONDAY, 2022, date(2022, 4, 18)),
    (ie.FIRST_MONDAY_MAY, 2020, date(2020, 5, 4)),
    (ie.FIRST_MONDAY_MAY, 2021, date(2021, 5, 3)),
    (ie.FIRST_MONDAY_MAY, 2022, date(2022, 5, 2)),
    (ie.FIRST_MONDAY_MAY, 2023, date(2023, 5, 1)),
    (ie.FIRST_MONDAY_JUNE, 2020, date(2020, 6, 1)),
    (ie.FIRST_MONDAY_JUNE, 2021, date(2021, 6, 7)),
    (ie.FIRST_MONDAY_JUNE, 2022, date(2022, 6, 6)),
    (ie.FIRST_MONDAY_JUNE, 2023, date(2023, 6, 5)),
    (ie.FIRST_MONDAY_AUGUST, 2020, date(2020, 8, 3)),
    (ie.FIRST_MONDAY_AUGUST, 2021, date(2021, 8, 2)),
    (ie.FIRST_MONDAY_AUGUST, 2022, date(2022, 8, 1)),
    (ie.FIRST_MONDAY_AUGUST, 2023, date(2023, 8, 7)),
    (ie.LAST_MONDAY_IN_OCTOBER, 2020, date(2020, 10, 26)),
    (ie.LAST_MONDAY_IN_OCTOBER, 2021, date(2021, 10, 25)),
    (ie.LAST_MONDAY_IN_OCTOBER, 2022, date(2022, 10, 31)),
    (ie.LAST_MONDAY_IN_OCTOBER, 2023, date(2023, 10, 30)),
    (ie.CHRISTMAS_DAY, 2020, date(2020, 12, 25)),
    (ie.CHRISTMAS_DAY, 2021, date(2021, 12, 25)),
    (ie.CHRISTMAS_DAY, 2022, date(2022, 12, 25)),
    (ie.SAINT_STEPHEN_DAY, 2020, date(2020, 12, 26)),
    (ie.SAINT_STEPHEN_DAY, 2021, date(2021, 12, 26)),
    (ie.SAINT_STEPHEN_DAY, 2022, date(2022, 12, 26)),
]


@pytest.mark.parametrize("holiday,year,expected", CASES)
def test_holidays(holiday, year, expected):
    actual, _ = Holiday.calc(holiday, year)
    assert actual == expected


def test_saint_brigid_before_start_year():
    assert ie.SAINT_BRIGID_DAY.calc(2022) == (None, None)


def test_extra_holiday_only_in_2022():
    assert ie.EXTRA_PUBLIC_HOLIDAY_2022.calc(2021) == (None, None)
    assert ie.EXTRA_PUBLIC_HOLIDAY_2022.calc(2023) == (None, None)


def test_calc_if_first_falls_on_friday_direct():
    assert ie.calc_if_first_falls_on_friday(ie.SAINT_BRIGID_DAY, 2030) == date(2030, 2, 1)
    assert ie.calc_if_first_falls_on_friday(ie.SAINT_BRIGID_DAY, 2024) == date(2024, 2, 5)


def test_holiday_list():
    assert len(ie.HOLIDAYS) == 11
    assert ie.HOLIDAYS[1] is ie.EXTRA_PUBLIC_HOLIDAY_2022
    assert ie.EXTRA_PUBLIC_HOLIDAY_2022.calc(2022)[0] == date(2022, 3, 18)