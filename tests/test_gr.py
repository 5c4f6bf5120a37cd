from datetime import date

import pytest

from festcal import gr
from festcal.holiday import Holiday

YEARS = range(2015, 2024)


def _fixed(h, month, day):
    return [(h, y, date(y, month, day)) for y in YEARS]


def _listed(h, *days):
    return [(h, y, date(y, m, dd)) for y, m, dd in days]


CASES = (
    _fixed(gr.THEOPHANIA, 1, 6)
    + _fixed(gr.PROTOXRONIA, 1, 1)
    + _listed(
        gr.KATHARA_DEFTERA,
        (2015, 2, 23), (2016, 3, 14), (2017, 2, 27), (2018, 2, 19), (2019, 3, 11),
        (2020, 3, 2), (2021, 3, 15), (2022, 3, 7), (2023, 2, 27),
    )
    + _fixed(gr.IKOSTI_PEMPTI_MARTIOU, 3, 25)
    + _listed(
        gr.MEGALI_PARASKEVI,
        (2015, 4, 10), (2016, 4, 29), (2017, 4, 14), (2018, 4, 6), (2019, 4, 26),
        (2020, 4, 17), (2021, 4, 30), (2022, 4, 22), (2023, 4, 14),
    )
    + _listed(
        gr.DEFTERA_PASCHA,
        (2015, 4, 13), (2016, 5, 2), (2017, 4, 17), (2018, 4, 9), (2019, 4, 29),
        (2020, 4, 20), (2021, 5, 3), (2022, 4, 25), (2023, 4, 17),
    )
    + _fixed(gr.ERGATIKI_PROTOMAGIA, 5, 1)
    + _listed(
        gr.AGIOU_PREVMATOS,
        (2015, 6, 1), (2016, 6, 20), (2017, 6, 5), (2018, 5, 28), (2019, 6, 17),
        (2020, 6, 8), (2021, 6, 21), (2022, 6, 13), (2023, 6, 5),
    )
    + _fixed(gr.KIMISI_TIS_THEOTOKOU, 8, 15)
    + _fixed(gr.IMERA_TOU_OCHI, 10, 28)
    + _fixed(gr.CHRISTOUGENNA, 12, 25)
    + _fixed(gr.SINAXIS_YPERAGIAS_THEOTOKOU, 12, 26)
)


@pytest.mark.parametrize("holiday,year,expected", CASES)
def test_holidays(holiday, year, expected):
    assert Holiday.calc(holiday, year) == (expected, expected)


def test_clean_monday_is_a_monday_and_good_friday_a_friday():
    for year in YEARS:
        clean_monday, _ = gr.KATHARA_DEFTERA.calc(year)
        good_friday, _ = gr.MEGALI_PARASKEVI.calc(year)
        assert clean_monday.weekday() == 0
        assert good_friday.weekday() == 4
        assert (good_friday - clean_monday).days == 46