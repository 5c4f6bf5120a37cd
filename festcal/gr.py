"""Holiday definitions for Greece."""

from festcal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC


def _fixed(name: str, month: int, day: int) -> Holiday:
    return Holiday(name=name, type=_PUBLIC, month=month, day=day, func=calc_day_of_month)


def _orthodox(name: str, offset: int) -> Holiday:
    return Holiday(
        name=name, type=_PUBLIC, offset=offset, julian=True, func=calc_easter_offset
    )


PROTOXRONIA = _fixed("Xristougenna", 1, 1)
"""New Year's Day on 1 January."""

THEOPHANIA = _fixed("Θεοφάνεια", 1, 6)
"""Epiphany on 6 January."""

KATHARA_DEFTERA = _orthodox("Καθαρά Δευτέρα", -48)
"""Clean Monday, the first day of Lent."""

IKOSTI_PEMPTI_MARTIOU = _fixed("Εικοστή Πέμπτη Μαρτίου", 3, 25)
"""Independence Day on 25 March."""

MEGALI_PARASKEVI = _orthodox("Μεγάλη Παρασκευή", -2)
"""Good Friday, two days before Orthodox Easter."""

DEFTERA_PASCHA = _orthodox("Δευτέρα του Πάσχα", 1)
"""Easter Monday, the day after Orthodox Easter."""

ERGATIKI_PROTOMAGIA = _fixed("Εργατική Πρωτομαγιά", 5, 1)
"""Labour Day on 1 May."""

AGIOU_PREVMATOS = _orthodox("Αγίου Πνεύματος", 50)
"""Whit Monday, 50 days after Orthodox Easter."""

KIMISI_TIS_THEOTOKOU = _fixed("Κοίμηση της Θεοτόκου", 8, 15)
"""Dormition of the Mother of God on 15 August."""

IMERA_TOU_OCHI = _fixed("Ημέρα του Όχι", 10, 28)
"""Ochi Day on 28 October."""

CHRISTOUGENNA = _fixed("Χριστούγεννα", 12, 25)
"""Christmas Day on 25 December."""

SINAXIS_YPERAGIAS_THEOTOKOU = _fixed("Σύναξις Υπεραγίας Θεοτόκου Μαρίας", 12, 26)
"""Synaxis of the Mother of God on 26 December."""

HOLIDAYS = (
    PROTOXRONIA,
    THEOPHANIA,
    KATHARA_DEFTERA,
    IKOSTI_PEMPTI_MARTIOU,
    MEGALI_PARASKEVI,
    DEFTERA_PASCHA,
    ERGATIKI_PROTOMAGIA,
    AGIOU_PREVMATOS,
    KIMISI_TIS_THEOTOKOU,
    IMERA_TOU_OCHI,
    CHRISTOUGENNA,
    SINAXIS_YPERAGIAS_THEOTOKOU,
)
"""The standard national holidays."""