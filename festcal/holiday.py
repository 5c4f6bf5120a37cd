"""Holiday definitions and the rules that place them in a given year.

A holiday is described by a :class:`Holiday` whose ``func`` computes the day
it is expected to occur. :meth:`Holiday.calc` then applies the year limits,
exception years, a post-calculation offset and weekend substitution rules.

All calculations assume the proleptic Gregorian calendar. Weekdays follow
Python's convention (Monday is 0, Sunday is 6), as in :mod:`calendar`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Callable, Optional, Sequence

__all__ = [
    "ObservanceType",
    "AltDay",
    "Holiday",
    "HolidayFn",
    "calc_day_of_month",
    "calc_weekday_offset",
    "calc_weekday_from",
    "calc_easter_offset",
]


class ObservanceType(IntEnum):
    """The kind of holiday or special day being observed."""

    UNKNOWN = 0
    PUBLIC = 1
    BANK = 2
    RELIGIOUS = 3
    OTHER = 4


@dataclass(frozen=True)
class AltDay:
    """Moves an observance by ``offset`` days when the holiday falls on ``day``."""

    day: int
    offset: int


HolidayFn = Callable[["Holiday", int], Optional[date]]


@dataclass
class Holiday:
    """The type and rule of occurrence of a holiday."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    except_years: Optional[Sequence[int]] = None

    month: int = 0
    day: int = 0
    weekday: int = 0
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[Sequence[AltDay]] = None
    func: Optional[HolidayFn] = None

    def clone(self, overrides: Optional[Holiday] = None) -> Holiday:
        """Return a copy, taking name, description, type, year limits,
        exception years and observance rules from ``overrides`` where set."""
        copy = dataclasses.replace(self)
        if overrides is None:
            return copy
        if overrides.name:
            copy.name = overrides.name
        if overrides.description:
            copy.description = overrides.description
        if overrides.type != ObservanceType.UNKNOWN:
            copy.type = overrides.type
        if overrides.start_year > 0:
            copy.start_year = overrides.start_year
        if overrides.end_year > 0:
            copy.end_year = overrides.end_year
        if overrides.except_years is not None:
            copy.except_years = overrides.except_years
        if overrides.observed is not None:
            copy.observed = overrides.observed
        return copy

    def calc(self, year: int) -> tuple[Optional[date], Optional[date]]:
        """Return the actual and observed dates of the holiday in ``year``.

        Both are ``None`` when the holiday does not occur that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
        ):
            return None, None
        if self.except_years and year in self.except_years:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += timedelta(days=self.calc_offset)

        if self.observed is None:
            return actual, actual

        weekday = actual.weekday()
        for alt in self.observed:
            if alt.day == weekday:
                return actual, actual + timedelta(days=alt.offset)
        return actual, actual


def _make_date(year: int, month: int, day: int) -> date:
    """Build a date, letting out-of-range months and days roll over."""
    y, m = divmod(year * 12 + month - 1, 12)
    return date(y, m + 1, 1) + timedelta(days=day - 1)


def _weekday_n_from(start: date, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` on or after ``start`` (n > 0) or on or before it (n < 0)."""
    if n > 0:
        diff = (weekday - start.weekday()) % 7
        return start + timedelta(days=diff + (n - 1) * 7)
    if n < 0:
        diff = (start.weekday() - weekday) % 7
        return start - timedelta(days=diff + (-n - 1) * 7)
    return None


def _weekday_n(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` of a month, counting from its end when n is negative."""
    if n > 0:
        return _weekday_n_from(date(year, month, 1), weekday, n)
    if n < 0:
        return _weekday_n_from(_make_date(year, month + 1, 0), weekday, n)
    return None


def calc_day_of_month(h: Holiday, year: int) -> date:
    """A holiday on a fixed day of a month, such as 5 November."""
    return _make_date(year, h.month, h.day)


def calc_weekday_offset(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth weekday of a month, such as the third Wednesday of July."""
    return _weekday_n(year, h.month, h.weekday, h.offset)


def calc_weekday_from(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth given weekday counted from a starting date."""
    return _weekday_n_from(_make_date(year, h.month, h.day), h.weekday, h.offset)


def calc_easter_offset(h: Holiday, year: int) -> date:
    """A holiday placed ``h.offset`` days from Easter (Julian Easter if ``h.julian``)."""
    if h.julian:
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = (d + e + 114) % 31 + 1 + 13
    else:
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        hh = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        ll = (32 + 2 * e + 2 * i - hh - k) % 7
        m = (a + 11 * hh + 22 * ll) // 451
        month = (hh + ll - 7 * m + 114) // 31
        day = (hh + ll - 7 * m + 114) % 31 + 1
    return _make_date(year, month, day + h.offset)