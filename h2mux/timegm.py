"""UTC broken-down time to seconds since the epoch.

The functions accept a :class:`time.struct_time` or any object that has the
same ``tm_*`` attributes, using Python's conventions: ``tm_year`` is the full
year, ``tm_mon`` runs from 1 to 12 and ``tm_yday`` from 1 to 366.
"""

from __future__ import annotations

from typing import Any

__all__ = ["timegm", "timegm_without_yday"]

# Days before the first day of each month in a common year.
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _count_leap_years(year: int) -> int:
    """Number of leap years in the range [0, year)."""
    year -= 1
    return year // 4 - year // 100 + year // 400


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _seconds(days: int, tm: Any) -> int:
    return (days * 24 + tm.tm_hour) * 3600 + tm.tm_min * 60 + tm.tm_sec


def _days_since_epoch_to_year(year: int) -> int:
    leap_years = _count_leap_years(year) - _count_leap_years(1970)
    return (year - 1970) * 365 + leap_years


def timegm(tm: Any) -> int:
    """Return the POSIX time of *tm*, taken as UTC, using its ``tm_yday``.

    Raises ValueError if the month is past December.
    """
    if tm.tm_mon > 12:
        raise ValueError(f"month out of range: {tm.tm_mon}")
    days = _days_since_epoch_to_year(tm.tm_year) + tm.tm_yday - 1
    return _seconds(days, tm)


def timegm_without_yday(tm: Any) -> int:
    """Like :func:`timegm`, but computes the day of the year from month and day.

    Useful for values whose ``tm_yday`` has not been filled in.
    Raises ValueError if the month is not between 1 and 12.
    """
    if not 1 <= tm.tm_mon <= 12:
        raise ValueError(f"month out of range: {tm.tm_mon}")
    days = (
        _days_since_epoch_to_year(tm.tm_year)
        + _DAYS_BEFORE_MONTH[tm.tm_mon - 1]
        + tm.tm_mday
        - 1
    )
    if tm.tm_mon >= 3 and _is_leap_year(tm.tm_year):
        days += 1
    return _seconds(days, tm)