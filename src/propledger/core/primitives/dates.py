# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar helpers for monthly billing.

Month bucketing, payment-day clamping, day-granularity due-date comparisons
and a lazy month walk. All helpers are pure and tolerant: malformed input
degrades to a safe value (``None`` or the last day of the month) instead of
raising, so one bad contract cannot stop billing for the others.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterator, Optional, Tuple

import pandas as pd
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


def coerce_date(value: Any) -> Optional[date]:
    """
    Convert date-like input to a ``datetime.date``.

    Accepts ``date``, ``datetime``, ``pd.Timestamp`` and ISO-like strings.
    Empty values and strings that cannot be parsed become ``None``.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):  # includes pd.Timestamp
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        parsed = pd.to_datetime(value, errors="coerce")
        if pd.isna(parsed):
            logger.warning(f"Unparseable date {value!r}; treating as missing")
            return None
        return parsed.date()
    logger.warning(f"Unsupported date value {value!r}; treating as missing")
    return None


def is_blank_date(value: Any) -> bool:
    """True for values meaning "no date given": ``None``, ``NaT`` or a blank string."""
    if value is None or value is pd.NaT:
        return True
    return isinstance(value, str) and not value.strip()


def _as_date(value: Any) -> date:
    """Day-granularity view of a date, datetime or timestamp."""
    result = coerce_date(value)
    if result is None:
        raise ValueError(f"Expected a date, got {value!r}")
    return result


def month_key(value: Any) -> str:
    """Month bucket of a date as ``YYYY-MM``."""
    return _as_date(value).strftime("%Y-%m")


def month_bounds(value: Any) -> Tuple[date, date]:
    """First and last calendar day of the month containing ``value``."""
    period = pd.Period(_as_date(value), freq="M")
    return period.start_time.date(), period.end_time.date()


def clamp_payment_day(year: int, month: int, day: Any) -> date:
    """
    Due date for ``day`` in the given month.

    Days past the end of the month clamp to the last calendar day (31 -> 30 in
    April, 31 -> 28/29 in February). A malformed ``day`` falls back to the last
    day of the month.
    """
    last_day = pd.Period(year=year, month=month, freq="M").days_in_month
    try:
        day_number = int(day)
    except (TypeError, ValueError):
        logger.warning(
            f"Malformed payment day {day!r} for {year:04d}-{month:02d}; using last day of month"
        )
        return date(year, month, last_day)
    if day_number < 1:
        logger.warning(
            f"Payment day {day_number} for {year:04d}-{month:02d} is out of range; using last day of month"
        )
        return date(year, month, last_day)
    return date(year, month, min(day_number, last_day))


def is_past_due_date(due_date: Any, reference_date: Any) -> bool:
    """True when ``due_date`` falls strictly before ``reference_date`` (time of day ignored)."""
    return _as_date(due_date) < _as_date(reference_date)


def is_future_date(value: Any, reference_date: Any) -> bool:
    """True when ``value`` falls strictly after ``reference_date`` (time of day ignored)."""
    return _as_date(value) > _as_date(reference_date)


def add_years(value: Any, years: int) -> date:
    """Calendar-aware year offset; 29 February maps to 28 February in non-leap years."""
    return _as_date(value) + relativedelta(years=years)


class MonthRange:
    """
    Lazy walk over the months between two dates.

    Yields the first day of every month from ``start``'s month through
    ``end``'s month inclusive. Each iteration starts over, so a single range
    can be walked any number of times. The range is empty when ``end`` falls
    in an earlier month than ``start``.

    Example:
        >>> [d.isoformat() for d in MonthRange(date(2024, 1, 15), date(2024, 3, 1))]
        ['2024-01-01', '2024-02-01', '2024-03-01']
    """

    __slots__ = ("_first", "_last")

    def __init__(self, start: Any, end: Any):
        self._first = pd.Period(_as_date(start), freq="M")
        self._last = pd.Period(_as_date(end), freq="M")

    def __iter__(self) -> Iterator[date]:
        current = self._first
        while current <= self._last:
            yield current.start_time.date()
            current += 1

    def __len__(self) -> int:
        return max(0, (self._last - self._first).n + 1)

    def __repr__(self) -> str:
        return f"MonthRange({self._first}, {self._last})"
