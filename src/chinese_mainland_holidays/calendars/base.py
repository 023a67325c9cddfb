"""
Holiday Calendar Base

Protocol and shared day-walking logic for holiday calendars.

Subclasses answer ``is_holiday()`` with weekends already accounted for;
every walk here treats any day that is not a holiday as a business day.
Date arguments go through ``coerce_date`` so strings and tuples are
accepted the same way the lookups accept them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol, runtime_checkable

from ..dates import DateLike, coerce_date


@runtime_checkable
class HolidayCalendar(Protocol):
    """Anything that can tell days off from working days."""

    def is_holiday(self, d: DateLike) -> bool:
        """True if ``d`` is a day off."""
        ...

    def is_business_day(self, d: DateLike) -> bool:
        """True if ``d`` is a working day."""
        ...

    def get_holidays_in_range(self, start: DateLike, end: DateLike) -> list[date]:
        """Days off between ``start`` and ``end``, both ends included."""
        ...


@dataclass
class BaseCalendar(ABC):
    """
    Business day arithmetic on top of ``is_holiday()``.

    Walks raise whatever ``is_holiday()`` raises, so a calendar with
    bounded coverage stops with OutOfRangeError at its edge.
    """

    @abstractmethod
    def is_holiday(self, d: DateLike) -> bool:
        ...

    def is_business_day(self, d: DateLike) -> bool:
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: DateLike, end: DateLike) -> list[date]:
        """Days off between ``start`` and ``end``, both ends included."""
        current, end = coerce_date(start), coerce_date(end)
        holidays = []
        while current <= end:
            if self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def add_business_days(self, start: DateLike, days: int) -> date:
        """
        Move ``days`` business days away from ``start``.

        Negative ``days`` walks backwards. ``start`` itself is never
        counted; zero returns it unchanged.
        """
        current = coerce_date(start)
        if days == 0:
            return current

        step = timedelta(days=1 if days > 0 else -1)
        remaining = abs(days)
        while remaining > 0:
            current += step
            if self.is_business_day(current):
                remaining -= 1
        return current

    def subtract_business_days(self, start: DateLike, days: int) -> date:
        return self.add_business_days(start, -days)

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Business days after ``start`` up to and including ``end``."""
        current, end = coerce_date(start), coerce_date(end)
        count = 0
        while current < end:
            current += timedelta(days=1)
            if self.is_business_day(current):
                count += 1
        return count

    def next_business_day(self, d: DateLike) -> date:
        """``d`` if it is a business day, else the first one after it."""
        current = coerce_date(d)
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def previous_business_day(self, d: DateLike) -> date:
        """``d`` if it is a business day, else the last one before it."""
        current = coerce_date(d)
        while not self.is_business_day(current):
            current -= timedelta(days=1)
        return current
