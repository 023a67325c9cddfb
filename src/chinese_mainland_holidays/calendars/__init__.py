"""
Holiday Calendars

Business day calculations over the Chinese Mainland holiday table.

Provides:
- HolidayCalendar protocol for custom implementations
- BaseCalendar with common business day logic
- ChineseMainlandCalendar backed by a HolidayTable
- Utility functions on the shared default calendar

Usage:
    from chinese_mainland_holidays.calendars import (
        ChineseMainlandCalendar,
        add_workdays,
        is_workday,
    )

    if is_workday(date(2024, 10, 12)):
        print("Adjusted workday, go to the office")

    # Deadline of 5 working days, skipping the National Day break
    deadline = add_workdays(date(2024, 9, 30), 5)

    # Calendar over a custom table
    calendar = ChineseMainlandCalendar(table=load_holiday_table("holidays.yaml"))
"""
from __future__ import annotations

from .base import BaseCalendar, HolidayCalendar
from .cn_mainland import (
    CN_MAINLAND_CALENDAR,
    ChineseMainlandCalendar,
    add_workdays,
    coverage,
    day_category,
    get_holiday_name,
    get_holidays_for_year,
    holiday_kind,
    is_holiday,
    is_workday,
    workdays_between,
)

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    # Chinese Mainland
    "ChineseMainlandCalendar",
    "CN_MAINLAND_CALENDAR",
    "coverage",
    "is_holiday",
    "is_workday",
    "holiday_kind",
    "day_category",
    "add_workdays",
    "workdays_between",
    "get_holiday_name",
    "get_holidays_for_year",
]
