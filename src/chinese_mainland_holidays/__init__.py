"""
Chinese Mainland Holidays

Determines whether a date is a holiday (a day off) in Chinese Mainland.

A day off is a regular Saturday or Sunday, or a weekday inside a public
holiday break announced by the State Council. Weekend days swapped into
working days ("adjusted workdays") are not days off.

Lookups are answered from an embedded, curated table covering a bounded
range of years; a date outside it raises OutOfRangeError instead of
guessing.

Quick Start:
    from datetime import date
    from chinese_mainland_holidays import is_holiday, holiday_kind

    is_holiday(date(2024, 10, 7))      # True, National Day break
    is_holiday(date(2024, 10, 12))     # False, adjusted workday
    holiday_kind("2024-10-12")         # HolidayKind.NATIONAL_DAY_WORKDAY

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import (
    CN_MAINLAND_CALENDAR,
    BaseCalendar,
    ChineseMainlandCalendar,
    HolidayCalendar,
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
from .config import Settings
from .dates import DateLike, calendar_date, coerce_date
from .exceptions import (
    HolidayDataLoadError,
    HolidayDataValidationError,
    HolidayDataVersionMismatch,
    HolidayError,
    InvalidDateError,
    OutOfRangeError,
)
from .logging_config import configure_logging
from .models import DayCategory, Festival, HolidayArrangement, HolidayKind
from .packs import default_table, load_holiday_table, load_holiday_table_from_string
from .table import HolidayTable

__all__ = [
    "__version__",
    # Lookup
    "is_holiday",
    "is_workday",
    "holiday_kind",
    "day_category",
    "coverage",
    "get_holiday_name",
    "get_holidays_for_year",
    "add_workdays",
    "workdays_between",
    # Calendars
    "HolidayCalendar",
    "BaseCalendar",
    "ChineseMainlandCalendar",
    "CN_MAINLAND_CALENDAR",
    # Models
    "Festival",
    "HolidayKind",
    "DayCategory",
    "HolidayArrangement",
    "HolidayTable",
    # Data
    "default_table",
    "load_holiday_table",
    "load_holiday_table_from_string",
    # Dates
    "DateLike",
    "calendar_date",
    "coerce_date",
    # Config / logging
    "Settings",
    "configure_logging",
    # Exceptions
    "HolidayError",
    "OutOfRangeError",
    "InvalidDateError",
    "HolidayDataLoadError",
    "HolidayDataValidationError",
    "HolidayDataVersionMismatch",
]
