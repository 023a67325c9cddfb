"""
Chinese Mainland Holiday Calendar

Implements Chinese Mainland public holidays for business day calculations.

Public holidays (State Council, Regulations on Public Holidays):
- New Year's Day (January 1)
- Spring Festival (lunar New Year)
- Qingming Festival (solar term, around April 5)
- Labour Day (May 1)
- Dragon Boat Festival (lunar 5/5)
- Mid-Autumn Festival (lunar 8/15)
- National Day (October 1)

Adjusted workdays: to join holidays with weekends into longer breaks,
the annual notice swaps some Saturdays and Sundays into working days.
Those days are business days even though they fall on a weekend.

The dates are not computed from rules; they come from the holiday table,
which covers a bounded range of years. Any lookup outside that range
raises OutOfRangeError.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..dates import DateLike, coerce_date
from ..models import DayCategory, HolidayKind
from ..packs.loader import default_table
from ..table import HolidayTable
from .base import BaseCalendar


@dataclass
class ChineseMainlandCalendar(BaseCalendar):
    """
    Chinese Mainland public holiday calendar.

    Uses the process-wide default table unless a table is given.
    """

    table: Optional[HolidayTable] = None

    def _table(self) -> HolidayTable:
        if self.table is not None:
            return self.table
        return default_table()

    @property
    def coverage(self) -> tuple[int, int]:
        """First and last covered year."""
        table = self._table()
        return table.min_year, table.max_year

    def holiday_kind(self, d: DateLike) -> HolidayKind:
        """Get the kind of a date. Raises OutOfRangeError when uncovered."""
        return self._table().classify(coerce_date(d))

    def day_category(self, d: DateLike) -> DayCategory:
        return self.holiday_kind(d).category

    def is_holiday(self, d: DateLike) -> bool:
        """
        Check if a date is a day off.

        Regular weekends and festival days are days off; adjusted
        workdays are not.

        Raises:
            OutOfRangeError: If the date is outside the covered years
        """
        return self.holiday_kind(d).is_holiday

    def is_adjusted_workday(self, d: DateLike) -> bool:
        """Check if a date is a weekend day swapped into a working day."""
        return self.day_category(d) is DayCategory.ADJUSTED_WORKDAY

    def get_holiday_name(self, d: DateLike, lang: str = "en") -> Optional[str]:
        """
        Get the festival name for a date.

        Weekend days inside a festival's period carry the festival's name.
        Adjusted workdays are marked as such. Regular days return None.

        Args:
            d: Date to check
            lang: "en" for English, "zh" for Chinese

        Returns:
            The festival name, or None
        """
        d = coerce_date(d)
        arrangement = self._table().arrangement_for(d)
        if arrangement is None:
            return None
        festival = arrangement.festival
        name = festival.chinese_name if lang == "zh" else festival.display_name
        if d in arrangement.workdays:
            return f"{name}调休上班" if lang == "zh" else f"{name} (Adjusted Workday)"
        return name

    def get_holidays_for_year(self, year: int, lang: str = "en") -> list[tuple[date, str]]:
        """
        Get every festival day off in a year with its name.

        Weekend days inside a festival period are included. Days of a
        New Year break that fall in the previous December are not.

        Raises:
            OutOfRangeError: If the year is not covered
        """
        holidays = []
        for arrangement in self._table().arrangements(year):
            festival = arrangement.festival
            name = festival.chinese_name if lang == "zh" else festival.display_name
            holidays.extend((d, name) for d in arrangement.days_off() if d.year == year)
        return sorted(holidays, key=lambda x: x[0])


# Pre-configured calendar instance
CN_MAINLAND_CALENDAR = ChineseMainlandCalendar()


def coverage() -> tuple[int, int]:
    """First and last year covered by the default holiday table."""
    return CN_MAINLAND_CALENDAR.coverage


def is_holiday(d: DateLike) -> bool:
    """Check if a date is a day off in Chinese Mainland."""
    return CN_MAINLAND_CALENDAR.is_holiday(d)


def is_workday(d: DateLike) -> bool:
    """Check if a date is a working day in Chinese Mainland."""
    return not CN_MAINLAND_CALENDAR.is_holiday(d)


def holiday_kind(d: DateLike) -> HolidayKind:
    """Get the kind of a date using the default calendar."""
    return CN_MAINLAND_CALENDAR.holiday_kind(d)


def day_category(d: DateLike) -> DayCategory:
    """Get the holiday / adjusted workday / ordinary category of a date."""
    return CN_MAINLAND_CALENDAR.day_category(d)


def add_workdays(start: DateLike, days: int) -> date:
    """Add working days using the default calendar."""
    return CN_MAINLAND_CALENDAR.add_business_days(start, days)


def workdays_between(start: DateLike, end: DateLike) -> int:
    """Count working days between two dates (start exclusive, end inclusive)."""
    return CN_MAINLAND_CALENDAR.business_days_between(start, end)


def get_holiday_name(d: DateLike, lang: str = "en") -> Optional[str]:
    """Get the festival name for a date using the default calendar."""
    return CN_MAINLAND_CALENDAR.get_holiday_name(d, lang=lang)


def get_holidays_for_year(year: int, lang: str = "en") -> list[tuple[date, str]]:
    """Get festival days off for a year using the default calendar."""
    return CN_MAINLAND_CALENDAR.get_holidays_for_year(year, lang=lang)
