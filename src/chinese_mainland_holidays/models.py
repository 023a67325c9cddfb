"""
Chinese Mainland Holidays Models

Enumerations and value types shared by the holiday table, the pack loader
and the calendar.

All enums inherit from (str, Enum) for JSON/YAML serialization compatibility.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator, Optional


# =============================================================================
# Festivals
# =============================================================================

class Festival(str, Enum):
    """Public holidays set by the State Council for Chinese Mainland."""
    NEW_YEAR = "new_year"                # Gregorian 1/1
    SPRING_FESTIVAL = "spring_festival"  # Lunar 1/1
    QINGMING = "qingming"                # Solar term
    LABOUR_DAY = "labour_day"            # Gregorian 5/1
    DRAGON_BOAT = "dragon_boat"          # Lunar 5/5
    MID_AUTUMN = "mid_autumn"            # Lunar 8/15
    NATIONAL_DAY = "national_day"        # Gregorian 10/1

    @property
    def display_name(self) -> str:
        return _FESTIVAL_NAMES[self][0]

    @property
    def chinese_name(self) -> str:
        return _FESTIVAL_NAMES[self][1]


_FESTIVAL_NAMES: dict[Festival, tuple[str, str]] = {
    Festival.NEW_YEAR: ("New Year's Day", "元旦"),
    Festival.SPRING_FESTIVAL: ("Spring Festival", "春节"),
    Festival.QINGMING: ("Qingming Festival", "清明节"),
    Festival.LABOUR_DAY: ("Labour Day", "劳动节"),
    Festival.DRAGON_BOAT: ("Dragon Boat Festival", "端午节"),
    Festival.MID_AUTUMN: ("Mid-Autumn Festival", "中秋节"),
    Festival.NATIONAL_DAY: ("National Day", "国庆节"),
}


# =============================================================================
# Day Classification
# =============================================================================

class DayCategory(str, Enum):
    """Coarse classification of a day in the holiday table."""
    HOLIDAY = "holiday"                    # Day off (festival or weekend)
    ADJUSTED_WORKDAY = "adjusted_workday"  # Weekend made a working day
    ORDINARY = "ordinary"                  # Regular weekday


class HolidayKind(str, Enum):
    """
    Fine-grained kind of a day.

    Each ``*_HOLIDAY`` festival kind is a weekday that is a day off.
    Each ``*_WORKDAY`` festival kind is a Saturday or Sunday that is a
    working day, swapped to lengthen the festival's break.

    New kinds may be added when new public holidays are established.
    """
    REGULAR_HOLIDAY = "regular_holiday"
    REGULAR_WORKDAY = "regular_workday"
    NEW_YEAR_HOLIDAY = "new_year_holiday"
    NEW_YEAR_WORKDAY = "new_year_workday"
    SPRING_FESTIVAL_HOLIDAY = "spring_festival_holiday"
    SPRING_FESTIVAL_WORKDAY = "spring_festival_workday"
    QINGMING_HOLIDAY = "qingming_holiday"
    QINGMING_WORKDAY = "qingming_workday"
    LABOUR_DAY_HOLIDAY = "labour_day_holiday"
    LABOUR_DAY_WORKDAY = "labour_day_workday"
    DRAGON_BOAT_HOLIDAY = "dragon_boat_holiday"
    DRAGON_BOAT_WORKDAY = "dragon_boat_workday"
    MID_AUTUMN_HOLIDAY = "mid_autumn_holiday"
    MID_AUTUMN_WORKDAY = "mid_autumn_workday"
    NATIONAL_DAY_HOLIDAY = "national_day_holiday"
    NATIONAL_DAY_WORKDAY = "national_day_workday"

    @classmethod
    def for_festival(cls, festival: Festival, *, workday: bool) -> HolidayKind:
        """Get the holiday or workday kind of a festival."""
        suffix = "workday" if workday else "holiday"
        return cls(f"{festival.value}_{suffix}")

    @property
    def is_holiday(self) -> bool:
        """Whether a day of this kind is a day off."""
        return self.value.endswith("_holiday")

    @property
    def festival(self) -> Optional[Festival]:
        """The festival this kind belongs to, None for regular days."""
        if self in (HolidayKind.REGULAR_HOLIDAY, HolidayKind.REGULAR_WORKDAY):
            return None
        return Festival(self.value.rsplit("_", 1)[0])

    @property
    def category(self) -> DayCategory:
        if self.is_holiday:
            return DayCategory.HOLIDAY
        if self is HolidayKind.REGULAR_WORKDAY:
            return DayCategory.ORDINARY
        return DayCategory.ADJUSTED_WORKDAY


# =============================================================================
# Arrangements
# =============================================================================

@dataclass(frozen=True)
class HolidayArrangement:
    """
    One festival's arrangement for one year.

    ``start`` to ``end`` (inclusive) is the announced day-off period,
    weekends included. ``workdays`` are the weekend days swapped into
    working days for this festival.
    """
    festival: Festival
    start: date
    end: date
    workdays: tuple[date, ...] = field(default_factory=tuple)

    @property
    def year(self) -> int:
        """Notice year; a New Year break may start the December before."""
        return self.end.year

    @property
    def length(self) -> int:
        """Number of days in the day-off period."""
        return (self.end - self.start).days + 1

    def days_off(self) -> Iterator[date]:
        """Iterate over every date in the day-off period."""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __contains__(self, d: object) -> bool:
        if isinstance(d, datetime):
            d = d.date()
        if not isinstance(d, date):
            return False
        return self.start <= d <= self.end or d in self.workdays
