"""
Holiday Table

Immutable lookup table of Chinese Mainland holidays for a bounded range of
years.

Only exceptions to the weekly pattern are stored: weekdays that are days
off and weekend days that are working days. Records are kept as a sorted
tuple of ``(ordinal, kind)`` pairs and searched with ``bisect``; any date
in range without a record is a regular weekend or weekday.
"""
from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from .exceptions import HolidayDataValidationError, OutOfRangeError
from .models import DayCategory, HolidayArrangement, HolidayKind


@dataclass(frozen=True)
class HolidayTable:
    """
    Read-only holiday table.

    Build with ``HolidayTable.from_arrangements()``; instances are never
    mutated and may be shared freely between threads.
    """
    min_year: int
    max_year: int
    records: tuple[tuple[int, HolidayKind], ...]
    arrangement_list: tuple[HolidayArrangement, ...] = ()
    source: str = "builtin"
    _ordinals: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.min_year < 1 or self.min_year > self.max_year:
            raise HolidayDataValidationError(
                message=f"Invalid coverage {self.min_year}-{self.max_year}",
                details={"min_year": self.min_year, "max_year": self.max_year},
            )
        ordinals = tuple(ordinal for ordinal, _ in self.records)
        if any(a >= b for a, b in zip(ordinals, ordinals[1:])):
            raise HolidayDataValidationError(
                message="Holiday records must be strictly increasing",
                details={"source": self.source},
            )
        if ordinals:
            first = date.fromordinal(ordinals[0]).year
            last = date.fromordinal(ordinals[-1]).year
            if first < self.min_year or last > self.max_year:
                raise HolidayDataValidationError(
                    message="Holiday records fall outside table coverage",
                    details={"first_year": first, "last_year": last},
                )
        object.__setattr__(self, "_ordinals", ordinals)

    @classmethod
    def from_arrangements(
        cls,
        arrangements: Iterable[HolidayArrangement],
        min_year: int,
        max_year: int,
        source: str = "builtin",
    ) -> HolidayTable:
        """
        Compile festival arrangements into a table.

        Weekdays inside each day-off period become festival holiday
        records; listed workdays become festival workday records. Weekend
        days inside a period need no record. Dates outside
        ``min_year..max_year`` are dropped.

        Raises:
            HolidayDataValidationError: If two arrangements claim the same date
        """
        arrangements = tuple(sorted(arrangements, key=lambda a: a.start))
        by_ordinal: dict[int, HolidayKind] = {}

        def _record(d: date, kind: HolidayKind) -> None:
            if not (min_year <= d.year <= max_year):
                return
            existing = by_ordinal.get(d.toordinal())
            if existing is not None:
                raise HolidayDataValidationError(
                    message=f"Date {d.isoformat()} claimed by both {existing.value} and {kind.value}",
                    details={"date": d.isoformat(), "kinds": [existing.value, kind.value]},
                )
            by_ordinal[d.toordinal()] = kind

        for arrangement in arrangements:
            holiday = HolidayKind.for_festival(arrangement.festival, workday=False)
            for d in arrangement.days_off():
                if d.weekday() < 5:
                    _record(d, holiday)
            workday = HolidayKind.for_festival(arrangement.festival, workday=True)
            for d in arrangement.workdays:
                _record(d, workday)

        return cls(
            min_year=min_year,
            max_year=max_year,
            records=tuple(sorted(by_ordinal.items())),
            arrangement_list=arrangements,
            source=source,
        )

    def __len__(self) -> int:
        return len(self.records)

    def covers(self, d: date) -> bool:
        """Check whether the table can classify a date."""
        return self.min_year <= d.year <= self.max_year

    def _check_covered(self, d: date) -> None:
        if not self.covers(d):
            raise OutOfRangeError(
                message=(
                    f"{d.isoformat()} is outside covered years "
                    f"{self.min_year}-{self.max_year}"
                ),
                details={
                    "date": d.isoformat(),
                    "min_year": self.min_year,
                    "max_year": self.max_year,
                },
            )

    def classify(self, d: date) -> HolidayKind:
        """
        Get the kind of a date.

        Raises:
            OutOfRangeError: If the date's year is not covered
        """
        self._check_covered(d)
        ordinal = d.toordinal()
        i = bisect_left(self._ordinals, ordinal)
        if i < len(self._ordinals) and self._ordinals[i] == ordinal:
            return self.records[i][1]
        if d.weekday() >= 5:
            return HolidayKind.REGULAR_HOLIDAY
        return HolidayKind.REGULAR_WORKDAY

    def is_holiday(self, d: date) -> bool:
        """Whether a date is a day off. Raises OutOfRangeError when uncovered."""
        return self.classify(d).is_holiday

    def category(self, d: date) -> DayCategory:
        return self.classify(d).category

    def arrangement_for(self, d: date) -> Optional[HolidayArrangement]:
        """Get the arrangement whose period or workdays include a date."""
        self._check_covered(d)
        for arrangement in self.arrangement_list:
            if d in arrangement:
                return arrangement
        return None

    def arrangements(self, year: int) -> list[HolidayArrangement]:
        """Get the arrangements announced for a year, in date order."""
        if not (self.min_year <= year <= self.max_year):
            raise OutOfRangeError(
                message=f"Year {year} is outside covered years {self.min_year}-{self.max_year}",
                details={"year": year, "min_year": self.min_year, "max_year": self.max_year},
            )
        return [a for a in self.arrangement_list if a.year == year]
