"""
Holiday lookup tests.

Tests cover:
- Day-off answers for festival breaks, weekends and adjusted workdays
- Out-of-range years
- Totality and idempotence over the covered range
- The compiled table's record layout
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from chinese_mainland_holidays import (
    DayCategory,
    HolidayKind,
    OutOfRangeError,
    coverage,
    day_category,
    default_table,
    holiday_kind,
    is_holiday,
    is_workday,
)


# Weekday holidays and weekend workdays announced for 2024
EXPECTED_2024_RECORDS = [
    (date(2024, 1, 1), HolidayKind.NEW_YEAR_HOLIDAY),
    (date(2024, 2, 4), HolidayKind.SPRING_FESTIVAL_WORKDAY),
    (date(2024, 2, 12), HolidayKind.SPRING_FESTIVAL_HOLIDAY),
    (date(2024, 2, 13), HolidayKind.SPRING_FESTIVAL_HOLIDAY),
    (date(2024, 2, 14), HolidayKind.SPRING_FESTIVAL_HOLIDAY),
    (date(2024, 2, 15), HolidayKind.SPRING_FESTIVAL_HOLIDAY),
    (date(2024, 2, 16), HolidayKind.SPRING_FESTIVAL_HOLIDAY),
    (date(2024, 2, 18), HolidayKind.SPRING_FESTIVAL_WORKDAY),
    (date(2024, 4, 4), HolidayKind.QINGMING_HOLIDAY),
    (date(2024, 4, 5), HolidayKind.QINGMING_HOLIDAY),
    (date(2024, 4, 7), HolidayKind.QINGMING_WORKDAY),
    (date(2024, 4, 28), HolidayKind.LABOUR_DAY_WORKDAY),
    (date(2024, 5, 1), HolidayKind.LABOUR_DAY_HOLIDAY),
    (date(2024, 5, 2), HolidayKind.LABOUR_DAY_HOLIDAY),
    (date(2024, 5, 3), HolidayKind.LABOUR_DAY_HOLIDAY),
    (date(2024, 5, 11), HolidayKind.LABOUR_DAY_WORKDAY),
    (date(2024, 6, 10), HolidayKind.DRAGON_BOAT_HOLIDAY),
    (date(2024, 9, 14), HolidayKind.MID_AUTUMN_WORKDAY),
    (date(2024, 9, 16), HolidayKind.MID_AUTUMN_HOLIDAY),
    (date(2024, 9, 17), HolidayKind.MID_AUTUMN_HOLIDAY),
    (date(2024, 9, 29), HolidayKind.NATIONAL_DAY_WORKDAY),
    (date(2024, 10, 1), HolidayKind.NATIONAL_DAY_HOLIDAY),
    (date(2024, 10, 2), HolidayKind.NATIONAL_DAY_HOLIDAY),
    (date(2024, 10, 3), HolidayKind.NATIONAL_DAY_HOLIDAY),
    (date(2024, 10, 4), HolidayKind.NATIONAL_DAY_HOLIDAY),
    (date(2024, 10, 7), HolidayKind.NATIONAL_DAY_HOLIDAY),
    (date(2024, 10, 12), HolidayKind.NATIONAL_DAY_WORKDAY),
]


class TestIsHoliday:
    """Tests for the day-off answer."""

    def test_national_day_break_monday(self):
        assert is_holiday(date(2024, 10, 7)) is True

    def test_new_years_day(self):
        assert is_holiday(date(2024, 1, 1)) is True

    def test_ordinary_working_day(self):
        assert is_holiday(date(2024, 1, 2)) is False

    def test_adjusted_workday_is_not_holiday(self):
        """Saturday 2024-10-12 is worked to extend National Day."""
        assert is_holiday(date(2024, 10, 12)) is False
        assert is_workday(date(2024, 10, 12)) is True

    def test_regular_weekend_is_holiday(self):
        assert is_holiday(date(2024, 6, 15)) is True  # Saturday
        assert is_holiday(date(2024, 6, 16)) is True  # Sunday

    def test_weekend_inside_festival_break(self):
        assert is_holiday(date(2024, 2, 17)) is True  # Saturday, Spring Festival

    def test_2025_spring_festival(self):
        assert is_holiday(date(2025, 1, 28)) is True   # Tuesday, New Year's Eve
        assert is_holiday(date(2025, 2, 4)) is True    # Tuesday
        assert is_holiday(date(2025, 2, 5)) is False   # Back to work
        assert is_holiday(date(2025, 1, 26)) is False  # Sunday workday
        assert is_holiday(date(2025, 2, 8)) is False   # Saturday workday

    def test_2025_mid_autumn_merged_into_national_day(self):
        assert is_holiday(date(2025, 10, 6)) is True
        assert is_holiday(date(2025, 10, 8)) is True
        assert is_holiday(date(2025, 10, 9)) is False

    def test_2026_new_year_and_spring_festival(self):
        assert is_holiday(date(2026, 1, 2)) is True    # Friday
        assert is_holiday(date(2026, 1, 4)) is False   # Sunday workday
        assert is_holiday(date(2026, 2, 23)) is True   # Monday
        assert is_holiday(date(2026, 2, 14)) is False  # Saturday workday

    def test_accepts_iso_string_and_tuple(self):
        assert is_holiday("2024-10-07") is True
        assert is_holiday((2024, 1, 2)) is False

    def test_datetime_uses_its_own_calendar_fields(self):
        """No timezone conversion: the datetime's own date is looked up."""
        late_utc = datetime(2024, 10, 7, 20, 0, tzinfo=timezone.utc)
        assert is_holiday(late_utc) is True


class TestOutOfRange:
    """Dates outside the covered years are never guessed."""

    @pytest.mark.parametrize("d", [
        date(1800, 1, 1),
        date(2100, 1, 1),
        date(2023, 10, 1),
        date(2023, 12, 31),
        date(2027, 1, 1),
    ])
    def test_uncovered_dates_raise(self, d):
        with pytest.raises(OutOfRangeError):
            is_holiday(d)

    def test_error_details_carry_coverage(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            holiday_kind(date(2100, 1, 1))

        error = exc_info.value
        assert error.code == "CMH_OUT_OF_RANGE"
        assert error.details["date"] == "2100-01-01"
        assert error.details["min_year"] == 2024
        assert error.details["max_year"] == 2026

    def test_coverage_bounds(self):
        assert coverage() == (2024, 2026)


class TestTotality:
    """Every covered date has exactly one answer."""

    def test_every_covered_date_answers(self):
        min_year, max_year = coverage()
        current = date(min_year, 1, 1)
        end = date(max_year, 12, 31)
        while current <= end:
            assert is_holiday(current) in (True, False)
            current += timedelta(days=1)

    def test_idempotent(self):
        d = date(2024, 5, 2)
        assert is_holiday(d) == is_holiday(d)
        assert holiday_kind(d) is holiday_kind(d)


class TestHolidayKind:
    """Tests for fine-grained kinds and categories."""

    def test_adjusted_workday_kind(self):
        assert holiday_kind(date(2024, 10, 12)) is HolidayKind.NATIONAL_DAY_WORKDAY
        assert day_category(date(2024, 10, 12)) is DayCategory.ADJUSTED_WORKDAY

    def test_regular_kinds(self):
        assert holiday_kind(date(2024, 6, 15)) is HolidayKind.REGULAR_HOLIDAY
        assert holiday_kind(date(2024, 6, 11)) is HolidayKind.REGULAR_WORKDAY
        assert day_category(date(2024, 6, 11)) is DayCategory.ORDINARY

    def test_festival_holiday_category(self):
        assert day_category(date(2024, 2, 14)) is DayCategory.HOLIDAY


class TestDefaultTable:
    """Tests for the compiled default table."""

    def test_2024_records_match_notice(self):
        table = default_table()
        records_2024 = [
            (date.fromordinal(ordinal), kind)
            for ordinal, kind in table.records
            if date.fromordinal(ordinal).year == 2024
        ]
        assert records_2024 == EXPECTED_2024_RECORDS

    def test_records_strictly_increasing_within_coverage(self):
        table = default_table()
        assert len(table) > 0

        ordinals = [ordinal for ordinal, _ in table.records]
        assert ordinals == sorted(set(ordinals))
        assert date.fromordinal(ordinals[0]).year >= table.min_year
        assert date.fromordinal(ordinals[-1]).year <= table.max_year

    def test_record_kinds_match_weekday(self):
        """Festival holidays are weekdays, festival workdays are weekends."""
        for ordinal, kind in default_table().records:
            d = date.fromordinal(ordinal)
            if kind.is_holiday:
                assert d.weekday() < 5, d
            else:
                assert d.weekday() >= 5, d

    def test_record_count(self):
        assert len(default_table()) == 27 + 23 + 25

    def test_loaded_once(self):
        assert default_table() is default_table()
