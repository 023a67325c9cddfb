"""
Holiday Packs

Schema validation and loading for holiday packs.

Holiday packs are YAML or JSON files transcribing the State Council's
annual notices: per year, each festival's day-off period and the weekend
days swapped into working days.

Usage:
    from chinese_mainland_holidays.packs import load_holiday_table

    table = load_holiday_table("path/to/holidays.yaml")
    table.is_holiday(date(2024, 10, 7))
"""
from __future__ import annotations

from .loader import (
    HolidayPackLoader,
    default_table,
    load_holiday_table,
    load_holiday_table_from_string,
    reset_default_table,
    validate_reference_integrity,
)
from .schema import (
    SCHEMA_VERSION,
    ArrangementSchema,
    HolidayPackSchema,
    YearScheduleSchema,
    check_schema_version,
    validate_holiday_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "HolidayPackLoader",
    "default_table",
    "reset_default_table",
    "load_holiday_table",
    "load_holiday_table_from_string",
    # Validation
    "validate_holiday_pack",
    "validate_reference_integrity",
    "check_schema_version",
    # Schemas
    "HolidayPackSchema",
    "YearScheduleSchema",
    "ArrangementSchema",
]
