"""
Holiday Pack Schemas

Pydantic models for validating holiday pack YAML/JSON files.

A holiday pack lists, year by year, the arrangements announced in the
State Council's annual notice on public holidays: each festival's day-off
period and the weekend days swapped into working days.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"

# Longest day-off period ever announced is 9 days; leave headroom.
MAX_PERIOD_DAYS = 15


FestivalValue = Literal[
    "new_year", "spring_festival", "qingming", "labour_day",
    "dragon_boat", "mid_autumn", "national_day",
]


# =============================================================================
# Arrangement Schemas
# =============================================================================

class ArrangementSchema(BaseModel):
    """Schema for one festival's arrangement within a year."""
    festival: FestivalValue = Field(..., description="Festival identifier")
    start: date = Field(..., description="First day off (inclusive)")
    end: date = Field(..., description="Last day off (inclusive)")
    workdays: list[date] = Field(
        default_factory=list,
        description="Weekend days made working days for this festival",
    )

    model_config = {"extra": "forbid"}

    @field_validator("workdays")
    @classmethod
    def workdays_on_weekends(cls, v: list[date]) -> list[date]:
        for d in v:
            if d.weekday() < 5:
                raise ValueError(f"Adjusted workday {d.isoformat()} is not a Saturday or Sunday")
        if len(set(v)) != len(v):
            raise ValueError("Duplicate adjusted workdays")
        return sorted(v)

    @model_validator(mode="after")
    def validate_period(self) -> "ArrangementSchema":
        if self.end < self.start:
            raise ValueError(
                f"Period ends ({self.end.isoformat()}) before it starts ({self.start.isoformat()})"
            )
        length = (self.end - self.start).days + 1
        if length > MAX_PERIOD_DAYS:
            raise ValueError(f"Period of {length} days exceeds {MAX_PERIOD_DAYS} days")
        for d in self.workdays:
            if self.start <= d <= self.end:
                raise ValueError(f"Adjusted workday {d.isoformat()} falls inside its own period")
        return self


class YearScheduleSchema(BaseModel):
    """Schema for one year's holiday schedule."""
    year: int = Field(..., ge=1, le=9999)
    notice: str = Field(..., description="Title of the announcing notice")
    source_uri: Optional[str] = Field(None, description="URL of the notice")
    arrangements: list[ArrangementSchema] = Field(..., min_length=1)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def arrangements_in_year(self) -> "YearScheduleSchema":
        # A New Year break may start in the previous December.
        for arrangement in self.arrangements:
            if arrangement.end.year != self.year:
                raise ValueError(
                    f"Arrangement for {arrangement.festival} ends in "
                    f"{arrangement.end.year}, not {self.year}"
                )
            if arrangement.start.year != self.year and not (
                arrangement.festival == "new_year"
                and arrangement.start.year == self.year - 1
            ):
                raise ValueError(
                    f"Arrangement for {arrangement.festival} starts in "
                    f"{arrangement.start.year}, not {self.year}"
                )
        return self


# =============================================================================
# Holiday Pack Schema (Root)
# =============================================================================

class HolidayPackSchema(BaseModel):
    """Root schema for a holiday pack."""
    schema_version: str = Field(SCHEMA_VERSION)
    id: str = Field(..., description="Pack identifier")
    region: str = Field(..., description="Region code (e.g., CN)")
    name: str = Field(..., description="Human-readable name")
    years: list[YearScheduleSchema] = Field(..., min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def years_contiguous(self) -> "HolidayPackSchema":
        years = [y.year for y in self.years]
        if len(set(years)) != len(years):
            raise ValueError("Duplicate year in holiday pack")
        ordered = sorted(years)
        if ordered != list(range(ordered[0], ordered[-1] + 1)):
            raise ValueError(f"Years must be contiguous, got {ordered}")
        return self

    @property
    def min_year(self) -> int:
        return min(y.year for y in self.years)

    @property
    def max_year(self) -> int:
        return max(y.year for y in self.years)


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_holiday_pack(data: dict[str, Any]) -> HolidayPackSchema:
    """
    Validate a holiday pack dictionary against the schema.

    Args:
        data: Dictionary loaded from YAML/JSON

    Returns:
        Validated HolidayPackSchema

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return HolidayPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that a pack's schema major version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
