"""
Holiday Pack Loader

Loads and validates holiday packs from YAML or JSON files.

Converts Pydantic schema models to domain models and compiles them into
an immutable HolidayTable.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..config import Settings
from ..exceptions import (
    HolidayDataLoadError,
    HolidayDataValidationError,
    HolidayDataVersionMismatch,
)
from ..models import Festival, HolidayArrangement
from ..table import HolidayTable
from .schema import (
    SCHEMA_VERSION,
    ArrangementSchema,
    HolidayPackSchema,
    check_schema_version,
    validate_holiday_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def validate_reference_integrity(arrangements: list[HolidayArrangement], path: str = "") -> None:
    """
    Validate that arrangements don't contradict each other.

    Catches:
    - Overlapping day-off periods
    - Workdays falling inside another festival's period
    - The same workday listed for two festivals

    Args:
        arrangements: Arrangements from every year of a pack
        path: File path for error messages

    Raises:
        ValueError: If integrity errors are found
    """
    errors = []
    ordered = sorted(arrangements, key=lambda a: a.start)

    for prev, curr in zip(ordered, ordered[1:]):
        if curr.start <= prev.end:
            errors.append(
                f"{curr.festival.value} {curr.start.isoformat()} overlaps "
                f"{prev.festival.value} ending {prev.end.isoformat()}"
            )

    seen_workdays: dict[Any, Festival] = {}
    for arrangement in ordered:
        for d in arrangement.workdays:
            if d in seen_workdays:
                errors.append(
                    f"Workday {d.isoformat()} listed for both "
                    f"{seen_workdays[d].value} and {arrangement.festival.value}"
                )
            seen_workdays[d] = arrangement.festival
            for other in ordered:
                if other.start <= d <= other.end:
                    errors.append(
                        f"Workday {d.isoformat()} falls inside the "
                        f"{other.festival.value} period"
                    )

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Reference integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_arrangement(schema: ArrangementSchema) -> HolidayArrangement:
    """Convert ArrangementSchema to HolidayArrangement model."""
    return HolidayArrangement(
        festival=Festival(schema.festival),
        start=schema.start,
        end=schema.end,
        workdays=tuple(schema.workdays),
    )


def _convert_holiday_pack(schema: HolidayPackSchema, source: str) -> HolidayTable:
    """Convert HolidayPackSchema to a compiled HolidayTable."""
    arrangements = [
        _convert_arrangement(a)
        for year in schema.years
        for a in year.arrangements
    ]
    try:
        validate_reference_integrity(arrangements, source)
    except ValueError as e:
        raise HolidayDataValidationError(
            message="Reference integrity validation failed",
            details={"errors": str(e), "path": source},
        )

    return HolidayTable.from_arrangements(
        arrangements,
        min_year=schema.min_year,
        max_year=schema.max_year,
        source=source,
    )


# =============================================================================
# Holiday Pack Loader
# =============================================================================

class HolidayPackLoader:
    """
    Loads holiday packs from YAML or JSON files.

    Usage:
        loader = HolidayPackLoader()
        table = loader.load("path/to/holidays.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> HolidayTable:
        """
        Load a holiday pack from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Compiled HolidayTable

        Raises:
            HolidayDataLoadError: If file cannot be read
            HolidayDataValidationError: If validation fails
            HolidayDataVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise HolidayDataLoadError(
                message=f"Failed to load holiday pack: {e}",
                details={"path": str(path), "error": str(e)},
            )

        return self.load_data(data, source=str(path))

    def load_data(self, data: Any, source: str = "<string>") -> HolidayTable:
        """
        Validate and compile already-parsed pack data.

        Raises:
            HolidayDataValidationError: If validation fails
            HolidayDataVersionMismatch: If schema version incompatible
        """
        if not isinstance(data, dict):
            raise HolidayDataValidationError(
                message="Holiday pack must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            if self.strict_version:
                raise HolidayDataVersionMismatch(
                    message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                    details={
                        "pack_version": pack_version,
                        "expected_version": SCHEMA_VERSION,
                    },
                )
            logger.warning(
                f"Accepting holiday pack with schema version {pack_version} "
                f"(expected {SCHEMA_VERSION})",
                extra={"source": source, "pack_version": str(pack_version)},
            )

        try:
            schema = validate_holiday_pack(data)
        except ValidationError as e:
            raise HolidayDataValidationError(
                message=f"Holiday pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            )

        table = _convert_holiday_pack(schema, source)
        logger.info(
            f"Loaded holiday pack {schema.id} covering {table.min_year}-{table.max_year}",
            extra={
                "source": source,
                "min_year": table.min_year,
                "max_year": table.max_year,
                "record_count": len(table),
            },
        )
        return table

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_holiday_table(path: Union[str, Path], strict_version: bool = True) -> HolidayTable:
    """
    Load a holiday table from a pack file.

    Args:
        path: Path to YAML or JSON file
        strict_version: Reject packs with incompatible schema versions

    Returns:
        Compiled HolidayTable
    """
    return HolidayPackLoader(strict_version=strict_version).load(path)


def load_holiday_table_from_string(content: str, format: str = "yaml") -> HolidayTable:
    """
    Load a holiday table from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Returns:
        Compiled HolidayTable
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise HolidayDataLoadError(
            message=f"Failed to parse holiday pack: {e}",
            details={"format": format, "error": str(e)},
        )
    return HolidayPackLoader().load_data(data)


@lru_cache(maxsize=1)
def default_table() -> HolidayTable:
    """
    Get the process-wide holiday table (loaded once, then cached).

    Loads CMH_DATA_PATH if set, otherwise the bundled pack.
    """
    settings = Settings.from_env()
    return load_holiday_table(
        settings.resolved_data_path,
        strict_version=settings.strict_schema,
    )


def reset_default_table() -> None:
    """Drop the cached default table so the next lookup reloads it."""
    default_table.cache_clear()
