"""
Chinese Mainland Holidays Exception Hierarchy

Domain-specific exceptions for holiday lookups and holiday data packs.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: CMH_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class HolidayError(Exception):
    """
    Base exception for all holiday errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (CMH_*)
        details: Additional context about the error
    """
    message: str
    code: str = "CMH_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Lookup Errors
# =============================================================================

@dataclass
class OutOfRangeError(HolidayError):
    """Date falls outside the years covered by the holiday table."""
    code: str = "CMH_OUT_OF_RANGE"


@dataclass
class InvalidDateError(HolidayError):
    """Value is not a valid calendar date."""
    code: str = "CMH_INVALID_DATE"


# =============================================================================
# Holiday Data Errors
# =============================================================================

@dataclass
class HolidayDataLoadError(HolidayError):
    """Failed to load a holiday pack from file."""
    code: str = "CMH_DATA_LOAD_ERROR"


@dataclass
class HolidayDataValidationError(HolidayError):
    """Holiday pack schema or integrity validation failed."""
    code: str = "CMH_DATA_VALIDATION_ERROR"


@dataclass
class HolidayDataVersionMismatch(HolidayError):
    """Holiday pack schema version doesn't match the supported version."""
    code: str = "CMH_DATA_VERSION_MISMATCH"
