"""
Configuration

Settings are read from environment variables:

    CMH_DATA_PATH      Holiday pack file to use instead of the bundled one
    CMH_STRICT_SCHEMA  Reject packs with another schema major version (default: true)
    CMH_LOG_LEVEL      Level for configure_logging() (default: WARNING)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BUNDLED_DATA_PATH = Path(__file__).parent / "data" / "cn_mainland.yaml"


@dataclass(frozen=True)
class Settings:
    """Snapshot of environment settings."""
    data_path: Optional[Path] = None
    strict_schema: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        data_path = os.getenv("CMH_DATA_PATH")
        return cls(
            data_path=Path(data_path) if data_path else None,
            strict_schema=os.getenv("CMH_STRICT_SCHEMA", "true").lower() == "true",
            log_level=os.getenv("CMH_LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def resolved_data_path(self) -> Path:
        """Pack file to load: the override if set, else the bundled pack."""
        return self.data_path or BUNDLED_DATA_PATH
