"""Configuration management for treechanges."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TreeChangesConfig(BaseSettings):
    """Configuration for a treechanges scanner and its watch loop."""

    directories: List[Path] = Field(
        default_factory=list,
        description="Directories to monitor",
    )
    include_masks: List[str] = Field(
        default_factory=list,
        description="Regex patterns a filename must match to be tracked",
    )
    exclude_masks: List[str] = Field(
        default_factory=list,
        description="Regex patterns that drop a filename, checked before include masks",
    )
    recurse: bool = Field(default=True, description="Descend into subdirectories")

    interval: float = Field(default=1.0, description="Seconds to sleep between scans")

    log_level: str = "INFO"
    log_file: Optional[Path] = None
    status_path: Optional[Path] = Field(
        default=None,
        description="Where the watch service writes its JSON status, if anywhere",
    )

    model_config = SettingsConfigDict(
        env_prefix="TREECHANGES_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("interval")
    @classmethod
    def interval_is_positive(cls, v: float) -> float:
        """Polling interval must be a positive number of seconds."""
        if v <= 0:
            raise ValueError("interval must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()
