"""Pydantic models for sprint config files."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STATUS_FILE = "sprint.txt"
DEFAULT_CHAR_LIMIT = 2


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: Optional[str] = None
    format: Optional[Literal["kv", "json", "pretty"]] = None
    console: Optional[bool] = None
    file: Optional[bool] = None
    dev_file: Optional[bool] = Field(None, alias="devFile")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Config(BaseModel):
    """Main configuration schema."""
    schema_: Optional[str] = Field(None, alias="$schema")
    theme: Optional[Literal["dark", "light"]] = None
    log_level: Optional[str] = Field(None, alias="logLevel")
    logging: Optional[LoggingConfig] = None

    status_file: str = Field(DEFAULT_STATUS_FILE, alias="statusFile", min_length=1)
    char_limit: int = Field(DEFAULT_CHAR_LIMIT, alias="charLimit", ge=1)
    label: str = "Duration "
    placeholder: str = "minutes"
    tick_interval: float = Field(1.0, alias="tickInterval", gt=0)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
