"""Configuration for calendar export."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from orgcal.constants import (
    DEFAULT_END_OFFSET_DAYS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_START_OFFSET_DAYS,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class OrgCalConfig(BaseModel):
    """Export configuration with Pydantic validation."""

    # Output
    output_path: Path = Field(default=DEFAULT_OUTPUT_PATH)

    # Fetch defaults
    default_calendars: list[str] = Field(default_factory=list)
    start_offset_days: int = Field(default=DEFAULT_START_OFFSET_DAYS)
    end_offset_days: int = Field(default=DEFAULT_END_OFFSET_DAYS)
    strict_calendars: bool = Field(default=False)

    # Provider
    access_timeout: float = Field(default=10.0, gt=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="orgcal.log")

    @field_validator("output_path")
    @classmethod
    def expand_output_path(cls, v: Path) -> Path:
        """Expand ~ in the output path."""
        return v.expanduser()

    @classmethod
    def from_env(cls) -> "OrgCalConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Output
        if "ORGCAL_OUTPUT_PATH" in os.environ:
            config_dict["output_path"] = Path(os.environ["ORGCAL_OUTPUT_PATH"])

        # Fetch defaults
        if "ORGCAL_CALENDARS" in os.environ:
            config_dict["default_calendars"] = [
                name.strip()
                for name in os.environ["ORGCAL_CALENDARS"].split(",")
                if name.strip()
            ]
        for env_key, field_name in (
            ("ORGCAL_START_OFFSET", "start_offset_days"),
            ("ORGCAL_END_OFFSET", "end_offset_days"),
        ):
            if env_key in os.environ:
                try:
                    config_dict[field_name] = int(os.environ[env_key])
                except ValueError:
                    pass  # Keep default if invalid
        if "ORGCAL_STRICT" in os.environ:
            value = os.environ["ORGCAL_STRICT"].strip().lower()
            if value in _TRUE_VALUES:
                config_dict["strict_calendars"] = True
            elif value in _FALSE_VALUES:
                config_dict["strict_calendars"] = False

        # Provider
        if "ORGCAL_ACCESS_TIMEOUT" in os.environ:
            try:
                timeout = float(os.environ["ORGCAL_ACCESS_TIMEOUT"])
                if timeout > 0:
                    config_dict["access_timeout"] = timeout
            except ValueError:
                pass

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        return cls(**config_dict)
