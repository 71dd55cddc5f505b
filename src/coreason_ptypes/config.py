# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ptypes

"""
Configuration for the coreason-ptypes package.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_KNOWN_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class PtypesSettings(BaseSettings):
    """
    Ambient settings for coreason-ptypes.

    The value types themselves are not configurable; these settings only
    drive the logging setup.

    Attributes:
        log_level (str): Minimum level for all sinks. Unknown levels fall back to INFO.
        log_json (bool): Emit JSON records to stdout instead of human-readable lines to stderr.
        log_file (Path | None): Optional path of a rotating JSON file sink.
    """

    model_config = SettingsConfigDict(
        env_prefix="PTYPES_",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO", description="Minimum log level.")
    log_json: bool = Field(default=False, description="Serialize console logs as JSON.")
    log_file: Path | None = Field(default=None, description="Path of an optional JSON log file.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> str:
        """
        Upper-cases the level name and replaces unknown names with INFO.
        """
        level = str(v).strip().upper() if v is not None else "INFO"
        if level not in _KNOWN_LEVELS:
            return "INFO"
        return level
