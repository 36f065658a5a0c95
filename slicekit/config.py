# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("SliceSettings", "settings")


class SliceSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support.

    Variables are read with the ``SLICEKIT_`` prefix, e.g.
    ``SLICEKIT_TRACE_COMBINATORS=1``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SLICEKIT_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level applied to the 'slicekit' logger",
    )
    TRACE_COMBINATORS: bool = Field(
        default=False,
        description="Log a DEBUG record for every combinator call",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


# Create a singleton instance
settings = SliceSettings()
# Store the instance in the class variable for singleton pattern
SliceSettings._instance = settings
