"""Settings for the default failure-sink chain."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vouch.sinks.base import FailureSink
from vouch.sinks.console import ConsoleSink
from vouch.sinks.debugger import DebuggerSink
from vouch.sinks.log import LoggingSink
from vouch.sinks.raising import RaisingSink


SinkName = Literal["log", "debugger", "raise", "console"]


class VouchSettings(BaseSettings):
    """Configuration for the failure-sink chain used when none is set in code.

    Loads from environment variables automatically:
        VOUCH_SINKS (JSON list, e.g. ``'["log", "raise"]'``), VOUCH_LOG_LEVEL
    """

    sinks: list[SinkName] = Field(
        default_factory=lambda: ["raise"],
        description="Sinks to run on failure, in order",
    )
    log_level: str = Field(default="ERROR", description="Level used by the log sink")

    model_config = SettingsConfigDict(
        env_prefix="VOUCH_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> VouchSettings:
    return VouchSettings()


def build_sinks(settings: VouchSettings) -> tuple[FailureSink, ...]:
    """Instantiate the sinks named in ``settings``, in order."""
    level = logging.getLevelName(settings.log_level)
    factories = {
        "log": lambda: LoggingSink(level=level),
        "debugger": DebuggerSink,
        "raise": RaisingSink,
        "console": ConsoleSink,
    }
    return tuple(factories[name]() for name in settings.sinks)
