"""
Engine configuration from environment variables.

    CYOA_LOG_LEVEL               logging level for the CLI (default INFO)
    CYOA_MISSING_VALUES_AS_ZERO  absent run-state values read as 0 (default false)
    CYOA_STORY_SCOPE             scope name exposing the story context (default "story")
"""

from __future__ import annotations
from dataclasses import dataclass
import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by the reducer, the action generator and the CLI."""
    log_level: str = "INFO"
    missing_values_as_zero: bool = False
    story_scope: str = "story"

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from CYOA_* environment variables."""
        return cls(
            log_level=os.getenv("CYOA_LOG_LEVEL", "INFO").upper(),
            missing_values_as_zero=_env_flag("CYOA_MISSING_VALUES_AS_ZERO", False),
            story_scope=os.getenv("CYOA_STORY_SCOPE", "story"),
        )


DEFAULT_CONFIG = EngineConfig()
