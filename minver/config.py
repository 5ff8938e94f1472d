"""Reporter configuration — env-driven.

Centralized settings using pydantic-settings. Reads from a .env file and
MINVER_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReporterSettings(BaseSettings):
    """Runtime settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export MINVER_LOG_LEVEL=DEBUG
        export MINVER_STRICT=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MINVER_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # None defers to the interpreter: strict unless running under ``python -O``
    strict: bool | None = None

    @property
    def effective_strict(self) -> bool:
        """Whether unmatched final results should raise."""
        return __debug__ if self.strict is None else self.strict


# Module-level singleton — import as `from minver.config import settings`
settings = ReporterSettings()
