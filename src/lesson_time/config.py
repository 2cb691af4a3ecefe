"""Engine configuration loaded from environment variables.

Only ambient settings live here. The wire and display formats are fixed by
the backend contract and are deliberately not configurable.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.lesson_time.duration import DURATION_VALUES


class EngineConfig(BaseSettings):
    """Lesson time engine configuration.

    Settings are read from LESSON_TIME_* environment variables, with a .env
    file in the project root honoured for local development.
    """

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Lesson form
    default_duration_hours: float = Field(
        default=1,
        description="Duration preselected when a new lesson form opens",
    )

    model_config = {
        "env_prefix": "LESSON_TIME_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("default_duration_hours")
    @classmethod
    def _check_duration_option(cls, value: float) -> float:
        if value not in DURATION_VALUES:
            raise ValueError(
                f"default_duration_hours must be one of {list(DURATION_VALUES)}, "
                f"got {value!r}"
            )
        return value


# Singleton pattern
_config: EngineConfig | None = None


def get_config() -> EngineConfig:
    """Get the engine configuration singleton.

    Returns:
        EngineConfig: Engine configuration instance
    """
    global _config
    if _config is None:
        _config = EngineConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the env."""
    global _config
    _config = None
