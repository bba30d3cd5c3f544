"""Environment configuration for the default logger."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simplelog.facade import default_logger
from simplelog.levels import INFO, resolve_level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIMPLELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: int = Field(
        INFO,
        description="Minimum severity: a level name (debug, info, warning, error) or an integer",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> int:
        # Environment values always arrive as strings, so accept "2" and "-1" too
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("+-").isdigit():
                return int(text)
            return resolve_level(text)
        return resolve_level(value)  # type: ignore[arg-type]


def configure(settings: Settings | None = None) -> Settings:
    """
    Apply settings to the default logger.

    Args:
        settings: Settings to apply; read from the environment when omitted

    Returns:
        The settings that were applied
    """
    if settings is None:
        settings = Settings()
    default_logger().set_level(settings.level)
    return settings
