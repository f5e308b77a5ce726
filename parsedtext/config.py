"""Configuration management for parsedtext."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from parsedtext.core.constants import OffsetMode, StyleDefaults


class Config(BaseSettings):
    """Application configuration."""

    offset_mode: OffsetMode = Field(
        default=OffsetMode.RELATIVE,
        alias="PARSEDTEXT_OFFSET_MODE",
        description="Offset reported to match callbacks (relative or absolute)",
    )
    highlight_style: str = Field(
        default=StyleDefaults.HIGHLIGHT.value,
        alias="PARSEDTEXT_HIGHLIGHT_STYLE",
        description="Rich style applied to pre-highlighted ranges",
    )
    log_level: str = Field(
        default="WARNING",
        alias="PARSEDTEXT_LOG_LEVEL",
        description="Logging level for the CLI",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


def load_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()
