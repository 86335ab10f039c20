"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use JADEITE_ prefix (e.g., JADEITE_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use JADEITE_ prefix.

    Examples:
        JADEITE_INDENT_UNIT="    "
        JADEITE_STRICT_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="JADEITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Renderer configuration
    indent_unit: str = Field(
        default="  ",
        description="Whitespace emitted once per nesting level in rendered HTML",
    )

    # Compilation configuration
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: raise on lexical stops and skipped constructs instead of collecting them",
    )

    @field_validator("indent_unit")
    @classmethod
    def indentUnit_validate(cls, value: str) -> str:
        """
        Reject indent units that would change the document text.

        Example:
            >>> AppSettings(indent_unit="\\t").indent_unit
            '\\t'
        """
        if value.strip(" \t"):
            raise ValueError("indent_unit may only contain spaces and tabs")
        return value


# Singleton instance - import this in your code
appsettings = AppSettings()
