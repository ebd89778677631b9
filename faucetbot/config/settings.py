"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
Every field maps to the upper-cased environment variable of the same name
(``backend_url`` -> ``BACKEND_URL``); a ``.env`` file in the working
directory is read as well.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from faucetbot.errors import ConfigurationError


class Settings(BaseSettings):
    """Main application settings. Resolved once at startup and never mutated."""

    # Faucet backend
    backend_url: str = Field(
        default="http://localhost:5555", description="Base URL of the faucet backend"
    )
    drip_amount: float = Field(
        default=0.5, gt=0, description="Default amount sent per !drip, in whole units"
    )
    faucet_ignore_list: str = Field(
        default="",
        description="Comma-separated Matrix user ids whose commands are dropped, "
                    'e.g. FAUCET_IGNORE_LIST="@spam:matrix.org,@bot:example.com"',
    )

    # Network display
    network_decimals: int = Field(
        default=12, ge=0, description="Decimal exponent between base units and whole units"
    )
    network_unit: str = Field(default="UNIT", description="Token symbol shown in replies")

    # Matrix
    matrix_access_token: SecretStr = Field(description="Access token of the bot account")
    matrix_bot_user_id: str = Field(description="Full Matrix id of the bot, e.g. @faucet:matrix.org")
    matrix_homeserver: str = Field(
        default="https://matrix.org", description="Homeserver the bot connects to"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @property
    def ignore_list(self) -> frozenset[str]:
        """Parsed FAUCET_IGNORE_LIST with quotes, whitespace and empty entries removed."""
        entries = (item.replace('"', "").strip() for item in self.faucet_ignore_list.split(","))
        return frozenset(entry for entry in entries if entry)


def load_settings(env_file: str | Path | None = ".env") -> Settings:
    """
    Load settings from the environment (and an optional .env file).

    Args:
        env_file: Path to a .env file, or None to read the environment only

    Returns:
        Loaded settings instance

    Raises:
        ConfigurationError: If a required variable is missing or a value has
            the wrong type. The message names every offending variable.
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError(_describe_validation_error(e)) from e


def _describe_validation_error(error: ValidationError) -> str:
    missing: list[str] = []
    invalid: list[str] = []
    for item in error.errors():
        name = str(item["loc"][0]).upper() if item["loc"] else "<settings>"
        if item["type"] == "missing":
            missing.append(name)
        else:
            invalid.append(f"{name} ({item['msg']})")

    parts = []
    if missing:
        parts.append(f"Missing required environment variable(s): {', '.join(missing)}")
    if invalid:
        parts.append(f"Invalid environment variable(s): {', '.join(invalid)}")
    return "; ".join(parts)
