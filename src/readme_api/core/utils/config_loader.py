# src/readme_api/core/utils/config_loader.py
import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from readme_api.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> AppConfig field
ENV_FIELDS = {
    "GITHUB_TOKEN": "github_token",
    "PORT": "port",
    "HOST": "host",
    "GITHUB_API_URL": "api_base_url",
    "REQUEST_TIMEOUT": "request_timeout",
    "LOG_LEVEL": "log_level",
}


class AppConfig(BaseModel):
    """Process-wide settings, built once at startup and passed explicitly."""
    model_config = ConfigDict(frozen=True)

    github_token: str = Field(min_length=1, repr=False)
    port: int = Field(default=8080, ge=1, le=65535)
    host: str = "0.0.0.0"
    api_base_url: str = "https://api.github.com"
    request_timeout: float = Field(default=15.0, gt=0)
    log_level: str = "INFO"

    @field_validator("github_token")
    @classmethod
    def validate_token(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(environ: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> AppConfig:
    """
    Builds the AppConfig from the environment (after loading a .env file).

    Raises:
        ConfigurationError: If GITHUB_TOKEN is missing or any value is invalid.
    """
    if dotenv:
        load_dotenv(override=False)
    env = os.environ if environ is None else environ

    if not (env.get("GITHUB_TOKEN") or "").strip():
        raise ConfigurationError("GITHUB_TOKEN is not set.")

    values = {field: env[var] for var, field in ENV_FIELDS.items() if env.get(var) not in (None, "")}

    try:
        config = AppConfig(**values)
    except ValidationError as e:
        field_to_var = {field: var for var, field in ENV_FIELDS.items()}
        names = ", ".join(field_to_var.get(str(err["loc"][0]), str(err["loc"][0])) for err in e.errors())
        raise ConfigurationError(f"Invalid configuration value(s): {names}") from e

    logger.debug("Configuration loaded (api=%s, port=%d, timeout=%.1fs).",
                 config.api_base_url, config.port, config.request_timeout)
    return config
