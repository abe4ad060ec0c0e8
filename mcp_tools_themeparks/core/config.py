from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .. import __version__
from .errors import ConfigError


BASE_URL_ENV = "THEMEPARKS_API_BASE_URL"
TIMEOUT_ENV = "THEMEPARKS_API_TIMEOUT_S"


class Settings(BaseModel):
    """Process-wide configuration, built once at startup and passed down explicitly."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., min_length=1, description="ThemeParks.wiki API base, e.g. https://api.themeparks.wiki/v1")
    timeout_s: float = Field(default=30.0, gt=0)
    user_agent: str = f"themeparks-mcp/{__version__}"

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        # paths always start with "/"
        return value.rstrip("/")


def load_settings(environ: Optional[Mapping[str, str]] = None, use_dotenv: bool = True) -> Settings:
    """Build Settings from the environment (and a .env file, if present).

    Raises:
        ConfigError: THEMEPARKS_API_BASE_URL is missing or a value is invalid.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv()
        environ = os.environ

    base_url = (environ.get(BASE_URL_ENV) or "").strip()
    if not base_url:
        raise ConfigError(f"Missing required environment variables: {BASE_URL_ENV}")

    values = {"base_url": base_url}
    timeout = environ.get(TIMEOUT_ENV)
    if timeout:
        values["timeout_s"] = timeout

    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid ThemeParks MCP configuration: {exc}") from exc
