"""Connection settings and environment helpers."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BACKEND_URL = "http://localhost:9200"
DEFAULT_TIMEOUT_S = 30.0

URL_ENV = "ES_HTTPCLIENT_URL"
TIMEOUT_ENV = "ES_HTTPCLIENT_TIMEOUT_S"
VERIFY_CERTS_ENV = "ES_HTTPCLIENT_VERIFY_CERTS"
LOG_LEVEL_ENV = "ES_HTTPCLIENT_LOG_LEVEL"
PROXY_URL_ENV = "ES_HTTPCLIENT_PROXY_URL"


def env_bool(name: str, *, default_value: bool) -> bool:
    """Read a boolean value from environment variables.

    Args:
        name (str): Environment variable name.
        default_value (bool): Fallback value when missing or invalid.

    Returns:
        bool: Parsed boolean value.

    """
    raw = os.getenv(name)
    if raw is None:
        return default_value
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default_value


def env_float(name: str, *, default_value: float) -> float:
    """Read a float value from environment variables, falling back when invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default_value
    try:
        return float(raw)
    except ValueError:
        return default_value


class ClientSettings(BaseModel):
    """Connection settings of an HTTP client."""

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_BACKEND_URL
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    verify_certs: bool = True
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from `ES_HTTPCLIENT_*` environment variables.

        Returns:
            ClientSettings: Settings with environment overrides applied.

        """
        return cls(
            url=os.getenv(URL_ENV, DEFAULT_BACKEND_URL),
            timeout_s=env_float(TIMEOUT_ENV, default_value=DEFAULT_TIMEOUT_S),
            verify_certs=env_bool(VERIFY_CERTS_ENV, default_value=True),
        )
