"""Environment configuration for building a Signicat client.

Environment variables:
    SIGNICAT_BASE_URL: API base URL (default: https://api.idfy.io/)
    SIGNICAT_ACCESS_TOKEN: Bearer token attached to the transport built by the CLI
    SIGNICAT_TIMEOUT_SECONDS: Transport timeout in seconds (default: none)

The library Client never reads the environment; this module serves callers
that want env-driven setup, such as the CLI.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from signicat.client import DEFAULT_BASE_URL, parse_base_url
from signicat.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_BASE_URL: Final[str] = "SIGNICAT_BASE_URL"
ENV_ACCESS_TOKEN: Final[str] = "SIGNICAT_ACCESS_TOKEN"
ENV_TIMEOUT_SECONDS: Final[str] = "SIGNICAT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration (immutable).

    Attributes:
        base_url: API base URL.
        access_token: Optional bearer token for the caller-built transport.
        timeout_seconds: Optional transport timeout; None means no timeout.
    """

    base_url: str = DEFAULT_BASE_URL
    access_token: str | None = field(default=None, repr=False)
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        parse_base_url(self.base_url)
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"{ENV_TIMEOUT_SECONDS} must be a positive number, got {self.timeout_seconds}"
            )


def _get_env_str(environ: Mapping[str, str], key: str) -> str | None:
    """Get a stripped string from the environment; empty counts as unset."""
    raw = environ.get(key, "").strip()
    return raw or None


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_TIMEOUT_SECONDS} must be a positive number, got '{raw}'"
        ) from e
    if value <= 0:
        raise ConfigurationError(f"{ENV_TIMEOUT_SECONDS} must be a positive number, got {value}")
    return value


def load_client_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Load client configuration from environment variables.

    Args:
        environ: Mapping to read instead of os.environ (for tests).

    Returns:
        ClientConfig with validated values.

    Raises:
        ConfigurationError: If any variable is set to an invalid value.
    """
    env = os.environ if environ is None else environ

    config = ClientConfig(
        base_url=_get_env_str(env, ENV_BASE_URL) or DEFAULT_BASE_URL,
        access_token=_get_env_str(env, ENV_ACCESS_TOKEN),
        timeout_seconds=_parse_timeout(_get_env_str(env, ENV_TIMEOUT_SECONDS)),
    )
    logger.debug(
        "Loaded Signicat config: base_url=%s token=%s timeout=%s",
        config.base_url,
        "set" if config.access_token else "unset",
        config.timeout_seconds,
    )
    return config
