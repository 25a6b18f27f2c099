"""
Client configuration.

Configuration is read from a YAML file with environment overrides:
- ACCOUNT_API_BASE_URL: host[:port] of the accounts API
- ACCOUNT_API_USE_HTTPS: "true" to use https
- ACCOUNT_API_TIMEOUT: per-request timeout in seconds
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import requests
import yaml

from .errors import ConfigValidationError
from .transport import TransportConfig

logger = logging.getLogger(__name__)

BASE_URL_ENV = "ACCOUNT_API_BASE_URL"
USE_HTTPS_ENV = "ACCOUNT_API_USE_HTTPS"
TIMEOUT_ENV = "ACCOUNT_API_TIMEOUT"


@dataclass
class ClientConfig:
    """Accounts API client configuration."""

    # Host of the accounts API, e.g. "localhost:8080" (no scheme)
    base_url: str
    use_https: bool = False
    timeout: float = TransportConfig.DEFAULT_TIMEOUT

    def validate(self) -> list[str]:
        """Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("base_url is required")
        elif "://" in self.base_url:
            errors.append("base_url must not include a scheme; use use_https instead")

        if self.timeout <= 0:
            errors.append("timeout must be positive")

        return errors

    def to_transport_config(self, session: requests.Session | None = None) -> TransportConfig:
        return TransportConfig(session=session, use_https=self.use_https, timeout=self.timeout)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise ConfigValidationError(f"{name} must be true or false, got {value!r}")


def load_config(config_path: Path) -> ClientConfig:
    """
    Load configuration from YAML file, applying environment overrides.

    A missing file is not an error: the environment alone may configure the
    client.

    Raises:
        ConfigValidationError: If the resulting configuration is invalid
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.debug(f"Config file {config_path} not found, using environment only")
        data = {}

    if not isinstance(data, dict):
        raise ConfigValidationError(f"{config_path} must contain a mapping")

    base_url = os.environ.get(BASE_URL_ENV, data.get("base_url", ""))

    use_https = data.get("use_https", False)
    use_https_env = os.environ.get(USE_HTTPS_ENV, "")
    if use_https_env:
        use_https = _parse_bool(USE_HTTPS_ENV, use_https_env)

    raw_timeout = os.environ.get(TIMEOUT_ENV, data.get("timeout", TransportConfig.DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"timeout must be a number, got {raw_timeout!r}") from e

    config = ClientConfig(base_url=base_url, use_https=bool(use_https), timeout=timeout)

    errors = config.validate()
    if errors:
        raise ConfigValidationError("; ".join(errors))

    return config
