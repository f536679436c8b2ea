"""Configuration for the SAS Logon client registration tool.

Every ambient value the registration depends on (service endpoint, bootstrap
token location, current session URL, host name) is read here once and passed
explicitly to the components that need it.

Environment Variables:
    SAS_SERVICES_ENDPOINT: Base URI of the Viya deployment (e.g. https://viya.example.com)
    SAS_CONFIG_ROOT: Viya configuration root (default: /opt/sas/viya/config)
    CONSUL_TOKEN_FILE: Full path of the bootstrap token file (overrides SAS_CONFIG_ROOT)
    SAS_SESSION_URL: Base URL of the current SAS Studio session, if any
    VIYA_HOSTNAME: Host name used for the authorize URL (default: this host's FQDN)
    HTTP_TIMEOUT: Request timeout in seconds (default: 30)
    VERIFY_SSL: Verify TLS certificates (default: true)
    LOG_LEVEL: Logging level (default: INFO)
"""

import os
import socket
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .bootstrap import DEFAULT_CONFIG_ROOT, default_token_path
from .exceptions import ConfigurationError


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(value: Optional[str], default: float = 30.0) -> float:
    if value is None or not value.strip():
        return default
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"HTTP_TIMEOUT must be a number of seconds, got {value!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"HTTP_TIMEOUT must be positive, got {value!r}")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for one registration run."""

    base_url: Optional[str] = None
    token_file: Path = field(default_factory=lambda: default_token_path(DEFAULT_CONFIG_ROOT))
    session_url: Optional[str] = None
    hostname: Optional[str] = None
    timeout: float = 30.0
    verify_ssl: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Settings":
        """Build settings from the environment, loading a .env file first.

        Args:
            env_file: Path to .env file (defaults to ./.env when it exists)

        Returns:
            Settings instance
        """
        env_file = env_file or Path(".env")
        if env_file.exists():
            load_dotenv(env_file)

        token_file = os.getenv("CONSUL_TOKEN_FILE")
        if token_file:
            token_path = Path(token_file)
        else:
            token_path = default_token_path(os.getenv("SAS_CONFIG_ROOT", DEFAULT_CONFIG_ROOT))

        return cls(
            base_url=os.getenv("SAS_SERVICES_ENDPOINT") or None,
            token_file=token_path,
            session_url=os.getenv("SAS_SESSION_URL") or None,
            hostname=os.getenv("VIYA_HOSTNAME") or socket.getfqdn(),
            timeout=_env_timeout(os.getenv("HTTP_TIMEOUT")),
            verify_ssl=_env_bool(os.getenv("VERIFY_SSL"), True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def override(self, **changes) -> "Settings":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
