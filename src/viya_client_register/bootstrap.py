"""Bootstrap credential (Consul client token) access."""

import logging
from pathlib import Path
from typing import Union

from .exceptions import CredentialUnavailable

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_ROOT = "/opt/sas/viya/config"

CONSUL_TOKEN_RELPATH = "etc/SASSecurityCertificateFramework/tokens/consul/default/client.token"


def default_token_path(config_root: Union[str, Path]) -> Path:
    """Location of the Consul client token under a Viya configuration root."""
    return Path(config_root) / CONSUL_TOKEN_RELPATH


class BootstrapTokenSource:
    """Reads the privileged bootstrap token used for the access-token exchange."""

    @staticmethod
    def read(path: Union[str, Path]) -> str:
        """Read the bootstrap token from ``path``.

        Args:
            path: Token file location

        Returns:
            The token with surrounding whitespace removed

        Raises:
            CredentialUnavailable: If the file is missing, unreadable or empty
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                token = handle.read().strip()
        except FileNotFoundError as e:
            raise CredentialUnavailable(f"Bootstrap token file not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialUnavailable(f"Cannot read bootstrap token file {path}: {e}") from e

        if not token:
            raise CredentialUnavailable(f"Bootstrap token file is empty: {path}")

        logger.debug("Read bootstrap token from %s (%d chars)", path, len(token))
        return token
