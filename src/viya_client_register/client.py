"""HTTP client for the SAS Logon administrative endpoints."""

import logging
from typing import Optional

import httpx

from .exceptions import RegistrationTransportError, TokenExchangeError
from .inspector import ResponseInspector
from .sanitizer import mask_token, redact_headers

logger = logging.getLogger(__name__)

CONSUL_EXCHANGE_PATH = "/SASLogon/oauth/clients/consul"
CONSUL_EXCHANGE_PARAMS = {"callback": "false", "serviceId": "app"}
CLIENTS_PATH = "/SASLogon/oauth/clients"


class PlatformClient:
    """Synchronous client for the two calls a registration needs."""

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the platform client.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.client = httpx.Client(timeout=timeout, verify=verify_ssl, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def fetch_access_token(self, base_uri: str, bootstrap_token: str) -> str:
        """Exchange the bootstrap token for an administrative access token.

        Args:
            base_uri: Viya services endpoint
            bootstrap_token: Consul client token

        Returns:
            The access token

        Raises:
            TokenExchangeError: If the call fails or returns no access token
        """
        url = base_uri.rstrip("/") + CONSUL_EXCHANGE_PATH
        headers = {"X-Consul-Token": bootstrap_token}
        logger.debug("POST %s headers=%s", url, redact_headers(headers))

        try:
            response = self.client.post(url, params=CONSUL_EXCHANGE_PARAMS, headers=headers)
        except httpx.HTTPError as e:
            raise TokenExchangeError(f"Token exchange request to {url} failed: {e}") from e

        logger.debug("Token exchange returned HTTP %d", response.status_code)
        try:
            token = ResponseInspector.extract_access_token(response.text)
        except TokenExchangeError as e:
            if response.is_success:
                raise
            raise TokenExchangeError(
                f"Token exchange failed with HTTP {response.status_code}: {e}"
            ) from e

        logger.info("Obtained access token %s", mask_token(token))
        return token

    def register_client(self, base_uri: str, access_token: str, payload: bytes) -> str:
        """Submit a client registration request.

        Args:
            base_uri: Viya services endpoint
            access_token: Bearer token from ``fetch_access_token``
            payload: Serialized ``ClientRegistrationRequest``

        Returns:
            The raw response body, whatever the HTTP status

        Raises:
            RegistrationTransportError: If no response was received
        """
        url = base_uri.rstrip("/") + CLIENTS_PATH
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        logger.debug("POST %s headers=%s", url, redact_headers(headers))

        try:
            response = self.client.post(url, content=payload, headers=headers)
        except httpx.HTTPError as e:
            raise RegistrationTransportError(f"Registration request to {url} failed: {e}") from e

        if not response.is_success:
            logger.warning("Client registration returned HTTP %d", response.status_code)
        return response.text
