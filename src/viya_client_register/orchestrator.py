"""End-to-end client registration against SAS Logon."""

import logging
import re
from typing import List, Optional
from urllib.parse import quote

import httpx

from .bootstrap import BootstrapTokenSource
from .client import PlatformClient
from .config import Settings
from .exceptions import InvalidRegistrationRequest
from .inspector import ResponseInspector
from .models import ClientRegistrationResult, GrantType, RegistrationParameters
from .payload import PayloadBuilder

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/SASLogon/oauth/authorize"

_STUDIO_SEGMENT = re.compile(r"/SASStudio[^/]*/?$")


def _with_scheme(host: str) -> str:
    host = host.rstrip("/")
    if "://" in host:
        return host
    return f"https://{host}"


def derive_authorize_host(session_url: Optional[str], hostname: Optional[str]) -> str:
    """Pick the host the end user should visit to authorize the client.

    A session URL ending in a SAS Studio segment is used without that segment;
    otherwise the host name is used. The session URL itself is the last resort
    when no host name is known.
    """
    session_url = (session_url or "").strip()
    if session_url:
        stripped = _STUDIO_SEGMENT.sub("", session_url)
        if stripped != session_url and stripped:
            return _with_scheme(stripped)
    if hostname:
        return _with_scheme(hostname)
    if session_url:
        return _with_scheme(session_url)
    raise InvalidRegistrationRequest("No session URL or host name available for the authorize URL")


def build_authorize_url(host: str, client_id: str) -> str:
    """Authorization-code entry point for ``client_id`` on ``host``."""
    return f"{host}{AUTHORIZE_PATH}?client_id={quote(client_id, safe='')}&response_type=code"


def instructions(result: ClientRegistrationResult) -> List[str]:
    """Human-readable lines describing the registered client."""
    lines = [
        "The following client was registered with SAS Logon:",
        f"  Client ID:     {result.client_id}",
        f"  Client secret: {result.client_secret}",
        f"  Grant type:    {result.grant_type.value}",
    ]
    if result.authorize_url:
        lines.extend([
            "",
            "Open this URL in a browser to authorize the client and obtain an",
            "authorization code:",
            f"  {result.authorize_url}",
        ])
    return lines


class RegistrationOrchestrator:
    """Runs token exchange, payload construction, registration and inspection."""

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        """Initialize the orchestrator.

        Args:
            settings: Explicit configuration for this run
            transport: Custom httpx transport (used by tests)
        """
        self.settings = settings
        self.transport = transport

    def register(self, params: RegistrationParameters) -> ClientRegistrationResult:
        """Register a client and return its credentials.

        Raises:
            ClientRegistrationFailure: Any failure; no result is produced
        """
        if not self.settings.base_url:
            raise InvalidRegistrationRequest("No Viya services endpoint configured (SAS_SERVICES_ENDPOINT)")
        PayloadBuilder.validate(params)
        if params.grant_type == GrantType.AUTHORIZATION_CODE:
            # Fail before registering if the authorize URL cannot be built
            derive_authorize_host(self.settings.session_url, self.settings.hostname)

        bootstrap_token = BootstrapTokenSource.read(self.settings.token_file)

        with PlatformClient(
            timeout=self.settings.timeout,
            verify_ssl=self.settings.verify_ssl,
            transport=self.transport,
        ) as client:
            access_token = client.fetch_access_token(self.settings.base_url, bootstrap_token)
            request, payload = PayloadBuilder.build_bytes(params)
            logger.info("Registering client %s", request.client_id)
            body = client.register_client(self.settings.base_url, access_token, payload)

        ResponseInspector.check_registration(body)
        return self.finalize(request.client_id, request.client_secret, params.grant_type)

    def finalize(self, client_id: str, client_secret: str, grant_type: GrantType) -> ClientRegistrationResult:
        """Assemble the result of a confirmed registration."""
        authorize_url = None
        if grant_type == GrantType.AUTHORIZATION_CODE:
            host = derive_authorize_host(self.settings.session_url, self.settings.hostname)
            authorize_url = build_authorize_url(host, client_id)

        result = ClientRegistrationResult(
            client_id=client_id,
            client_secret=client_secret,
            grant_type=grant_type,
            authorize_url=authorize_url,
        )
        logger.info("Client %s registered (grant type %s)", client_id, grant_type.value)
        return result
