"""Viya Client Register - OAuth client registration for SAS Logon.

This package registers OAuth2 clients with the SAS Viya identity service,
using the Consul bootstrap token to obtain an administrative access token.
"""

__version__ = "0.1.0"

from .bootstrap import BootstrapTokenSource
from .client import PlatformClient
from .config import Settings
from .exceptions import (
    ClientRegistrationFailure,
    ConfigurationError,
    CredentialUnavailable,
    InvalidRegistrationRequest,
    RegistrationError,
    RegistrationTransportError,
    TokenExchangeError,
)
from .inspector import ResponseInspector
from .models import (
    ClientRegistrationRequest,
    ClientRegistrationResult,
    GrantType,
    RegistrationParameters,
)
from .orchestrator import RegistrationOrchestrator
from .payload import PayloadBuilder

__all__ = [
    "BootstrapTokenSource",
    "PlatformClient",
    "Settings",
    "ClientRegistrationFailure",
    "ConfigurationError",
    "CredentialUnavailable",
    "InvalidRegistrationRequest",
    "RegistrationError",
    "RegistrationTransportError",
    "TokenExchangeError",
    "ResponseInspector",
    "ClientRegistrationRequest",
    "ClientRegistrationResult",
    "GrantType",
    "RegistrationParameters",
    "RegistrationOrchestrator",
    "PayloadBuilder",
]
