"""Exceptions raised while registering an OAuth client with SAS Logon."""

from typing import Optional


class ClientRegistrationFailure(Exception):
    """Base class for every failure that aborts a client registration."""
    pass


class CredentialUnavailable(ClientRegistrationFailure):
    """Raised when the bootstrap token file is missing, unreadable or empty."""
    pass


class TokenExchangeError(ClientRegistrationFailure):
    """Raised when no access token could be obtained from SAS Logon."""
    pass


class RegistrationTransportError(ClientRegistrationFailure):
    """Raised when the registration request never got a response."""
    pass


class InvalidRegistrationRequest(ClientRegistrationFailure, ValueError):
    """Raised when caller parameters cannot form a valid registration request."""
    pass


class RegistrationError(ClientRegistrationFailure):
    """Raised when SAS Logon explicitly rejects the registration.

    Attributes:
        message: Human-readable message extracted from the error response
        error: Platform error code (e.g. ``invalid_scope``) when known
    """

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error


class ConfigurationError(ClientRegistrationFailure, ValueError):
    """Raised when an environment setting has an unusable value."""
    pass
