"""Interpretation of SAS Logon responses."""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from .exceptions import RegistrationError, TokenExchangeError
from .models import AccessTokenResponse, PlatformErrorResponse

logger = logging.getLogger(__name__)

ERROR_MARKER = '{"error":'


def _quoted_token_message(body: str) -> Optional[str]:
    """Second-to-last quoted token on the line holding the error marker.

    Used only when an error body is not valid JSON.
    """
    for line in body.splitlines():
        if ERROR_MARKER in line.replace(" ", ""):
            parts = line.split('"')
            if len(parts) >= 3:
                return parts[-2]
            return line.strip()
    return None


def _is_json(body: str) -> bool:
    try:
        json.loads(body)
    except (TypeError, ValueError):
        return False
    return True


def _last_string_value(document: dict) -> Optional[str]:
    last = None
    for value in document.values():
        if isinstance(value, str):
            last = value
    return last


class ResponseInspector:
    """Parses token-exchange responses and detects registration errors."""

    @staticmethod
    def extract_access_token(body: str) -> str:
        """Return the root ``access_token`` field of a JSON document.

        Raises:
            TokenExchangeError: If the body is not JSON or has no access token
        """
        try:
            data = json.loads(body)
        except (TypeError, ValueError) as e:
            raise TokenExchangeError(f"Token exchange response is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise TokenExchangeError("Token exchange response is not a JSON object")

        try:
            return AccessTokenResponse.model_validate(data).access_token
        except ValidationError as e:
            error = data.get("error_description") or data.get("error")
            detail = f": {error}" if error else ""
            raise TokenExchangeError(f"No access_token in token exchange response{detail}") from e

    @staticmethod
    def _error_document(body: str) -> Optional[dict]:
        # An error is a JSON object whose first key is a non-null "error"
        try:
            data: Any = json.loads(body)
        except (TypeError, ValueError):
            return None

        if not isinstance(data, dict) or not data:
            return None
        if next(iter(data)) != "error" or data["error"] is None:
            return None
        return data

    @classmethod
    def parse_error(cls, body: str) -> Optional[PlatformErrorResponse]:
        """Return the platform error object in ``body``, if it is one."""
        data = cls._error_document(body)
        if data is None:
            return None
        try:
            return PlatformErrorResponse.model_validate({**data, "error": str(data["error"])})
        except ValidationError:
            return None

    @classmethod
    def check_registration(cls, body: str) -> None:
        """Raise ``RegistrationError`` if ``body`` reports a registration failure.

        The message is the last string value of the error object in document
        order, which for
        ``{"error":"invalid_scope","error_description":"bad scope"}`` is
        ``bad scope``. Any other content counts as success.

        Raises:
            RegistrationError: With the message extracted from the response
        """
        data = cls._error_document(body)
        if data is not None:
            error = cls.parse_error(body)
            code = error.error if error else str(data["error"])
            message = _last_string_value(data) or code
            logger.debug("Registration rejected: error=%s", code)
            raise RegistrationError(message, error=code)

        if body.lstrip().replace(" ", "").startswith(ERROR_MARKER) and not _is_json(body):
            message = _quoted_token_message(body) or body.strip()
            raise RegistrationError(message)
