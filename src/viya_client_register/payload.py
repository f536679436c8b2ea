"""Construction of the SAS Logon client registration payload."""

import logging
import re
import secrets
from typing import Iterable, List, Optional, Tuple, Union

from .exceptions import InvalidRegistrationRequest
from .models import ClientRegistrationRequest, RegistrationParameters
from .sanitizer import redact_payload

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = ["openid"]

# 8 random bytes render as 16 hex characters
GENERATED_SUFFIX_BYTES = 8

_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


def parse_list(value: Union[str, Iterable[str], None]) -> List[str]:
    """Split a caller value into an ordered list without duplicates.

    Strings are split on whitespace and commas, so ``"openid profile"`` and
    ``"openid,profile"`` give the same result.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = re.split(r"[\s,]+", value)
    else:
        items = [part for item in value for part in re.split(r"[\s,]+", item)]

    ordered: List[str] = []
    for item in items:
        if item and item not in ordered:
            ordered.append(item)
    return ordered


def parse_autoapprove(value: Optional[str]) -> Optional[Union[bool, List[str]]]:
    """Interpret an ``autoapprove`` argument as a boolean or a scope list."""
    if value is None or not value.strip():
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return parse_list(value)


def generate_client_credentials() -> Tuple[str, str]:
    """Generate a fresh ``(client_id, client_secret)`` pair.

    The two values come from independent random draws.
    """
    client_id = "client_" + secrets.token_hex(GENERATED_SUFFIX_BYTES)
    client_secret = "secret_" + secrets.token_hex(GENERATED_SUFFIX_BYTES)
    return client_id, client_secret


class PayloadBuilder:
    """Turns caller parameters into a ``ClientRegistrationRequest``."""

    @staticmethod
    def validate(params: RegistrationParameters) -> None:
        """Check ``params`` without generating anything.

        Raises:
            InvalidRegistrationRequest: If only one of id/secret is supplied
                or a validity override is negative
        """
        if bool(params.client_id) != bool(params.client_secret):
            raise InvalidRegistrationRequest(
                "client_id and client_secret must be supplied together or both left empty"
            )

        for label, value in (
            ("access_token_validity", params.access_token_validity),
            ("refresh_token_validity", params.refresh_token_validity),
        ):
            if value is not None and value < 0:
                raise InvalidRegistrationRequest(f"{label} must not be negative: {value}")

    @classmethod
    def build(cls, params: RegistrationParameters) -> ClientRegistrationRequest:
        """Apply defaulting and conditional-field rules to ``params``.

        Args:
            params: Caller-supplied registration parameters

        Returns:
            The request model ready to be serialized

        Raises:
            InvalidRegistrationRequest: If ``params`` fail ``validate``
        """
        cls.validate(params)

        if params.client_id:
            client_id, client_secret = params.client_id, params.client_secret
        else:
            client_id, client_secret = generate_client_credentials()
            logger.info("Generated client id %s", client_id)

        scopes = parse_list(params.scopes) or list(DEFAULT_SCOPES)
        grant_types = parse_list(params.authorized_grant_types) or [params.grant_type.value]
        groups = parse_list(params.required_user_groups)

        autoapprove = params.autoapprove
        if isinstance(autoapprove, list):
            autoapprove = parse_list(autoapprove) or None

        request = ClientRegistrationRequest(
            client_id=client_id,
            client_secret=client_secret,
            name=params.client_name or None,
            scopes=scopes,
            authorized_grant_types=grant_types,
            required_user_groups=groups or None,
            autoapprove=autoapprove,
            use_session=params.use_session,
            access_token_validity_seconds=params.access_token_validity,
            refresh_token_validity_seconds=params.refresh_token_validity,
        )
        logger.debug(
            "Registration payload: %s",
            redact_payload(request.model_dump(by_alias=True, exclude_none=True)),
        )
        return request

    @classmethod
    def build_bytes(cls, params: RegistrationParameters) -> Tuple[ClientRegistrationRequest, bytes]:
        """Build the request and return ``(request, serialized_bytes)``."""
        request = cls.build(params)
        return request, request.to_json_bytes()
