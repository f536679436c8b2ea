"""Masking of tokens and secrets for log output.

Bootstrap tokens, access tokens and client secrets must never reach the logs
in clear text. Everything logged about them goes through this module.
"""

from typing import Any, Dict

REDACT_FIELDS = {"client_secret", "password", "x-consul-token"}

MASK_FIELDS = {"access_token", "refresh_token", "authorization"}


def mask_token(token: str, preview_length: int = 6) -> str:
    """Mask a token showing only the first N and last 4 characters.

    Args:
        token: Token to mask
        preview_length: Number of characters to show at start

    Returns:
        Masked token string
    """
    if not token:
        return "***EMPTY***"

    if len(token) <= (preview_length + 8):
        return f"***{len(token)}_chars***"

    return f"{token[:preview_length]}...{token[-4:]}"


def redact_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a request/response document with secret fields hidden."""
    sanitized = {}
    for key, value in data.items():
        lowered = key.lower()
        if lowered in REDACT_FIELDS:
            sanitized[key] = "***REDACTED***"
        elif lowered in MASK_FIELDS and isinstance(value, str):
            sanitized[key] = mask_token(value)
        else:
            sanitized[key] = value
    return sanitized


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Hide the bootstrap token and bearer credentials in a header mapping."""
    sanitized = {}
    for key, value in headers.items():
        lowered = key.lower()
        if lowered == "x-consul-token":
            sanitized[key] = "***REDACTED***"
        elif lowered == "authorization":
            scheme, _, token = value.partition(" ")
            sanitized[key] = f"{scheme} {mask_token(token)}" if token else "***"
        else:
            sanitized[key] = value
    return sanitized
