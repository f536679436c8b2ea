"""Writing registered client credentials to the caller's output target."""

import json
import logging
import os
from pathlib import Path
from typing import Union

from dotenv import set_key

from .models import ClientRegistrationResult

logger = logging.getLogger(__name__)

CLIENT_ID_KEY = "VIYA_CLIENT_ID"
CLIENT_SECRET_KEY = "VIYA_CLIENT_SECRET"


def write_result(result: ClientRegistrationResult, target: Union[str, Path]) -> Path:
    """Store the client id/secret pair in ``target``.

    A ``.json`` target receives ``{"client_id": ..., "client_secret": ...}``;
    any other path is treated as a .env file and gets ``VIYA_CLIENT_ID`` and
    ``VIYA_CLIENT_SECRET`` entries.

    Args:
        result: Successful registration result
        target: Output file path

    Returns:
        The path written
    """
    path = Path(target)
    if not path.exists():
        path.touch(mode=0o600)
    if path.suffix.lower() == ".json":
        path.write_text(json.dumps(result.record(), indent=2) + "\n", encoding="utf-8")
    else:
        set_key(str(path), CLIENT_ID_KEY, result.client_id)
        set_key(str(path), CLIENT_SECRET_KEY, result.client_secret)
    # set_key may replace the file, so reapply owner-only mode
    os.chmod(path, 0o600)
    logger.info("Wrote client credentials to %s", path)
    return path
