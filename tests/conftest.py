"""Pytest fixtures for SAS Logon client registration tests."""

import logging
from typing import Callable

import pytest

from tests.support import BASE_URL, BOOTSTRAP_TOKEN, FakeSASLogon
from viya_client_register.config import Settings


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so later tests don't log to closed streams."""
    yield
    logger = logging.getLogger("viya_client_register")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


ENV_KEYS = [
    "SAS_SERVICES_ENDPOINT",
    "SAS_CONFIG_ROOT",
    "CONSUL_TOKEN_FILE",
    "SAS_SESSION_URL",
    "VIYA_HOSTNAME",
    "HTTP_TIMEOUT",
    "VERIFY_SSL",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Empty registration environment and a working directory without .env."""
    for key in ENV_KEYS:
        # setenv first so values loaded from .env files are undone as well
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def token_file(tmp_path):
    """Bootstrap token file holding BOOTSTRAP_TOKEN."""
    path = tmp_path / "client.token"
    path.write_text(BOOTSTRAP_TOKEN + "\n")
    return path


@pytest.fixture
def settings(token_file) -> Settings:
    """Settings pointing at the fake platform with no session URL."""
    return Settings(
        base_url=BASE_URL,
        token_file=token_file,
        session_url=None,
        hostname="viya.example.com",
        timeout=5.0,
    )


@pytest.fixture
def fake_logon() -> FakeSASLogon:
    return FakeSASLogon()


@pytest.fixture
def make_logon() -> Callable[..., FakeSASLogon]:
    """Factory for a fake platform with custom responses."""
    return FakeSASLogon
