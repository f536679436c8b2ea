"""Tests for reading the bootstrap token."""

from pathlib import Path

import pytest

from viya_client_register.bootstrap import BootstrapTokenSource, default_token_path
from viya_client_register.exceptions import CredentialUnavailable


class TestBootstrapTokenSource:
    """Test bootstrap token file handling."""

    def test_reads_and_strips_token(self, tmp_path):
        """Test the token is returned without surrounding whitespace."""
        path = tmp_path / "client.token"
        path.write_text("  abc-123\n\n")

        assert BootstrapTokenSource.read(path) == "abc-123"

    def test_accepts_string_path(self, token_file):
        """Test a str path works as well as a Path."""
        assert BootstrapTokenSource.read(str(token_file)).startswith("consul-")

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported as unavailable."""
        with pytest.raises(CredentialUnavailable, match="not found"):
            BootstrapTokenSource.read(tmp_path / "nope.token")

    def test_empty_file(self, tmp_path):
        """Test an empty or whitespace-only file is rejected."""
        path = tmp_path / "client.token"
        path.write_text("   \n")

        with pytest.raises(CredentialUnavailable, match="empty"):
            BootstrapTokenSource.read(path)

    def test_directory_is_unreadable(self, tmp_path):
        """Test a directory in place of the file is reported as unreadable."""
        with pytest.raises(CredentialUnavailable):
            BootstrapTokenSource.read(tmp_path)

    def test_undecodable_file(self, tmp_path):
        """Test binary garbage is reported as unreadable."""
        path = tmp_path / "client.token"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(CredentialUnavailable, match="Cannot read"):
            BootstrapTokenSource.read(path)


def test_default_token_path():
    """Test the Consul token location under a configuration root."""
    path = default_token_path("/opt/sas/viya/config")
    assert path == Path(
        "/opt/sas/viya/config/etc/SASSecurityCertificateFramework/tokens/consul/default/client.token"
    )
