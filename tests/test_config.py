"""Tests for configuration loading and validation."""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pickup_time.config import DEFAULT_API_URL, load_config
from pickup_time.errors import AuthenticationError, ConfigurationError


def test_load_config_reads_token_and_splits_repository(monkeypatch):
    """Verify a valid repository and token produce a complete configuration."""
    monkeypatch.setenv("GITHUB_TOKEN", " secret ")
    monkeypatch.delenv("GITHUB_API_URL", raising=False)

    config = load_config(repository="octo/widgets", days=14)

    assert config.owner == "octo"
    assert config.repo == "widgets"
    assert config.repository == "octo/widgets"
    assert config.days == 14
    assert config.token == "secret"
    assert config.api_url == DEFAULT_API_URL
    assert config.ignore_ready_after_review is False


def test_load_config_honors_api_url_override(monkeypatch):
    """Verify GitHub Enterprise API roots can be configured."""
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")

    config = load_config(repository="octo/widgets", days=None, ignore_ready_after_review=True)

    assert config.api_url == "https://ghe.example.com/api/v3"
    assert config.days is None
    assert config.ignore_ready_after_review is True


@pytest.mark.parametrize("repository", ["widgets", "octo/", "/widgets", "octo/widgets/extra"])
def test_load_config_rejects_malformed_repository(monkeypatch, repository):
    """Verify repositories must be given as OWNER/NAME."""
    monkeypatch.setenv("GITHUB_TOKEN", "secret")

    with pytest.raises(ConfigurationError):
        load_config(repository=repository, days=None)


def test_load_config_rejects_non_positive_days(monkeypatch):
    """Verify the lookback window must be positive."""
    monkeypatch.setenv("GITHUB_TOKEN", "secret")

    with pytest.raises(ConfigurationError):
        load_config(repository="octo/widgets", days=0)


def test_load_config_missing_token_raises_authentication_error(monkeypatch):
    """Verify a missing GITHUB_TOKEN is an authentication failure."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(AuthenticationError):
        load_config(repository="octo/widgets", days=None)
