"""Configuration parsing and validation for the GitHub PR pickup-time generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import AuthenticationError, ConfigurationError

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by the pickup-time generator."""

    owner: str
    repo: str
    days: Optional[int]
    token: str
    api_url: str = DEFAULT_API_URL
    ignore_ready_after_review: bool = False

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def load_config(
    repository: str,
    days: Optional[int],
    ignore_ready_after_review: bool = False,
) -> Config:
    """Build and validate application configuration.

    Args:
        repository: GitHub repository in ``OWNER/NAME`` form.
        days: Positive number of days of history to query, or ``None`` for all.
        ignore_ready_after_review: Skip ``ready_for_review`` events recorded
            after the first review when resolving ready time.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If ``repository`` is malformed or ``days`` is not
            greater than ``0``.
        AuthenticationError: If ``GITHUB_TOKEN`` is not configured.
    """
    owner, _, repo = repository.strip().partition("/")
    if not owner or not repo or "/" in repo:
        raise ConfigurationError(
            f"Invalid value for 'repository': expected 'OWNER/NAME', got {repository!r}."
        )

    if days is not None and days <= 0:
        raise ConfigurationError("Invalid value for 'days': expected an integer greater than 0.")

    token: str = os.getenv("GITHUB_TOKEN", "").strip()
    if not token:
        raise AuthenticationError(
            "Missing required GitHub token. "
            "Set the 'GITHUB_TOKEN' environment variable before running the generator."
        )

    api_url = os.getenv("GITHUB_API_URL", "").strip() or DEFAULT_API_URL

    return Config(
        owner=owner,
        repo=repo,
        days=days,
        token=token,
        api_url=api_url.rstrip("/"),
        ignore_ready_after_review=ignore_ready_after_review,
    )
