"""GitHub REST API client for pull request, review and timeline retrieval."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from .config import Config
from .errors import ApiError, AuthenticationError, DataValidationError
from .models import PullRequestDescriptor, ReviewEvent, TimelineEvent
from .timestamps import parse_timestamp

logger = logging.getLogger(__name__)


class GitHubClient:
    """Small, typed client for the GitHub pull request REST APIs."""

    _API_VERSION = "2022-11-28"
    _PAGE_SIZE = 100
    _MAX_RETRIES = 5
    _MAX_BACKOFF_SECONDS = 30

    def __init__(self, config: Config, timeout_seconds: int = 30) -> None:
        """Initialize an authenticated GitHub API client.

        Args:
            config: Validated runtime configuration including the token.
            timeout_seconds: Per-request timeout in seconds.
        """
        self._config = config
        self._timeout_seconds = timeout_seconds
        self._base_url = config.api_url

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.token}",
                "X-GitHub-Api-Version": self._API_VERSION,
            }
        )

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below the API root."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def _extract_backoff_seconds(self, response: requests.Response, attempt: int) -> int:
        """Compute exponential backoff seconds, honoring Retry-After when available."""
        retry_after_header = response.headers.get("Retry-After")
        if retry_after_header:
            try:
                retry_after_seconds = int(retry_after_header)
                return min(self._MAX_BACKOFF_SECONDS, max(1, retry_after_seconds))
            except ValueError:
                pass

        return min(self._MAX_BACKOFF_SECONDS, 2 ** (attempt - 1))

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a GET request with retry logic for 429/5xx responses.

        Raises:
            AuthenticationError: If GitHub rejects the token (HTTP 401).
            ApiError: If the request repeatedly fails, returns HTTP >= 400,
                or does not return valid JSON.
        """
        url = self._build_url(path)
        query = dict(params or {})

        last_error: Optional[Exception] = None

        for attempt in range(1, self._MAX_RETRIES + 1):
            try:
                response = self._session.get(url, params=query, timeout=self._timeout_seconds)
            except requests.RequestException as exc:
                last_error = exc
                if attempt == self._MAX_RETRIES:
                    raise ApiError(f"GitHub request failed after retries: GET {url}") from exc
                logger.warning(
                    "GitHub request raised, retrying",
                    extra={"url": url, "attempt": attempt, "error": str(exc)},
                )
                time.sleep(min(self._MAX_BACKOFF_SECONDS, 2 ** (attempt - 1)))
                continue

            status_code = response.status_code
            is_retryable = status_code == 429 or 500 <= status_code <= 599

            if is_retryable and attempt < self._MAX_RETRIES:
                logger.warning(
                    "GitHub returned a retryable status",
                    extra={"url": url, "attempt": attempt, "status_code": status_code},
                )
                time.sleep(self._extract_backoff_seconds(response, attempt))
                continue

            if status_code == 401:
                raise AuthenticationError("GitHub token is invalid or lacks the required scopes.")

            if status_code >= 400:
                raise ApiError(
                    "GitHub API request failed: "
                    f"GET {url} returned {status_code} - {response.text}"
                )

            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(f"GitHub API returned invalid JSON: GET {url}") from exc

        raise ApiError(f"GitHub request failed after retries: GET {url}") from last_error

    def _get_page(self, path: str, params: Dict[str, Any], page: int) -> List[Dict[str, Any]]:
        """Fetch one page of a list endpoint."""
        query = dict(params)
        query["per_page"] = self._PAGE_SIZE
        query["page"] = page

        payload = self._get_json(path, params=query)
        if not isinstance(payload, list):
            raise ApiError(f"GitHub API returned unexpected payload shape: GET {self._build_url(path)}")
        return payload

    def _get_paginated(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Fetch every page of a list endpoint until a short page is returned."""
        items: List[Dict[str, Any]] = []
        page = 1

        while True:
            page_items = self._get_page(path, dict(params or {}), page)
            items.extend(page_items)

            if len(page_items) < self._PAGE_SIZE:
                break

            page += 1

        return items

    def list_pull_requests(
        self,
        owner: str,
        repo: str,
        min_time: Optional[datetime] = None,
    ) -> List[PullRequestDescriptor]:
        """List pull requests for a repository, newest first.

        Always queries with ``state=all`` sorted by creation date descending.
        When ``min_time`` is provided, pull requests created before it are
        dropped and paging stops at the first page that reaches them.

        Raises:
            DataValidationError: If a pull request payload lacks required fields.
        """
        path = f"repos/{owner}/{repo}/pulls"
        params: Dict[str, Any] = {"state": "all", "sort": "created", "direction": "desc"}
        pull_requests: List[PullRequestDescriptor] = []
        page = 1

        while True:
            page_items = self._get_page(path, params, page)
            reached_min_time = False

            for item in page_items:
                pr = self._parse_pull_request(item, owner=owner, repo=repo)
                if min_time is not None and pr.created_at < min_time:
                    reached_min_time = True
                    continue
                pull_requests.append(pr)

            if reached_min_time or len(page_items) < self._PAGE_SIZE:
                break

            page += 1

        return pull_requests

    def _parse_pull_request(self, item: Dict[str, Any], owner: str, repo: str) -> PullRequestDescriptor:
        number = item.get("number")
        url = item.get("html_url")
        created_at = parse_timestamp(item.get("created_at"))

        if number is None or not url or created_at is None:
            raise DataValidationError(
                "GitHub pull request payload is missing required fields: "
                f"repository={owner}/{repo}, payload={item}"
            )

        user = item.get("user") or {}
        base = item.get("base") or {}
        base_repo = base.get("repo") or {}
        base_owner = base_repo.get("owner") or {}

        return PullRequestDescriptor(
            number=int(number),
            url=str(url),
            created_at=created_at,
            is_draft=bool(item.get("draft", False)),
            author_login=str(user.get("login") or ""),
            target_branch=str(base.get("ref") or ""),
            repository_owner=str(base_owner.get("login") or owner),
            repository_name=str(base_repo.get("name") or repo),
        )

    def list_reviews(self, owner: str, repo: str, number: int) -> List[ReviewEvent]:
        """List submitted reviews for a pull request; pending reviews are skipped."""
        reviews: List[ReviewEvent] = []

        for item in self._get_paginated(f"repos/{owner}/{repo}/pulls/{number}/reviews"):
            submitted_at = parse_timestamp(item.get("submitted_at"))
            if submitted_at is None:
                continue
            reviews.append(ReviewEvent(submitted_at=submitted_at))

        return reviews

    def list_timeline_events(self, owner: str, repo: str, number: int) -> List[TimelineEvent]:
        """List timeline events for a pull request.

        Items without an ``event`` name or without any timestamp (for example
        commits) are skipped.
        """
        events: List[TimelineEvent] = []

        for item in self._get_paginated(f"repos/{owner}/{repo}/issues/{number}/timeline"):
            kind = item.get("event")
            occurred_at = parse_timestamp(item.get("created_at") or item.get("submitted_at"))
            if not kind or occurred_at is None:
                continue
            events.append(TimelineEvent(kind=str(kind), occurred_at=occurred_at))

        return events
