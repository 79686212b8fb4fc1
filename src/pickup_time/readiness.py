"""Resolution of the ready-for-review instant and the first review instant."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from .models import (
    READY_EVENT_PR_CREATION,
    READY_EVENT_READY_FOR_REVIEW,
    READY_FOR_REVIEW_EVENT,
    PullRequestDescriptor,
    Readiness,
    ReviewEvent,
    TimelineEvent,
)
from .timestamps import require_utc

logger = logging.getLogger(__name__)


def resolve_ready_time(
    pr: PullRequestDescriptor,
    timeline_events: Iterable[TimelineEvent],
    before: Optional[datetime] = None,
) -> Optional[Readiness]:
    """Resolve the instant the pull request most recently became ready for review.

    Business logic:
    - The latest ``ready_for_review`` timeline event wins, no matter how many
      ``convert_to_draft`` events came before or after it.
    - Without such an event a PR that is not a draft falls back to its
      creation time.
    - A draft PR without any ``ready_for_review`` event was never ready.

    The event log is authoritative: a PR still flagged as draft at fetch time
    is considered ready as of its latest ``ready_for_review`` event.

    When ``before`` is given, only ``ready_for_review`` events at or before that
    instant are considered.

    Returns ``None`` when the pull request has never become ready.

    Raises:
        DataValidationError: If the PR or a timeline event lacks its timestamp.
    """
    created_at = require_utc(pr.created_at, "created_at")
    cutoff = require_utc(before, "before") if before is not None else None

    latest_ready: Optional[datetime] = None
    for event in timeline_events:
        occurred_at = require_utc(event.occurred_at, "occurred_at")
        if event.kind != READY_FOR_REVIEW_EVENT:
            continue
        if cutoff is not None and occurred_at > cutoff:
            continue
        if latest_ready is None or occurred_at > latest_ready:
            latest_ready = occurred_at

    if latest_ready is not None:
        return Readiness(ready_time=latest_ready, event_type=READY_EVENT_READY_FOR_REVIEW)

    if not pr.is_draft:
        return Readiness(ready_time=created_at, event_type=READY_EVENT_PR_CREATION)

    logger.debug(
        "Pull request is a draft without ready_for_review events",
        extra={"pr_number": pr.number},
    )
    return None


def resolve_first_review_time(review_events: Iterable[ReviewEvent]) -> Optional[datetime]:
    """Return the earliest review submission instant, or ``None`` without reviews."""
    first_review: Optional[datetime] = None
    for review in review_events:
        submitted_at = require_utc(review.submitted_at, "submitted_at")
        if first_review is None or submitted_at < first_review:
            first_review = submitted_at
    return first_review
