"""Domain models for pull request pickup-time computation.

These dataclasses intentionally model only the subset of GitHub payload fields
that are required to resolve readiness, the first review and the resulting
metric record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

from .timestamps import format_timestamp

METRIC_TYPE_TIME_TO_FIRST_REVIEW = "time_to_first_review"

READY_FOR_REVIEW_EVENT = "ready_for_review"
CONVERT_TO_DRAFT_EVENT = "convert_to_draft"

READY_EVENT_PR_CREATION = "PR creation (not draft)"
READY_EVENT_READY_FOR_REVIEW = "ready_for_review event"


@dataclass(frozen=True, slots=True)
class PullRequestDescriptor:
    """Snapshot of a pull request as returned by the provider at fetch time."""

    number: int
    url: str
    created_at: datetime
    is_draft: bool
    author_login: str
    target_branch: str
    repository_owner: str
    repository_name: str

    @property
    def repository(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"


@dataclass(frozen=True, slots=True)
class TimelineEvent:
    """A pull request lifecycle event such as ``ready_for_review``."""

    kind: str
    occurred_at: datetime


@dataclass(frozen=True, slots=True)
class ReviewEvent:
    """A submitted pull request review."""

    submitted_at: datetime


@dataclass(frozen=True, slots=True)
class Readiness:
    """The instant a pull request became ready for review and where it came from."""

    ready_time: datetime
    event_type: str


@dataclass(frozen=True, slots=True)
class PickupMetric:
    """One time-to-first-review measurement for a single pull request."""

    repository: str
    pr_number: int
    pr_url: str
    pr_creator: str
    target_branch: str
    ready_time: datetime
    first_review_time: datetime
    review_date: date
    pickup_time_seconds: int
    ready_event_type: str
    metric_type: str = METRIC_TYPE_TIME_TO_FIRST_REVIEW

    def to_dict(self) -> Dict[str, Any]:
        """Render the metric as a JSON-serializable payload with camelCase keys."""
        return {
            "metricType": self.metric_type,
            "repository": self.repository,
            "prNumber": self.pr_number,
            "prUrl": self.pr_url,
            "prCreator": self.pr_creator,
            "targetBranch": self.target_branch,
            "readyTime": format_timestamp(self.ready_time),
            "firstReviewTime": format_timestamp(self.first_review_time),
            "reviewDate": self.review_date.isoformat(),
            "pickupTimeSeconds": self.pickup_time_seconds,
            "readyEventType": self.ready_event_type,
        }
