"""Pickup-time (time to first review) metric assembly.

This module combines readiness resolution, first-review selection and the
business-time calculator into one ``PickupMetric`` per pull request, and
collects those metrics for a batch of pull requests from a provider.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .business_time import business_seconds_between
from .github_client import GitHubClient
from .models import PickupMetric, PullRequestDescriptor, ReviewEvent, TimelineEvent
from .readiness import resolve_first_review_time, resolve_ready_time

logger = logging.getLogger(__name__)


def calculate_pickup_time(
    pr: PullRequestDescriptor,
    timeline_events: Iterable[TimelineEvent],
    review_events: Iterable[ReviewEvent],
    ignore_ready_after_review: bool = False,
) -> Optional[PickupMetric]:
    """Compute the time to first review for a single pull request.

    Business logic:
    - Ready time is the latest ``ready_for_review`` event, or PR creation for
      PRs that were never drafts.
    - First review time is the earliest submitted review.
    - Pickup time is the business-seconds duration between the two. A review
      that predates readiness yields ``0``.

    With ``ignore_ready_after_review`` enabled, ``ready_for_review`` events
    recorded after the first review are not taken into account.

    Returns ``None`` when the PR never became ready or has not been reviewed.

    Raises:
        DataValidationError: If the PR or any event lacks its timestamp.
    """
    first_review_time = resolve_first_review_time(review_events)
    if first_review_time is None:
        logger.debug("No reviews found for pull request", extra={"pr_number": pr.number})
        # Malformed timeline events fail even when there is no review.
        resolve_ready_time(pr, timeline_events)
        return None

    readiness = resolve_ready_time(
        pr,
        timeline_events,
        before=first_review_time if ignore_ready_after_review else None,
    )
    if readiness is None:
        return None

    return PickupMetric(
        repository=pr.repository,
        pr_number=pr.number,
        pr_url=pr.url,
        pr_creator=pr.author_login,
        target_branch=pr.target_branch,
        ready_time=readiness.ready_time,
        first_review_time=first_review_time,
        review_date=first_review_time.date(),
        pickup_time_seconds=business_seconds_between(readiness.ready_time, first_review_time),
        ready_event_type=readiness.event_type,
    )


def collect_pickup_metrics(
    github_client: GitHubClient,
    owner: str,
    repo: str,
    prs: List[PullRequestDescriptor],
    ignore_ready_after_review: bool = False,
) -> List[PickupMetric]:
    """Fetch events for each pull request and collect the resolvable pickup metrics.

    Pull requests without a metric (still draft, or not reviewed yet) are
    skipped and only counted in the summary log.
    """
    metrics: List[PickupMetric] = []
    prs_without_metric = 0

    for pr in prs:
        timeline_events = github_client.list_timeline_events(owner=owner, repo=repo, number=pr.number)
        review_events = github_client.list_reviews(owner=owner, repo=repo, number=pr.number)

        metric = calculate_pickup_time(
            pr,
            timeline_events,
            review_events,
            ignore_ready_after_review=ignore_ready_after_review,
        )
        if metric is None:
            prs_without_metric += 1
        else:
            metrics.append(metric)

    logger.info(
        "Collected pickup metrics",
        extra={
            "repository": f"{owner}/{repo}",
            "prs_total": len(prs),
            "metrics": len(metrics),
            "prs_without_metric": prs_without_metric,
        },
    )

    return metrics
