"""Time to first review (pickup time) metrics for GitHub pull requests."""

from .business_time import business_seconds_between
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    DataValidationError,
    PickupTimeError,
)
from .models import PickupMetric, PullRequestDescriptor, Readiness, ReviewEvent, TimelineEvent
from .pickup import calculate_pickup_time
from .readiness import resolve_first_review_time, resolve_ready_time

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "DataValidationError",
    "PickupMetric",
    "PickupTimeError",
    "PullRequestDescriptor",
    "Readiness",
    "ReviewEvent",
    "TimelineEvent",
    "business_seconds_between",
    "calculate_pickup_time",
    "resolve_first_review_time",
    "resolve_ready_time",
]
