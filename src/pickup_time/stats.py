"""Statistics and formatting helpers for pickup-time reporting.

This module provides utilities for:
- Computing linear-interpolation percentiles from pre-sorted samples.
- Aggregating summary statistics (P50, P75, P90, count).
- Formatting second-based durations as ``HH:MM:SS``.
- Building a human-readable pickup-time report for a repository.
"""

from __future__ import annotations

import json
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, cast

from .models import READY_EVENT_PR_CREATION, READY_EVENT_READY_FOR_REVIEW, PickupMetric


def calculate_percentile(sorted_values: Sequence[float], p: float) -> Optional[float]:
    """Calculate a percentile using linear interpolation.

    The input sequence is expected to already be sorted in ascending order.

    Args:
        sorted_values: Sorted numeric samples.
        p: Percentile in the inclusive range ``[0, 100]``.

    Returns:
        Percentile value as ``float`` or ``None`` when input is empty.

    Raises:
        ValueError: If ``p`` is outside ``[0, 100]``.
    """
    if not 0 <= p <= 100:
        raise ValueError("Percentile 'p' must be in the range [0, 100].")

    if not sorted_values:
        return None

    if p <= 0:
        return float(sorted_values[0])

    if p >= 100:
        return float(sorted_values[-1])

    position = (len(sorted_values) - 1) * (p / 100.0)
    lower_index = math.floor(position)
    upper_index = math.ceil(position)

    if lower_index == upper_index:
        return float(sorted_values[int(position)])

    lower_value = sorted_values[lower_index]
    upper_value = sorted_values[upper_index]
    return lower_value + (upper_value - lower_value) * (position - lower_index)


def compute_statistics(samples: Sequence[Optional[float]]) -> Dict[str, Optional[float]]:
    """Compute P50, P75, P90, and sample count for duration samples.

    ``None``, NaN and negative values are ignored.

    Returns:
        Dictionary with keys ``p50``, ``p75``, ``p90``, and ``count``.
    """
    clean_samples = sorted(
        sample
        for sample in samples
        if sample is not None and not math.isnan(sample) and sample >= 0
    )

    return {
        "p50": calculate_percentile(clean_samples, 50),
        "p75": calculate_percentile(clean_samples, 75),
        "p90": calculate_percentile(clean_samples, 90),
        "count": cast(Optional[float], len(clean_samples)),
    }


def format_duration(seconds: Optional[float]) -> str:
    """Format seconds as ``HH:MM:SS``, or ``"n/a"`` when ``seconds`` is ``None``."""
    if seconds is None:
        return "n/a"

    total_seconds = int(round(seconds))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    remaining_seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{remaining_seconds:02d}"


def generate_report(repository: str, metrics: List[PickupMetric]) -> str:
    """Generate a human-readable pickup-time report for a repository.

    The report includes the sample count, P50/P75/P90 business-time pickup
    durations and how many ready times came from PR creation versus
    ``ready_for_review`` events.
    """
    stats = compute_statistics([float(metric.pickup_time_seconds) for metric in metrics])
    sources = Counter(metric.ready_event_type for metric in metrics)

    lines = [
        f"Repository: {repository}",
        "PR Pickup Time Report (time to first review, weekends excluded)",
        "",
        f"   Samples: {int(cast(float, stats['count']))}",
        f"   P50: {format_duration(stats['p50'])}",
        f"   P75: {format_duration(stats['p75'])}",
        f"   P90: {format_duration(stats['p90'])}",
        "",
        "Ready time source",
        f"   {READY_EVENT_PR_CREATION}: {sources[READY_EVENT_PR_CREATION]}",
        f"   {READY_EVENT_READY_FOR_REVIEW}: {sources[READY_EVENT_READY_FOR_REVIEW]}",
    ]

    return "\n".join(lines)


def render_json(metrics: List[PickupMetric]) -> str:
    """Render per-PR metric records as a JSON array."""
    return json.dumps([metric.to_dict() for metric in metrics], indent=2)
