"""
Confidence Logic - Pure rules for the 1-4 confidence scale.

    1  new
    2  hard       (still due for review)
    3  known
    4  mastered
"""

import datetime
import math
from typing import Dict, Iterable, Optional


class ConfidenceLevel:
    NEW = 1
    HARD = 2
    KNOWN = 3
    MASTERED = 4

    LABELS = {
        NEW: 'New',
        HARD: 'Hard',
        KNOWN: 'Known',
        MASTERED: 'Mastered',
    }

    # Interval multiplier applied to ease * review count
    INTERVAL_FACTORS = {
        MASTERED: 1.0,
        KNOWN: 0.7,
        HARD: 0.5,
    }

    DEFAULT_EASE_FACTOR = 2.5


def is_new(confidence: int) -> bool:
    return confidence == ConfidenceLevel.NEW


def needs_review(confidence: int) -> bool:
    return confidence <= ConfidenceLevel.HARD


def is_mastered(confidence: int) -> bool:
    return confidence == ConfidenceLevel.MASTERED


def bucket_counts(confidences: Iterable[int]) -> Dict[str, int]:
    """Counts for the study overview. 'for_review' includes the new words."""
    counts = {'total': 0, 'new': 0, 'for_review': 0, 'mastered': 0}
    for confidence in confidences:
        counts['total'] += 1
        if is_new(confidence):
            counts['new'] += 1
        if needs_review(confidence):
            counts['for_review'] += 1
        if is_mastered(confidence):
            counts['mastered'] += 1
    return counts


def review_interval_days(
    confidence: int,
    review_count: int,
    ease_factor: float = ConfidenceLevel.DEFAULT_EASE_FACTOR,
) -> int:
    factor = ConfidenceLevel.INTERVAL_FACTORS.get(min(confidence, ConfidenceLevel.MASTERED))
    if factor is None:
        return 1
    return max(1, math.floor(ease_factor * review_count * factor))


def calculate_next_review(
    confidence: int,
    review_count: int,
    ease_factor: float = ConfidenceLevel.DEFAULT_EASE_FACTOR,
    now: Optional[datetime.datetime] = None,
) -> datetime.datetime:
    """Date of the next review: `now` plus review_interval_days()."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now + datetime.timedelta(days=review_interval_days(confidence, review_count, ease_factor))
