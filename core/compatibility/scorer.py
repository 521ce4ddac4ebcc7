#!/usr/bin/env python3
"""
Compatibility Scorer - weighted comparison of two roommate profiles.

Pure and deterministic: no I/O, no shared state. The age axis uses the
subject's preferred range only, so score(a, b) and score(b, a) may differ.
"""

import logging
from typing import Optional

from core.config_loader import CompatibilityWeights
from core.compatibility.models import (
    CompatibilityAxis,
    CompatibilityScore,
    LIFESTYLE_AXES,
    RoommateProfile,
)
from core.compatibility.rules import is_hard_conflict

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100

DEFAULT_WEIGHTS = CompatibilityWeights()


def clamp_score(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, value))


def score(
    subject: RoommateProfile,
    candidate: RoommateProfile,
    weights: Optional[CompatibilityWeights] = None
) -> CompatibilityScore:
    """
    Score a candidate profile from the subject's point of view.

    Args:
        subject: Profile of the user looking for roommates
        candidate: Profile being evaluated
        weights: Point values; defaults to CompatibilityWeights()

    Returns:
        CompatibilityScore with the clamped score and the matching and
        conflicting axes in evaluation order.
    """
    weights = weights or DEFAULT_WEIGHTS

    total = weights.baseline
    matching = []
    conflicting = []

    for axis in LIFESTYLE_AXES:
        ours = getattr(subject.lifestyle, axis.value)
        theirs = getattr(candidate.lifestyle, axis.value)

        if ours == theirs:
            total += weights.lifestyle_match
            matching.append(axis.value)
        elif is_hard_conflict(axis, ours, theirs):
            total -= weights.hard_conflict
            conflicting.append(axis.value)
        else:
            total -= weights.soft_mismatch

    # Candidate without a stated age: axis skipped
    if candidate.age is not None:
        age_range = subject.compatibility.preferred_age_range
        if age_range.contains(candidate.age):
            total += weights.age_match
            matching.append(CompatibilityAxis.AGE_RANGE.value)
        else:
            total -= weights.age_conflict
            conflicting.append(CompatibilityAxis.AGE_RANGE.value)

    result = CompatibilityScore(
        user_id=candidate.user_id,
        score=clamp_score(total),
        matching_factors=matching,
        conflicting_factors=conflicting,
        profile_id=candidate.id,
    )
    logger.debug(
        f"Scored candidate {candidate.user_id}: raw={total} score={result.score} "
        f"matching={len(matching)} conflicting={len(conflicting)}"
    )
    return result
