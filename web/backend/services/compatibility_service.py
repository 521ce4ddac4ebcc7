#!/usr/bin/env python3
"""
Compatibility service - ranks the roommate candidates of a property.

Loads profiles through the injected store, scores each candidate with the
pure scorer and applies the result policy (descending score, min_score,
top_k). Ranking is this service's concern, not the scorer's.
"""

import logging
import uuid
from typing import List, Optional

from core.compatibility import scorer
from core.compatibility.models import CompatibilityScore, RoommateProfile
from core.config_loader import CompatibilityWeights, ResultPolicy
from database.repositories.interfaces import RoommateProfileStore
from ..exceptions import ProfileNotFoundException

logger = logging.getLogger(__name__)


def apply_result_policy(
    results: List[CompatibilityScore],
    min_score: Optional[int] = None,
    top_k: Optional[int] = None
) -> List[CompatibilityScore]:
    """
    Sort by score descending (stable), drop scores below min_score, keep top_k.
    """
    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    if min_score is not None:
        ranked = [r for r in ranked if r.score >= min_score]
    if top_k is not None:
        ranked = ranked[:top_k]
    return ranked


class CompatibilityService:
    """Service for roommate compatibility scoring."""

    def __init__(
        self,
        profiles: RoommateProfileStore,
        weights: Optional[CompatibilityWeights] = None,
        policy: Optional[ResultPolicy] = None
    ):
        self.profiles = profiles
        self.weights = weights or CompatibilityWeights()
        self.policy = policy or ResultPolicy()

    def get_compatibility_scores(
        self,
        property_id: uuid.UUID,
        subject_profile_id: uuid.UUID,
        user_id: uuid.UUID,
        min_score: Optional[int] = None,
        top_k: Optional[int] = None
    ) -> List[CompatibilityScore]:
        """
        Score every other active roommate of a property against the caller.

        Args:
            property_id: Shared property the profiles belong to.
            subject_profile_id: Caller's own active profile on that property.
            user_id: Caller identity.
            min_score: Override of the policy's minimum score.
            top_k: Override of the policy's result limit.

        Returns:
            Ranked compatibility scores.

        Raises:
            ProfileNotFoundException: If the subject profile is missing,
                inactive, owned by someone else or on another property.
        """
        subject = self.profiles.get_by_id(subject_profile_id)
        if (
            subject is None
            or not subject.is_active
            or subject.user_id != user_id
            or subject.property_id != property_id
        ):
            raise ProfileNotFoundException(f"User profile {subject_profile_id} not found")

        candidates = self.profiles.list_active_for_property(property_id, exclude_user_id=user_id)
        results = [scorer.score(subject, candidate, self.weights) for candidate in candidates]

        ranked = apply_result_policy(
            results,
            min_score=min_score if min_score is not None else self.policy.min_score,
            top_k=top_k if top_k is not None else self.policy.top_k,
        )
        logger.info(
            f"Scored {len(results)} candidates for profile {subject_profile_id} "
            f"on property {property_id}, returning {len(ranked)}"
        )
        return ranked

    def score_pair(self, subject: RoommateProfile, candidate: RoommateProfile) -> CompatibilityScore:
        """Score two ad-hoc profiles without touching the store."""
        return scorer.score(subject, candidate, self.weights)
