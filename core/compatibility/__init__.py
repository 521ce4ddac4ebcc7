#!/usr/bin/env python3
"""
Compatibility Module - roommate profile types and rule-based scoring.

Public API:
- score: Compare a subject profile against a candidate profile
- RoommateProfile: Validated roommate profile
- CompatibilityScore: Dataclass for scoring results
- apply_privacy: Project a profile for another viewer

Modules:
- models.py: Closed preference enums, profile models, CompatibilityScore
- rules.py: Hard conflict rules for the smoking and pet axes
- scorer.py: Weighted attribute comparison
- privacy.py: Privacy-settings projection for presentation
"""

from core.compatibility.models import (
    AgeRange,
    CompatibilityAxis,
    CompatibilityPreferences,
    CompatibilityScore,
    LifestylePreferences,
    PrivacySettings,
    RoommateProfile,
)
from core.compatibility.privacy import RoommateProfileView, apply_privacy
from core.compatibility.scorer import score

__all__ = [
    'AgeRange',
    'CompatibilityAxis',
    'CompatibilityPreferences',
    'CompatibilityScore',
    'LifestylePreferences',
    'PrivacySettings',
    'RoommateProfile',
    'RoommateProfileView',
    'apply_privacy',
    'score',
]
