#!/usr/bin/env python3
"""
Hard Conflict Rules - lifestyle mismatches treated as strong negatives.

Only smoking and pet preferences are hard axes. Every other difference is a
soft mismatch.
"""

from typing import Any, Dict, FrozenSet

from core.compatibility.models import (
    CompatibilityAxis,
    SmokingPreference,
    PetPreference,
)


def _pairs(*pairs) -> FrozenSet[FrozenSet[Any]]:
    return frozenset(frozenset(p) for p in pairs)


# Unordered value pairs in direct conflict, per hard axis
HARD_CONFLICTS: Dict[CompatibilityAxis, FrozenSet[FrozenSet[Any]]] = {
    CompatibilityAxis.SMOKING_PREFERENCE: _pairs(
        (SmokingPreference.NON_SMOKER, SmokingPreference.SMOKER),
    ),
    CompatibilityAxis.PET_PREFERENCE: _pairs(
        (PetPreference.NO_PETS, PetPreference.CATS_ONLY),
        (PetPreference.NO_PETS, PetPreference.DOGS_ONLY),
        (PetPreference.NO_PETS, PetPreference.ANY_PETS),
        (PetPreference.CATS_ONLY, PetPreference.DOGS_ONLY),
    ),
}


def is_hard_axis(axis: CompatibilityAxis) -> bool:
    return axis in HARD_CONFLICTS


def is_hard_conflict(axis: CompatibilityAxis, a: Any, b: Any) -> bool:
    """True if values a and b are in direct conflict on a hard axis."""
    conflicts = HARD_CONFLICTS.get(axis)
    if not conflicts or a == b:
        return False
    return frozenset((a, b)) in conflicts
