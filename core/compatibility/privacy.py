#!/usr/bin/env python3
"""
Privacy Projection - what other users get to see of a roommate profile.

Visibility is a presentation concern: the scorer always works on the full
profile, only the outgoing view is masked.
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from core.compatibility.models import (
    CompatibilityPreferences,
    LifestylePreferences,
    RoommateProfile,
)


class RoommateProfileView(BaseModel):
    """Roommate profile as shown to a viewer; hidden fields are None."""
    id: Optional[uuid.UUID]
    user_id: uuid.UUID
    property_id: Optional[uuid.UUID]
    first_name: str
    last_name: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = None
    occupation: Optional[str] = None
    lifestyle: Optional[LifestylePreferences] = None
    compatibility: Optional[CompatibilityPreferences] = None
    move_in_date: Optional[date] = None
    move_out_date: Optional[date] = None
    is_active: bool = True
    is_owner: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _initial(name: str) -> str:
    return f"{name[0]}." if name else ""


def apply_privacy(profile: RoommateProfile, viewer_id: Optional[uuid.UUID]) -> RoommateProfileView:
    """
    Project a profile for a viewer.

    The owner sees everything. Anyone else sees only what the profile's
    privacy settings allow; a hidden full name keeps the first name and the
    last-name initial.
    """
    is_owner = viewer_id is not None and viewer_id == profile.user_id
    settings = profile.privacy_settings

    def visible(flag: bool) -> bool:
        return is_owner or flag

    return RoommateProfileView(
        id=profile.id,
        user_id=profile.user_id,
        property_id=profile.property_id,
        first_name=profile.first_name,
        last_name=profile.last_name if visible(settings.show_full_name) else _initial(profile.last_name),
        avatar=profile.avatar,
        bio=profile.bio if visible(settings.show_bio) else None,
        age=profile.age if visible(settings.show_age) else None,
        occupation=profile.occupation if visible(settings.show_occupation) else None,
        lifestyle=profile.lifestyle if visible(settings.show_lifestyle) else None,
        compatibility=profile.compatibility if visible(settings.show_compatibility) else None,
        move_in_date=profile.move_in_date,
        move_out_date=profile.move_out_date,
        is_active=profile.is_active,
        is_owner=is_owner,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )
