#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from core.compatibility.models import (
    MAX_AGE,
    MIN_AGE,
    AgeRange,
    Cleanliness,
    CompatibilityPreferences,
    GuestPolicy,
    LifestylePreferences,
    NoiseLevel,
    PetPreference,
    PreferredGender,
    PrivacySettings,
    RoommateProfile,
    SleepSchedule,
    SmokingPreference,
    SocialLevel,
)


class RoommateProfileCreate(BaseModel):
    """Request to opt into roommate matching for a shared property."""
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    avatar: Optional[str] = Field(None, description="Avatar URL from the storage service")
    bio: Optional[str] = None
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    occupation: Optional[str] = None
    lifestyle: LifestylePreferences
    compatibility: CompatibilityPreferences = Field(default_factory=CompatibilityPreferences)
    privacy_settings: PrivacySettings = Field(default_factory=PrivacySettings)
    move_in_date: Optional[date] = Field(None, description="Defaults to today")


class LifestyleUpdate(BaseModel):
    sleep_schedule: Optional[SleepSchedule] = None
    cleanliness: Optional[Cleanliness] = None
    social_level: Optional[SocialLevel] = None
    noise_level: Optional[NoiseLevel] = None
    guest_policy: Optional[GuestPolicy] = None
    smoking_preference: Optional[SmokingPreference] = None
    pet_preference: Optional[PetPreference] = None


class CompatibilityUpdate(BaseModel):
    preferred_age_range: Optional[AgeRange] = None
    preferred_gender: Optional[PreferredGender] = None
    preferred_occupations: Optional[List[str]] = None
    deal_breakers: Optional[List[str]] = None
    important_qualities: Optional[List[str]] = None


class PrivacyUpdate(BaseModel):
    show_full_name: Optional[bool] = None
    show_age: Optional[bool] = None
    show_occupation: Optional[bool] = None
    show_bio: Optional[bool] = None
    show_lifestyle: Optional[bool] = None
    show_compatibility: Optional[bool] = None
    show_contact_info: Optional[bool] = None


class RoommateProfileUpdate(BaseModel):
    """
    Partial profile update. Nested preference blocks are merged field by
    field into the stored values.
    """
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    avatar: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    occupation: Optional[str] = None
    lifestyle: Optional[LifestyleUpdate] = None
    compatibility: Optional[CompatibilityUpdate] = None
    privacy_settings: Optional[PrivacyUpdate] = None
    move_in_date: Optional[date] = None
    move_out_date: Optional[date] = None


class RoommateSearchFilters(BaseModel):
    """Filters for searching the roommate profiles of a property."""
    min_age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    max_age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    occupations: List[str] = Field(default_factory=list)
    move_in_from: Optional[date] = None
    move_in_to: Optional[date] = None
    lifestyle: LifestyleUpdate = Field(default_factory=LifestyleUpdate)


class ScorePairRequest(BaseModel):
    """Two ad-hoc profiles to compare; nothing is persisted."""
    subject: RoommateProfile
    candidate: RoommateProfile
