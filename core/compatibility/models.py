#!/usr/bin/env python3
"""
Roommate Profile Models - closed preference types and scoring results.

Lifestyle, compatibility and privacy preferences are validated here, at the
profile-write boundary, so the scorer can treat every profile as well formed.
"""

import uuid
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_AGE = 18
MAX_AGE = 100


class SleepSchedule(str, Enum):
    EARLY = "early"
    NORMAL = "normal"
    LATE = "late"


class Cleanliness(str, Enum):
    VERY_CLEAN = "very_clean"
    CLEAN = "clean"
    MODERATE = "moderate"
    RELAXED = "relaxed"


class SocialLevel(str, Enum):
    VERY_SOCIAL = "very_social"
    SOCIAL = "social"
    MODERATE = "moderate"
    PRIVATE = "private"


class NoiseLevel(str, Enum):
    QUIET = "quiet"
    MODERATE = "moderate"
    LIVELY = "lively"


class GuestPolicy(str, Enum):
    NO_GUESTS = "no_guests"
    OCCASIONAL = "occasional"
    FREQUENT = "frequent"
    ANYTIME = "anytime"


class SmokingPreference(str, Enum):
    NON_SMOKER = "non_smoker"
    OUTDOOR_ONLY = "outdoor_only"
    SMOKER = "smoker"


class PetPreference(str, Enum):
    NO_PETS = "no_pets"
    CATS_ONLY = "cats_only"
    DOGS_ONLY = "dogs_only"
    ANY_PETS = "any_pets"


class PreferredGender(str, Enum):
    ANY = "any"
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non_binary"


class CompatibilityAxis(str, Enum):
    """Factor labels reported in CompatibilityScore, in evaluation order."""
    SLEEP_SCHEDULE = "sleep_schedule"
    CLEANLINESS = "cleanliness"
    SOCIAL_LEVEL = "social_level"
    NOISE_LEVEL = "noise_level"
    GUEST_POLICY = "guest_policy"
    SMOKING_PREFERENCE = "smoking_preference"
    PET_PREFERENCE = "pet_preference"
    AGE_RANGE = "age_range"


LIFESTYLE_AXES = (
    CompatibilityAxis.SLEEP_SCHEDULE,
    CompatibilityAxis.CLEANLINESS,
    CompatibilityAxis.SOCIAL_LEVEL,
    CompatibilityAxis.NOISE_LEVEL,
    CompatibilityAxis.GUEST_POLICY,
    CompatibilityAxis.SMOKING_PREFERENCE,
    CompatibilityAxis.PET_PREFERENCE,
)


class LifestylePreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    sleep_schedule: SleepSchedule
    cleanliness: Cleanliness
    social_level: SocialLevel
    noise_level: NoiseLevel
    guest_policy: GuestPolicy
    smoking_preference: SmokingPreference
    pet_preference: PetPreference


class AgeRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int = Field(MIN_AGE, ge=MIN_AGE, le=MAX_AGE)
    max: int = Field(MAX_AGE, ge=MIN_AGE, le=MAX_AGE)

    @model_validator(mode="after")
    def _check_order(self) -> "AgeRange":
        if self.min > self.max:
            raise ValueError(f"age range min ({self.min}) must not exceed max ({self.max})")
        return self

    def contains(self, age: int) -> bool:
        return self.min <= age <= self.max


class CompatibilityPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    preferred_age_range: AgeRange = Field(default_factory=AgeRange)
    preferred_gender: PreferredGender = PreferredGender.ANY
    preferred_occupations: List[str] = Field(default_factory=list)
    deal_breakers: List[str] = Field(default_factory=list)
    important_qualities: List[str] = Field(default_factory=list)


class PrivacySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_full_name: bool = True
    show_age: bool = True
    show_occupation: bool = True
    show_bio: bool = True
    show_lifestyle: bool = True
    show_compatibility: bool = False
    show_contact_info: bool = False


class RoommateProfile(BaseModel):
    """A user's roommate-seeker profile for one shared property."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[uuid.UUID] = None
    user_id: uuid.UUID
    property_id: Optional[uuid.UUID] = None

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    avatar: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    occupation: Optional[str] = None

    lifestyle: LifestylePreferences
    compatibility: CompatibilityPreferences = Field(default_factory=CompatibilityPreferences)
    privacy_settings: PrivacySettings = Field(default_factory=PrivacySettings)

    move_in_date: Optional[date] = None
    move_out_date: Optional[date] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_move_dates(self) -> "RoommateProfile":
        if self.move_in_date and self.move_out_date and self.move_out_date < self.move_in_date:
            raise ValueError("move_out_date must not be before move_in_date")
        return self


@dataclass
class CompatibilityScore:
    """Result of comparing a subject profile against one candidate."""
    user_id: uuid.UUID
    score: int = 0
    matching_factors: List[str] = field(default_factory=list)
    conflicting_factors: List[str] = field(default_factory=list)
    profile_id: Optional[uuid.UUID] = None
