#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

import uuid
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.compatibility.privacy import RoommateProfileView


class CompatibilityScoreResponse(BaseModel):
    """Compatibility of one candidate from the subject's point of view."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "550e8400-e29b-41d4-a716-446655440000",
                "profile_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "score": 45,
                "matching_factors": ["sleep_schedule", "cleanliness", "pet_preference"],
                "conflicting_factors": ["smoking_preference", "age_range"]
            }
        }
    )

    user_id: uuid.UUID
    profile_id: Optional[uuid.UUID] = None
    score: int = Field(ge=0, le=100)
    matching_factors: List[str] = Field(default_factory=list)
    conflicting_factors: List[str] = Field(default_factory=list)


class CompatibilityScoresResponse(BaseModel):
    """Ranked compatibility scores for a property."""
    success: bool = True
    property_id: uuid.UUID
    subject_profile_id: uuid.UUID
    count: int
    scores: List[CompatibilityScoreResponse]


class RoommateProfileResponse(BaseModel):
    success: bool = True
    profile: RoommateProfileView


class RoommateProfilesResponse(BaseModel):
    success: bool = True
    count: int
    profiles: List[RoommateProfileView]


class DeactivateProfileResponse(BaseModel):
    success: bool = True
    profile_id: uuid.UUID
    is_active: bool
    move_out_date: Optional[date] = None


class RoommateSlotResponse(BaseModel):
    id: str
    property_id: uuid.UUID
    slot_number: int
    is_occupied: bool
    roommate_profile: Optional[RoommateProfileView] = None
    available_from: Optional[date] = None
    available_until: Optional[date] = None


class SharedRoomInfoResponse(BaseModel):
    success: bool = True
    property_id: uuid.UUID
    total_slots: int
    occupied_slots: int
    available_slots: int
    roommate_slots: List[RoommateSlotResponse]
    room_rules: List[str] = Field(default_factory=list)
    shared_amenities: List[str] = Field(default_factory=list)
