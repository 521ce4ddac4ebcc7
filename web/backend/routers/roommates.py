#!/usr/bin/env python3
"""
Roommate endpoints - profiles and shared room overview of a property.
"""

import uuid
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.compatibility.models import (
    MAX_AGE,
    MIN_AGE,
    Cleanliness,
    GuestPolicy,
    NoiseLevel,
    PetPreference,
    SleepSchedule,
    SmokingPreference,
    SocialLevel,
)
from ..dependencies import get_current_user_id, get_roommate_service
from ..services.roommate_service import RoommateService
from ..models.requests import (
    LifestyleUpdate,
    RoommateProfileCreate,
    RoommateProfileUpdate,
    RoommateSearchFilters,
)
from ..models.responses import (
    DeactivateProfileResponse,
    RoommateProfileResponse,
    RoommateProfilesResponse,
    SharedRoomInfoResponse,
)

logger = logging.getLogger(__name__)

properties_router = APIRouter(prefix="/api/properties", tags=["roommates"])
router = APIRouter(prefix="/api/roommates", tags=["roommates"])


@properties_router.post(
    "/{property_id}/roommates",
    response_model=RoommateProfileResponse,
    status_code=201
)
def create_roommate_profile(
    property_id: uuid.UUID,
    request: RoommateProfileCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    """
    Opt into roommate matching for a shared property.

    Fails when the property is not a shared room, has no free slot, or the
    caller already has an active profile there.
    """
    profile = service.create_profile(user_id, property_id, request)
    return RoommateProfileResponse(profile=profile)


@properties_router.get("/{property_id}/roommates", response_model=RoommateProfilesResponse)
def search_roommate_profiles(
    property_id: uuid.UUID,
    min_age: Optional[int] = Query(default=None, ge=MIN_AGE, le=MAX_AGE),
    max_age: Optional[int] = Query(default=None, ge=MIN_AGE, le=MAX_AGE),
    occupation: List[str] = Query(default=[], description="Repeat to match any of several"),
    move_in_from: Optional[date] = Query(default=None),
    move_in_to: Optional[date] = Query(default=None),
    sleep_schedule: Optional[SleepSchedule] = Query(default=None),
    cleanliness: Optional[Cleanliness] = Query(default=None),
    social_level: Optional[SocialLevel] = Query(default=None),
    noise_level: Optional[NoiseLevel] = Query(default=None),
    guest_policy: Optional[GuestPolicy] = Query(default=None),
    smoking_preference: Optional[SmokingPreference] = Query(default=None),
    pet_preference: Optional[PetPreference] = Query(default=None),
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    """
    Search the active roommate profiles of a property.

    Age and move-in bounds are inclusive; lifestyle params must all match.
    """
    filters = RoommateSearchFilters(
        min_age=min_age,
        max_age=max_age,
        occupations=occupation,
        move_in_from=move_in_from,
        move_in_to=move_in_to,
        lifestyle=LifestyleUpdate(
            sleep_schedule=sleep_schedule,
            cleanliness=cleanliness,
            social_level=social_level,
            noise_level=noise_level,
            guest_policy=guest_policy,
            smoking_preference=smoking_preference,
            pet_preference=pet_preference,
        ),
    )
    profiles = service.search_profiles(property_id, filters, user_id)
    return RoommateProfilesResponse(count=len(profiles), profiles=profiles)


@properties_router.get("/{property_id}/shared-room", response_model=SharedRoomInfoResponse)
def get_shared_room_info(
    property_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    """Slot overview of a shared property."""
    return service.get_shared_room_info(property_id, user_id)


@router.get("/{profile_id}", response_model=RoommateProfileResponse)
def get_roommate_profile(
    profile_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    return RoommateProfileResponse(profile=service.get_profile(profile_id, user_id))


@router.patch("/{profile_id}", response_model=RoommateProfileResponse)
def update_roommate_profile(
    profile_id: uuid.UUID,
    request: RoommateProfileUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    """
    Update the caller's own profile.

    Nested lifestyle, compatibility and privacy blocks are merged into the
    stored values; omitted fields stay unchanged.
    """
    profile = service.update_profile(profile_id, user_id, request)
    return RoommateProfileResponse(profile=profile)


@router.post("/{profile_id}/deactivate", response_model=DeactivateProfileResponse)
def deactivate_roommate_profile(
    profile_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    service: RoommateService = Depends(get_roommate_service)
):
    """Leave roommate matching; frees the slot for someone else."""
    profile = service.deactivate_profile(profile_id, user_id)
    logger.info(f"Deactivated roommate profile {profile_id}")
    return DeactivateProfileResponse(
        profile_id=profile_id,
        is_active=profile.is_active,
        move_out_date=profile.move_out_date
    )
