#!/usr/bin/env python3
"""
Roommate service - business logic for roommate profile operations.
"""

import logging
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from core.compatibility.models import RoommateProfile
from core.compatibility.privacy import RoommateProfileView, apply_privacy
from database.repositories.interfaces import PropertyStore, RoommateProfileStore
from ..exceptions import (
    DuplicateProfileException,
    InvalidProfileException,
    ProfileNotFoundException,
    PropertyNotFoundException,
    PropertyNotSharedException,
    RoomAtCapacityException,
)
from ..models.requests import (
    RoommateProfileCreate,
    RoommateProfileUpdate,
    RoommateSearchFilters,
)
from ..models.responses import RoommateSlotResponse, SharedRoomInfoResponse

logger = logging.getLogger(__name__)

SHARED_ROOM_TYPE = "shared"

_NESTED_FIELDS = ('lifestyle', 'compatibility', 'privacy_settings')


class RoommateService:
    """Service for managing roommate profiles of shared properties."""

    def __init__(self, profiles: RoommateProfileStore, properties: PropertyStore):
        self.profiles = profiles
        self.properties = properties

    def create_profile(
        self,
        user_id: uuid.UUID,
        property_id: uuid.UUID,
        data: RoommateProfileCreate
    ) -> RoommateProfileView:
        """
        Create an active roommate profile for a shared property.

        Raises:
            PropertyNotFoundException: If the property does not exist.
            PropertyNotSharedException: If the property is not a shared room.
            RoomAtCapacityException: If every slot is taken.
            DuplicateProfileException: If the user already has an active profile there.
        """
        prop = self._get_shared_property(property_id)

        if self.profiles.get_active_for_user(user_id, property_id):
            raise DuplicateProfileException(
                f"Roommate profile already exists for property {property_id}"
            )

        occupied = self.profiles.count_active_for_property(property_id)
        if occupied >= prop.max_occupancy:
            raise RoomAtCapacityException(
                f"Room is at full capacity ({occupied}/{prop.max_occupancy})"
            )

        fields = data.model_dump()
        fields['move_in_date'] = data.move_in_date or date.today()
        profile = RoommateProfile(user_id=user_id, property_id=property_id, **fields)

        try:
            created = self.profiles.add(profile)
            self.profiles.commit()
        except IntegrityError:
            # Lost a race against a concurrent create for the same user
            self.profiles.rollback()
            raise DuplicateProfileException(
                f"Roommate profile already exists for property {property_id}"
            )
        logger.info(f"User {user_id} joined roommate matching for property {property_id}")
        return apply_privacy(created, user_id)

    def get_profile(self, profile_id: uuid.UUID, viewer_id: uuid.UUID) -> RoommateProfileView:
        profile = self.profiles.get_by_id(profile_id)
        if profile is None or not profile.is_active:
            raise ProfileNotFoundException(f"Roommate profile {profile_id} not found")
        return apply_privacy(profile, viewer_id)

    def update_profile(
        self,
        profile_id: uuid.UUID,
        user_id: uuid.UUID,
        updates: RoommateProfileUpdate
    ) -> RoommateProfileView:
        """
        Apply a partial update to the caller's own active profile.

        Nested preference blocks are merged into the stored values and the
        merged profile is validated again before it is written.
        """
        current = self._get_owned_active(profile_id, user_id)
        merged = self.merge_updates(current, updates)

        saved = self.profiles.update(merged)
        self.profiles.commit()
        logger.info(f"Updated roommate profile {profile_id}")
        return apply_privacy(saved, user_id)

    def deactivate_profile(self, profile_id: uuid.UUID, user_id: uuid.UUID) -> RoommateProfile:
        """Mark the caller's profile inactive; it frees the roommate slot."""
        current = self._get_owned_active(profile_id, user_id)

        move_out = date.today()
        if current.move_in_date and current.move_in_date > move_out:
            # Leaving before the planned move-in
            move_out = current.move_in_date

        deactivated = self.profiles.deactivate(profile_id, move_out)
        self.profiles.commit()
        return deactivated

    def search_profiles(
        self,
        property_id: uuid.UUID,
        filters: RoommateSearchFilters,
        viewer_id: uuid.UUID
    ) -> List[RoommateProfileView]:
        profiles = self.profiles.search(
            property_id,
            min_age=filters.min_age,
            max_age=filters.max_age,
            occupations=filters.occupations or None,
            move_in_from=filters.move_in_from,
            move_in_to=filters.move_in_to,
        )

        wanted = filters.lifestyle.model_dump(exclude_none=True)
        if wanted:
            profiles = [
                p for p in profiles
                if all(getattr(p.lifestyle, name) == value for name, value in wanted.items())
            ]

        return [apply_privacy(p, viewer_id) for p in profiles]

    def get_shared_room_info(self, property_id: uuid.UUID, viewer_id: uuid.UUID) -> SharedRoomInfoResponse:
        """
        Build the slot overview of a shared property.

        Slot i holds the i-th active profile by move-in date; remaining
        slots are free from today.
        """
        prop = self._get_shared_property(property_id)
        occupants = self.profiles.list_active_for_property(property_id)
        today = date.today()

        slots = []
        for number in range(1, prop.max_occupancy + 1):
            occupant = occupants[number - 1] if number <= len(occupants) else None
            slots.append(RoommateSlotResponse(
                id=f"{property_id}-slot-{number}",
                property_id=property_id,
                slot_number=number,
                is_occupied=occupant is not None,
                roommate_profile=apply_privacy(occupant, viewer_id) if occupant else None,
                available_from=None if occupant else today,
                available_until=occupant.move_out_date if occupant else None,
            ))

        occupied = min(len(occupants), prop.max_occupancy)
        return SharedRoomInfoResponse(
            property_id=property_id,
            total_slots=prop.max_occupancy,
            occupied_slots=occupied,
            available_slots=prop.max_occupancy - occupied,
            roommate_slots=slots,
            room_rules=list(prop.custom_policies or []),
            shared_amenities=list(prop.amenities or []),
        )

    @staticmethod
    def merge_updates(current: RoommateProfile, updates: RoommateProfileUpdate) -> RoommateProfile:
        """
        Merge a partial update into a profile and re-validate the result.

        Raises:
            InvalidProfileException: If the merged profile is not valid.
        """
        data: Dict[str, Any] = current.model_dump()
        changes = updates.model_dump(exclude_unset=True)

        for name, value in changes.items():
            if name in _NESTED_FIELDS and value is not None:
                nested = dict(data[name])
                nested.update(value)
                data[name] = nested
            else:
                data[name] = value

        try:
            return RoommateProfile.model_validate(data)
        except ValidationError as e:
            raise InvalidProfileException(f"Invalid profile update: {e.errors()[0]['msg']}") from e

    # Private helper methods

    def _get_shared_property(self, property_id: uuid.UUID) -> Any:
        prop = self.properties.get_by_id(property_id)
        if prop is None:
            raise PropertyNotFoundException(f"Property {property_id} not found")
        if prop.room_type != SHARED_ROOM_TYPE:
            raise PropertyNotSharedException(f"Property {property_id} is not a shared room")
        return prop

    def _get_owned_active(self, profile_id: uuid.UUID, user_id: uuid.UUID) -> RoommateProfile:
        profile: Optional[RoommateProfile] = self.profiles.get_by_id(profile_id)
        if profile is None or not profile.is_active or profile.user_id != user_id:
            raise ProfileNotFoundException(f"Roommate profile {profile_id} not found")
        return profile
