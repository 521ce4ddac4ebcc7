"""
Store Interfaces - what the roommate services need from persistence.

Services receive implementations of these interfaces through dependency
injection instead of reaching for a global client.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, List, Optional

from core.compatibility.models import RoommateProfile


class RoommateProfileStore(ABC):
    """
    Abstract Interface for roommate profile persistence.
    """

    @abstractmethod
    def get_by_id(self, profile_id: uuid.UUID) -> Optional[RoommateProfile]:
        """Return the profile regardless of its active flag."""
        pass

    @abstractmethod
    def get_active_for_user(self, user_id: uuid.UUID, property_id: uuid.UUID) -> Optional[RoommateProfile]:
        pass

    @abstractmethod
    def list_active_for_property(
        self,
        property_id: uuid.UUID,
        exclude_user_id: Optional[uuid.UUID] = None
    ) -> List[RoommateProfile]:
        """
        Active profiles of a property ordered by move-in date, then creation time.
        """
        pass

    @abstractmethod
    def count_active_for_property(self, property_id: uuid.UUID) -> int:
        pass

    @abstractmethod
    def search(
        self,
        property_id: uuid.UUID,
        min_age: Optional[int] = None,
        max_age: Optional[int] = None,
        occupations: Optional[List[str]] = None,
        move_in_from: Optional[date] = None,
        move_in_to: Optional[date] = None
    ) -> List[RoommateProfile]:
        """
        Active profiles of a property matching the column filters (all inclusive).
        """
        pass

    @abstractmethod
    def add(self, profile: RoommateProfile) -> RoommateProfile:
        pass

    @abstractmethod
    def update(self, profile: RoommateProfile) -> RoommateProfile:
        """Overwrite the mutable fields of an existing profile."""
        pass

    @abstractmethod
    def deactivate(self, profile_id: uuid.UUID, move_out_date: date) -> Optional[RoommateProfile]:
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass


class PropertyStore(ABC):
    """
    Abstract Interface for read access to property listings.

    Returned objects expose id, room_type, max_occupancy, amenities,
    custom_policies and is_active.
    """

    @abstractmethod
    def get_by_id(self, property_id: uuid.UUID) -> Optional[Any]:
        pass
