import logging
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import select, func

from core.compatibility.models import RoommateProfile
from database.models import RoommateProfileRecord
from database.repositories.base import BaseRepository
from database.repositories.interfaces import RoommateProfileStore

logger = logging.getLogger(__name__)

# Fields the owner may change after creation
_MUTABLE_FIELDS = (
    'first_name', 'last_name', 'avatar', 'bio', 'age', 'occupation',
    'move_in_date', 'move_out_date',
)


def to_domain(record: RoommateProfileRecord) -> RoommateProfile:
    return RoommateProfile.model_validate(record)


def _preferences(profile: RoommateProfile) -> dict:
    return {
        'lifestyle': profile.lifestyle.model_dump(mode='json'),
        'compatibility': profile.compatibility.model_dump(mode='json'),
        'privacy_settings': profile.privacy_settings.model_dump(mode='json'),
    }


class RoommateProfileRepository(BaseRepository, RoommateProfileStore):
    def _get_record(self, profile_id: uuid.UUID) -> Optional[RoommateProfileRecord]:
        stmt = select(RoommateProfileRecord).where(RoommateProfileRecord.id == profile_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def _active_for_property(self, property_id: uuid.UUID):
        return select(RoommateProfileRecord).where(
            RoommateProfileRecord.property_id == property_id,
            RoommateProfileRecord.is_active.is_(True)
        )

    def get_by_id(self, profile_id: uuid.UUID) -> Optional[RoommateProfile]:
        record = self._get_record(profile_id)
        return to_domain(record) if record else None

    def get_active_for_user(self, user_id: uuid.UUID, property_id: uuid.UUID) -> Optional[RoommateProfile]:
        stmt = self._active_for_property(property_id).where(RoommateProfileRecord.user_id == user_id)
        record = self.db.execute(stmt).scalar_one_or_none()
        return to_domain(record) if record else None

    def list_active_for_property(
        self,
        property_id: uuid.UUID,
        exclude_user_id: Optional[uuid.UUID] = None
    ) -> List[RoommateProfile]:
        stmt = self._active_for_property(property_id)
        if exclude_user_id is not None:
            stmt = stmt.where(RoommateProfileRecord.user_id != exclude_user_id)

        stmt = stmt.order_by(
            RoommateProfileRecord.move_in_date,
            RoommateProfileRecord.created_at,
            RoommateProfileRecord.id
        )
        return [to_domain(r) for r in self.db.execute(stmt).scalars().all()]

    def count_active_for_property(self, property_id: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(RoommateProfileRecord).where(
            RoommateProfileRecord.property_id == property_id,
            RoommateProfileRecord.is_active.is_(True)
        )
        return self.db.execute(stmt).scalar_one()

    def search(
        self,
        property_id: uuid.UUID,
        min_age: Optional[int] = None,
        max_age: Optional[int] = None,
        occupations: Optional[List[str]] = None,
        move_in_from: Optional[date] = None,
        move_in_to: Optional[date] = None
    ) -> List[RoommateProfile]:
        stmt = self._active_for_property(property_id)

        if min_age is not None:
            stmt = stmt.where(RoommateProfileRecord.age >= min_age)
        if max_age is not None:
            stmt = stmt.where(RoommateProfileRecord.age <= max_age)
        if occupations:
            stmt = stmt.where(RoommateProfileRecord.occupation.in_(occupations))
        if move_in_from is not None:
            stmt = stmt.where(RoommateProfileRecord.move_in_date >= move_in_from)
        if move_in_to is not None:
            stmt = stmt.where(RoommateProfileRecord.move_in_date <= move_in_to)

        stmt = stmt.order_by(
            RoommateProfileRecord.move_in_date,
            RoommateProfileRecord.created_at,
            RoommateProfileRecord.id
        )
        return [to_domain(r) for r in self.db.execute(stmt).scalars().all()]

    def add(self, profile: RoommateProfile) -> RoommateProfile:
        record = RoommateProfileRecord(
            id=profile.id or uuid.uuid4(),
            user_id=profile.user_id,
            property_id=profile.property_id,
            is_active=profile.is_active,
            **{name: getattr(profile, name) for name in _MUTABLE_FIELDS},
            **_preferences(profile),
        )
        self.db.add(record)
        self.db.flush()
        self.db.refresh(record)
        logger.info(f"Created roommate profile {record.id} for user {record.user_id} on property {record.property_id}")
        return to_domain(record)

    def update(self, profile: RoommateProfile) -> RoommateProfile:
        record = self._get_record(profile.id)
        if record is None:
            raise LookupError(f"Roommate profile {profile.id} does not exist")

        for name in _MUTABLE_FIELDS:
            setattr(record, name, getattr(profile, name))
        for name, value in _preferences(profile).items():
            setattr(record, name, value)

        self.db.flush()
        self.db.refresh(record)
        return to_domain(record)

    def deactivate(self, profile_id: uuid.UUID, move_out_date: date) -> Optional[RoommateProfile]:
        record = self._get_record(profile_id)
        if record is None:
            return None

        record.is_active = False
        record.move_out_date = move_out_date
        self.db.flush()
        self.db.refresh(record)
        logger.info(f"Deactivated roommate profile {profile_id}")
        return to_domain(record)
