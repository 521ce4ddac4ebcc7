import logging
import uuid
from typing import List, Optional

from sqlalchemy import select

from database.models import Property
from database.repositories.base import BaseRepository
from database.repositories.interfaces import PropertyStore

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository, PropertyStore):
    def get_by_id(self, property_id: uuid.UUID) -> Optional[Property]:
        stmt = select(Property).where(Property.id == property_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create(
        self,
        landlord_id: uuid.UUID,
        title: str,
        room_type: str,
        max_occupancy: int = 1,
        city: Optional[str] = None,
        amenities: Optional[List[str]] = None,
        custom_policies: Optional[List[str]] = None
    ) -> Property:
        prop = Property(
            landlord_id=landlord_id,
            title=title,
            city=city,
            room_type=room_type,
            max_occupancy=max_occupancy,
            amenities=amenities or [],
            custom_policies=custom_policies or [],
        )
        self.db.add(prop)
        self.db.flush()  # Generate ID
        logger.info(f"Created {room_type} property {prop.id} ({title})")
        return prop
