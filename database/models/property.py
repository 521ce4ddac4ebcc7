import uuid

from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, Enum, Uuid, Index, CheckConstraint, func

from .base import Base, JSONType


class Property(Base):
    """
    Rental listing owned by a landlord.

    Only the fields the roommate service reads are mapped here; listing
    management lives outside this service.
    """
    __tablename__ = 'properties'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    landlord_id = Column(Uuid, nullable=False)
    title = Column(Text, nullable=False)
    city = Column(Text)

    room_type = Column(
        Enum('private', 'shared', 'entire_place', name='room_type'),
        nullable=False
    )
    max_occupancy = Column(Integer, nullable=False, default=1)

    amenities = Column(JSONType, default=list)
    # Room rules shown on the shared room overview
    custom_policies = Column(JSONType, default=list)

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('max_occupancy > 0', name='ck_properties_max_occupancy'),
        Index('idx_properties_landlord', 'landlord_id'),
        Index('idx_properties_room_type', 'room_type'),
    )
