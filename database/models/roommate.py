import uuid

from sqlalchemy import Column, Text, Boolean, Integer, Date, TIMESTAMP, ForeignKey, Uuid, Index, CheckConstraint, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class RoommateProfileRecord(Base):
    """
    Roommate-seeker profile of one user for one shared property.

    Preferences are stored as JSON documents; their shape is validated by
    core.compatibility.models before every write. Profiles are deactivated,
    never deleted, when the user moves out.
    """
    __tablename__ = 'roommate_profiles'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False)
    property_id = Column(Uuid, ForeignKey('properties.id', ondelete='CASCADE'), nullable=False)

    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    avatar = Column(Text)
    bio = Column(Text)
    age = Column(Integer)
    occupation = Column(Text)

    lifestyle = Column(JSONType, nullable=False, default=dict)
    compatibility = Column(JSONType, nullable=False, default=dict)
    privacy_settings = Column(JSONType, nullable=False, default=dict)

    move_in_date = Column(Date, nullable=False)
    move_out_date = Column(Date)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    property = relationship("Property")

    __table_args__ = (
        CheckConstraint('age IS NULL OR (age >= 18 AND age <= 100)', name='ck_roommate_profiles_age'),
        CheckConstraint(
            'move_out_date IS NULL OR move_out_date >= move_in_date',
            name='ck_roommate_profiles_move_dates'
        ),
        # One active profile per user per property
        Index(
            'uq_roommate_profiles_active_user_property',
            'user_id', 'property_id',
            unique=True,
            postgresql_where=(is_active.is_(True)),
            sqlite_where=(is_active.is_(True)),
        ),
        Index('idx_roommate_profiles_user_id', 'user_id'),
        Index('idx_roommate_profiles_property_id', 'property_id'),
        Index('idx_roommate_profiles_is_active', 'is_active'),
        Index('idx_roommate_profiles_age', 'age'),
        Index('idx_roommate_profiles_move_in_date', 'move_in_date'),
    )
