#!/usr/bin/env python3
"""
Seed a shared demo property with two roommate profiles.

Everything is written in one unit of work: a failure leaves the database
untouched.

Usage:
    python -m scripts.init_db
    python -m scripts.seed_demo_data
"""

import logging
import uuid

from database.database import SessionLocal
from database.uow import roommate_uow
from web.backend.models.requests import RoommateProfileCreate
from web.backend.services import RoommateService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEMO_ROOMMATES = [
    {
        "first_name": "Maria",
        "last_name": "Santos",
        "age": 27,
        "occupation": "Software Engineer",
        "bio": "Works hybrid, cooks on weekends.",
        "lifestyle": {
            "sleep_schedule": "normal",
            "cleanliness": "clean",
            "social_level": "moderate",
            "noise_level": "quiet",
            "guest_policy": "occasional",
            "smoking_preference": "non_smoker",
            "pet_preference": "no_pets",
        },
        "compatibility": {"preferred_age_range": {"min": 22, "max": 35}},
    },
    {
        "first_name": "Paolo",
        "last_name": "Reyes",
        "age": 31,
        "occupation": "Nurse",
        "bio": "Night shifts three times a week.",
        "lifestyle": {
            "sleep_schedule": "late",
            "cleanliness": "clean",
            "social_level": "private",
            "noise_level": "quiet",
            "guest_policy": "no_guests",
            "smoking_preference": "outdoor_only",
            "pet_preference": "cats_only",
        },
        "privacy_settings": {"show_full_name": False},
    },
]


def seed(session_factory=SessionLocal) -> uuid.UUID:
    """
    Create the demo property and its roommates.

    Returns:
        Id of the shared property.
    """
    with roommate_uow(session_factory) as uow:
        prop = uow.properties.create(
            landlord_id=uuid.uuid4(),
            title="Shared Room in BGC Condo",
            room_type="shared",
            max_occupancy=4,
            city="Taguig",
            amenities=["WiFi", "Air Conditioning", "Gym", "Pool", "Security", "Shuttle Service"],
            custom_policies=["Quiet hours from 10pm", "No smoking indoors"],
        )
        service = RoommateService(profiles=uow.profiles, properties=uow.properties)
        for roommate in DEMO_ROOMMATES:
            service.create_profile(uuid.uuid4(), prop.id, RoommateProfileCreate(**roommate))

        logger.info(f"Seeded property {prop.id} with {len(DEMO_ROOMMATES)} roommates")
        return prop.id


if __name__ == "__main__":
    seed()
