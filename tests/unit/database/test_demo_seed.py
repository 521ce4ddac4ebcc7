#!/usr/bin/env python3
"""
Tests for the database init and demo seed scripts.
"""

from sqlalchemy import inspect

from database.repositories import PropertyRepository, RoommateProfileRepository
from scripts.init_db import init_db
from scripts.seed_demo_data import DEMO_ROOMMATES, seed


def test_init_db_creates_tables(db_engine):
    init_db(bind=db_engine)

    tables = set(inspect(db_engine).get_table_names())
    assert {"properties", "roommate_profiles"} <= tables


def test_seed_creates_shared_property_with_roommates(session_factory):
    property_id = seed(session_factory)

    session = session_factory()
    try:
        prop = PropertyRepository(session).get_by_id(property_id)
        assert prop.room_type == "shared"
        assert prop.max_occupancy == 4

        profiles = RoommateProfileRepository(session).list_active_for_property(property_id)
        assert len(profiles) == len(DEMO_ROOMMATES)
        assert {p.first_name for p in profiles} == {"Maria", "Paolo"}
    finally:
        session.close()
