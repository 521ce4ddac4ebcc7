#!/usr/bin/env python3
"""
Unit tests for RoommateService.

Uses the in-memory stores from tests.mocks so no database is needed.
"""

import unittest
import uuid
from datetime import date, timedelta
from unittest.mock import patch

from sqlalchemy.exc import IntegrityError

from core.compatibility.models import SleepSchedule
from web.backend.exceptions import (
    DuplicateProfileException,
    InvalidProfileException,
    ProfileNotFoundException,
    PropertyNotFoundException,
    PropertyNotSharedException,
    RoomAtCapacityException,
)
from web.backend.models.requests import (
    LifestyleUpdate,
    RoommateProfileCreate,
    RoommateProfileUpdate,
    RoommateSearchFilters,
)
from web.backend.services import RoommateService
from tests.fixtures.roommate_fixtures import CREATE_PROFILE_BODY, make_profile
from tests.mocks.roommate_mocks import (
    FakeProperty,
    InMemoryPropertyStore,
    InMemoryRoommateProfileStore,
)


class RoommateServiceTestCase(unittest.TestCase):

    def setUp(self):
        self.shared = FakeProperty(
            room_type="shared",
            max_occupancy=2,
            amenities=["wifi"],
            custom_policies=["Quiet hours after 10pm"]
        )
        self.private = FakeProperty(room_type="private", max_occupancy=1)
        self.profile_store = InMemoryRoommateProfileStore()
        self.service = RoommateService(
            profiles=self.profile_store,
            properties=InMemoryPropertyStore(self.shared, self.private),
        )
        self.user_id = uuid.uuid4()

    def create(self, user_id=None, property_id=None, **overrides):
        data = RoommateProfileCreate(**{**CREATE_PROFILE_BODY, **overrides})
        return self.service.create_profile(
            user_id or self.user_id,
            property_id or self.shared.id,
            data
        )


class TestCreateProfile(RoommateServiceTestCase):

    def test_create_profile(self):
        view = self.create()

        self.assertTrue(view.is_owner)
        self.assertTrue(view.is_active)
        self.assertEqual(view.property_id, self.shared.id)
        self.assertEqual(view.move_in_date, date.today())
        self.assertEqual(self.profile_store.commits, 1)

    def test_explicit_move_in_date_kept(self):
        view = self.create(move_in_date="2026-12-01")
        self.assertEqual(view.move_in_date, date(2026, 12, 1))

    def test_insert_conflict_is_duplicate(self):
        """Unique index violations on insert surface as duplicates and roll back."""
        conflict = IntegrityError("INSERT INTO roommate_profiles", {}, Exception("UNIQUE constraint failed"))
        with patch.object(self.profile_store, "add", side_effect=conflict):
            with self.assertRaises(DuplicateProfileException):
                self.create()

        self.assertEqual(self.profile_store.rollbacks, 1)
        self.assertEqual(self.profile_store.commits, 0)

    def test_unknown_property(self):
        with self.assertRaises(PropertyNotFoundException):
            self.create(property_id=uuid.uuid4())

    def test_private_property_rejected(self):
        with self.assertRaises(PropertyNotSharedException):
            self.create(property_id=self.private.id)

    def test_duplicate_active_profile_rejected(self):
        self.create()
        with self.assertRaises(DuplicateProfileException):
            self.create()

    def test_full_room_rejected(self):
        self.create(user_id=uuid.uuid4())
        self.create(user_id=uuid.uuid4())
        with self.assertRaises(RoomAtCapacityException):
            self.create()

    def test_deactivate_frees_slot(self):
        first = self.create(user_id=uuid.uuid4())
        self.create(user_id=uuid.uuid4())

        self.service.deactivate_profile(first.id, first.user_id)
        view = self.create()

        self.assertTrue(view.is_active)


class TestGetAndUpdateProfile(RoommateServiceTestCase):

    def test_get_profile_applies_privacy(self):
        created = self.create(privacy_settings={"show_age": False})

        own = self.service.get_profile(created.id, self.user_id)
        other = self.service.get_profile(created.id, uuid.uuid4())

        self.assertEqual(own.age, 29)
        self.assertIsNone(other.age)

    def test_get_inactive_profile_not_found(self):
        created = self.create()
        self.service.deactivate_profile(created.id, self.user_id)

        with self.assertRaises(ProfileNotFoundException):
            self.service.get_profile(created.id, self.user_id)

    def test_update_merges_nested_blocks(self):
        created = self.create()
        updates = RoommateProfileUpdate(
            bio="Now working days",
            lifestyle=LifestyleUpdate(sleep_schedule="early"),
        )

        view = self.service.update_profile(created.id, self.user_id, updates)

        self.assertEqual(view.bio, "Now working days")
        self.assertEqual(view.lifestyle.sleep_schedule, SleepSchedule.EARLY)
        # Untouched nested fields keep their stored values
        self.assertEqual(view.lifestyle.noise_level.value, "quiet")
        self.assertEqual(view.occupation, "Nurse")

    def test_update_by_other_user_not_found(self):
        created = self.create()
        with self.assertRaises(ProfileNotFoundException):
            self.service.update_profile(created.id, uuid.uuid4(), RoommateProfileUpdate(bio="x"))

    def test_update_rejects_invalid_merged_state(self):
        created = self.create(move_in_date="2026-12-01")
        updates = RoommateProfileUpdate(move_out_date=date(2026, 11, 1))

        with self.assertRaises(InvalidProfileException):
            self.service.update_profile(created.id, self.user_id, updates)

    def test_update_replaces_age_range(self):
        created = self.create()
        updates = RoommateProfileUpdate.model_validate(
            {"compatibility": {"preferred_age_range": {"min": 30, "max": 40}}}
        )
        view = self.service.update_profile(created.id, self.user_id, updates)
        self.assertEqual(view.compatibility.preferred_age_range.min, 30)


class TestDeactivateProfile(RoommateServiceTestCase):

    def test_deactivate_sets_move_out_today(self):
        created = self.create()

        result = self.service.deactivate_profile(created.id, self.user_id)

        self.assertFalse(result.is_active)
        self.assertEqual(result.move_out_date, date.today())

    def test_deactivate_before_move_in(self):
        move_in = date.today() + timedelta(days=30)
        created = self.create(move_in_date=move_in.isoformat())

        result = self.service.deactivate_profile(created.id, self.user_id)

        self.assertEqual(result.move_out_date, move_in)

    def test_deactivate_other_users_profile(self):
        created = self.create()
        with self.assertRaises(ProfileNotFoundException):
            self.service.deactivate_profile(created.id, uuid.uuid4())


class TestSearchProfiles(RoommateServiceTestCase):

    def setUp(self):
        super().setUp()
        self.shared.max_occupancy = 5
        self.early_bird = self.create(user_id=uuid.uuid4(), age=24, occupation="Student",
                                      lifestyle={**CREATE_PROFILE_BODY["lifestyle"], "sleep_schedule": "early"})
        self.night_owl = self.create(user_id=uuid.uuid4(), age=33,
                                     lifestyle={**CREATE_PROFILE_BODY["lifestyle"], "sleep_schedule": "late"})
        self.no_age = self.create(user_id=uuid.uuid4(), age=None)

    def search(self, **filters):
        return self.service.search_profiles(self.shared.id, RoommateSearchFilters(**filters), self.user_id)

    def test_no_filters_returns_all_active(self):
        self.assertEqual(len(self.search()), 3)

    def test_age_filter_excludes_missing_age(self):
        results = self.search(min_age=20, max_age=40)
        self.assertEqual({p.id for p in results}, {self.early_bird.id, self.night_owl.id})

    def test_occupation_filter(self):
        results = self.search(occupations=["Student"])
        self.assertEqual([p.id for p in results], [self.early_bird.id])

    def test_lifestyle_filter(self):
        results = self.search(lifestyle={"sleep_schedule": "late"})
        self.assertEqual([p.id for p in results], [self.night_owl.id])

    def test_results_masked_for_viewer(self):
        results = self.search()
        self.assertTrue(all(not p.is_owner for p in results))
        self.assertTrue(all(p.compatibility is None for p in results))


class TestSharedRoomInfo(RoommateServiceTestCase):

    def test_slots(self):
        created = self.create()

        info = self.service.get_shared_room_info(self.shared.id, uuid.uuid4())

        self.assertEqual(info.total_slots, 2)
        self.assertEqual(info.occupied_slots, 1)
        self.assertEqual(info.available_slots, 1)
        self.assertEqual(info.room_rules, ["Quiet hours after 10pm"])
        self.assertEqual(info.shared_amenities, ["wifi"])

        first, second = info.roommate_slots
        self.assertTrue(first.is_occupied)
        self.assertEqual(first.slot_number, 1)
        self.assertEqual(first.roommate_profile.id, created.id)
        self.assertEqual(first.id, f"{self.shared.id}-slot-1")
        self.assertFalse(second.is_occupied)
        self.assertIsNone(second.roommate_profile)
        self.assertEqual(second.available_from, date.today())

    def test_private_property(self):
        with self.assertRaises(PropertyNotSharedException):
            self.service.get_shared_room_info(self.private.id, self.user_id)


if __name__ == '__main__':
    unittest.main(verbosity=2)
