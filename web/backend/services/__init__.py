"""Business logic services."""

from .roommate_service import RoommateService
from .compatibility_service import CompatibilityService
