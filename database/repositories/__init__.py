from database.repositories.base import BaseRepository
from database.repositories.interfaces import PropertyStore, RoommateProfileStore
from database.repositories.property import PropertyRepository
from database.repositories.roommate_profile import RoommateProfileRepository

__all__ = [
    'BaseRepository',
    'PropertyStore',
    'RoommateProfileStore',
    'PropertyRepository',
    'RoommateProfileRepository',
]
