from .base import Base, JSONType
from .property import Property
from .roommate import RoommateProfileRecord

__all__ = [
    'Base',
    'JSONType',
    'Property',
    'RoommateProfileRecord',
]
