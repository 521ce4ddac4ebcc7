"""API route handlers."""

from .roommates import router as roommates_router
from .roommates import properties_router
from .compatibility import router as compatibility_router
