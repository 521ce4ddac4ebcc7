#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import uuid
from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import PropertyRepository, RoommateProfileRepository
from .config import get_config
from .exceptions import AuthenticationRequiredException
from .services import CompatibilityService, RoommateService


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> uuid.UUID:
    """
    Resolve the caller from the X-User-Id header set by the auth gateway.

    Raises:
        AuthenticationRequiredException: If the header is missing or not a UUID.
    """
    if not x_user_id:
        raise AuthenticationRequiredException("Authentication required")
    try:
        return uuid.UUID(x_user_id)
    except ValueError:
        raise AuthenticationRequiredException(f"Invalid user id: {x_user_id}")


def get_roommate_service(db: Session = Depends(get_db)) -> RoommateService:
    return RoommateService(
        profiles=RoommateProfileRepository(db),
        properties=PropertyRepository(db),
    )


def get_compatibility_service(db: Session = Depends(get_db)) -> CompatibilityService:
    matching = get_config().matching
    return CompatibilityService(
        profiles=RoommateProfileRepository(db),
        weights=matching.compatibility.weights,
        policy=matching.result_policy,
    )
