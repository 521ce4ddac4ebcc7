import contextlib
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import PropertyRepository, RoommateProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class RoommateUnitOfWork:
    """Repositories sharing one Session."""
    session: Session
    profiles: RoommateProfileRepository
    properties: PropertyRepository


@contextlib.contextmanager
def roommate_uow(session_factory=SessionLocal):
    """Per-unit-of-work transaction scope.

    Yields a RoommateUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with roommate_uow() as uow:
            prop = uow.properties.get_by_id(property_id)
            uow.profiles.add(profile)
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield RoommateUnitOfWork(
            session=session,
            profiles=RoommateProfileRepository(session),
            properties=PropertyRepository(session),
        )
        session.commit()
    except Exception:
        logger.warning("Rolling back roommate unit of work")
        session.rollback()
        raise
    finally:
        session.close()
