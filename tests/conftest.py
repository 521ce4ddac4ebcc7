"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_session_factory, create_test_engine, teardown_test_database


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_engine():
    """Function-scoped engine with fresh tables."""
    engine = create_test_engine()
    yield engine
    teardown_test_database(engine)


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def db_session(session_factory):
    """Session rolled back and closed after each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def roommate_service_for(db_session):
    """Factory for a RoommateService bound to the test session."""
    from database.repositories import PropertyRepository, RoommateProfileRepository
    from web.backend.services import RoommateService

    def _build():
        return RoommateService(
            profiles=RoommateProfileRepository(db_session),
            properties=PropertyRepository(db_session),
        )

    return _build
