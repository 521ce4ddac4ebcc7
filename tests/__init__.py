#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that do not touch a database
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database Setup:
    Repository and API tests run against an in-memory SQLite database built
    from the SQLAlchemy metadata, so no server is required. Set
    TEST_DATABASE_URL to run them against PostgreSQL instead.
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Database configuration
TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")


def get_test_db_url() -> str:
    """Get the test database URL."""
    return TEST_DB_URL


def create_test_engine(url: str = None):
    """
    Engine with all tables created.

    The in-memory SQLite database lives as long as its single pooled
    connection, so every session of the engine sees the same data.
    """
    from database.models import Base

    url = url or TEST_DB_URL
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    else:
        engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def teardown_test_database(engine):
    """Drop all tables created by create_test_engine."""
    from database.models import Base

    Base.metadata.drop_all(engine)
    engine.dispose()
