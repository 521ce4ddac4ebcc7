"""
Engine and session factory for the configured database.

The URL comes from config.yaml; DATABASE_URL overrides it.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import load_config

DATABASE_URL = load_config().database.url

engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    pool_size=10,
    max_overflow=20
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
