"""
Database connection management.

Supports:
  - SQLite (local dev, no setup)
  - PostgreSQL (Docker / Cloud SQL)

Connection string comes from settings (DATABASE_URL env var).
"""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, MetaData
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from src.config.settings import get_settings
from src.infrastructure.db.models import Base, RegistrationRow, registrations_table

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """Get database URL from settings."""
    return get_settings().database_url


def create_db_engine(url: str = None) -> Engine:
    """Engine para a URL dada (ou DATABASE_URL); pool só no PostgreSQL."""
    db_url = url or get_database_url()

    if db_url.startswith("sqlite"):
        engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            echo=False,
        )
    else:
        # PostgreSQL
        engine = create_engine(
            db_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            echo=False,
        )

    return engine


# ── Global engine ──
_engine = None


def get_engine() -> Engine:
    """Engine do processo, criado na primeira chamada."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def init_db(engine: Engine | None = None, table_name: str | None = None):
    """Create the registrations table. Safe to call multiple times."""
    engine = engine or get_engine()
    table_name = table_name or get_settings().registrations_table

    if table_name == RegistrationRow.__tablename__:
        Base.metadata.create_all(engine)
    else:
        metadata = MetaData()
        registrations_table(metadata, table_name)
        metadata.create_all(engine)

    url = engine.url.render_as_string(hide_password=True)
    logger.info(f"Database initialized: {url.split('@')[-1] if '@' in url else url} (table={table_name})")


@contextmanager
def get_db(engine: Engine | None = None) -> Session:
    """Context manager for database sessions."""
    session = Session(bind=engine or get_engine(), expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
