"""
Database session management
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from groupware_batch.core.config import settings
from groupware_batch.db.base import Base

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=False
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_schema() -> None:
    """Create all tables for SQLite; other databases are migrated with Alembic."""
    if "sqlite" in settings.DATABASE_URL:
        import groupware_batch.models  # noqa: F401  (register models)
        Base.metadata.create_all(bind=engine)
