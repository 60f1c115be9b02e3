import os

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from careerforge.core.config import settings


def _normalize_db_url(url: str) -> str:
    """Pin Postgres URLs (postgres://, postgresql://) to the psycopg 3 driver; others pass through."""
    if not url:
        return ""

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg://", 1)

    # If someone already provided postgresql://, upgrade to psycopg driver explicitly
    if url.startswith("postgresql://") and "+psycopg" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)

    return url


def _make_engine(url: str):
    if url.startswith("sqlite"):
        # Local file DB: make sure the folder exists
        path = make_url(url).database or ""
        folder = os.path.dirname(path)
        if folder and path != ":memory:":
            os.makedirs(folder, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


DATABASE_URL = _normalize_db_url(settings.database_url)

engine = _make_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    # Import models so every table is registered on Base.metadata
    from careerforge import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
