"""
Database session dependency.

Provides a SQLAlchemy session per request and guarantees it is closed,
rolling back anything a failed handler left uncommitted.
"""

from typing import Generator

from sqlalchemy.orm import Session

from reqbot.repositories.interactions.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and ensure it is closed after use.

    This function is used as a FastAPI dependency to provide a database
    session per request.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
