"""
Database configuration module.

Sets up the SQLAlchemy engine, session factory, and declarative base for ORM models.

Exports:
    - engine: SQLAlchemy database engine.
    - SessionLocal: Session factory for database interactions.
    - Base: Declarative base class for defining ORM models.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from configs import settings

connect_args = (
    {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
