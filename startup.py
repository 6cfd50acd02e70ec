"""Seed helper for local development."""

import logging

from sqlalchemy.orm import Session

from reqbot.repositories.interactions.database import Base, SessionLocal, engine
from reqbot.repositories.interactions.models import ChatMessage, Project

logger = logging.getLogger(__name__)

DEMO_TRANSCRIPT = [
    ("bot", "Hi! What problem should this online store solve for your customers?"),
    ("user", "We need login and checkout, plus a product catalog with search."),
    ("bot", "Who will manage the catalog day to day?"),
    ("user", "Our operations team, led by Maria, the store manager."),
]


def create_demo_project() -> None:
    """Create a demo project with an open interview when the database is empty."""
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        existing = db.query(Project).count()
        if existing:
            logger.info("Projects already present (%d records). Skipping.", existing)
            return

        logger.info("Creating demo project with a short interview transcript.")
        project = Project(name="Demo Online Store", description="Seeded for local development.")
        db.add(project)
        db.flush()
        for role, content in DEMO_TRANSCRIPT:
            db.add(ChatMessage(project_id=project.id, role=role, content=content))
        db.commit()
        logger.info("Demo project %s inserted.", project.id)
    except Exception as exc:
        logger.error("Failed to seed demo project: %s", exc)
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":  # pragma: no cover
    logging.basicConfig(level=logging.INFO)
    create_demo_project()
