"""FastAPI application."""

import argparse
import logging
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configs import settings
from reqbot.controllers.chat_controllers import chat_router
from reqbot.controllers.errors import register_exception_handlers
from reqbot.controllers.project_controllers import project_router
from reqbot.controllers.report_controllers import report_router
from reqbot.controllers.summary_controllers import summary_router
from reqbot.repositories.interactions.database import Base, engine
from reqbot.repositories.interactions import models  # noqa: F401


logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

logger.info("Creating database tables...")
Base.metadata.create_all(bind=engine)
logger.info("Database tables created successfully!")

logger.info("Starting FastAPI application...")
app = FastAPI(
    title="Requirements Bot API",
    root_path=settings.ROOT_PATH_BACKEND,
    description="Requirements interview, summary extraction and SRS report endpoints",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
app.include_router(project_router)
app.include_router(chat_router)
app.include_router(summary_router)
app.include_router(report_router)


@app.get("/", response_description="Api healthcheck")  # type: ignore[misc]
async def index() -> Dict[str, str]:
    """Define a route for handling HTTP GET requests to the root URL ("/")."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="0.0.0.0", help="Application host.")
    parser.add_argument("--port", default="8000", help="Application port.")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert a demo project when the database is empty.",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development purposes.",
    )
    args = parser.parse_args()

    if args.seed:
        from startup import create_demo_project

        logger.info("Populating demo data!")
        create_demo_project()

    uvicorn.run("app:app", host=args.host, port=int(args.port), reload=args.reload)
