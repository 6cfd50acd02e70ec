"""Fixtures for the HTTP layer: a test application wired to fake backends."""

from typing import Generator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from reqbot.controllers.chat_controllers import chat_router
from reqbot.controllers.errors import register_exception_handlers
from reqbot.controllers.project_controllers import project_router
from reqbot.controllers.report_controllers import report_router
from reqbot.controllers.summary_controllers import summary_router
from reqbot.repositories.interactions.dependencies import get_db
from reqbot.services.conversation_driver import ConversationDriver, get_conversation_driver
from reqbot.services.llm_gateway import ProviderGateway
from reqbot.services.llm_gateway.providers.base import BaseLLMProvider
from reqbot.services.summary_extractor import SummaryExtractor, get_summary_extractor


@pytest.fixture()
def providers(make_provider) -> List[BaseLLMProvider]:
    """Primary and secondary backends; tests set ``reply``/``error`` on them."""
    return [make_provider("gemini"), make_provider("openai")]


@pytest.fixture()
def test_app(session_factory: sessionmaker, providers) -> FastAPI:
    application = FastAPI()
    register_exception_handlers(application)
    application.include_router(project_router)
    application.include_router(chat_router)
    application.include_router(summary_router)
    application.include_router(report_router)

    def _get_db() -> Generator[Session, None, None]:
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    gateway = ProviderGateway(providers)
    application.dependency_overrides[get_db] = _get_db
    application.dependency_overrides[get_conversation_driver] = lambda: ConversationDriver(gateway)
    application.dependency_overrides[get_summary_extractor] = lambda: SummaryExtractor(gateway)
    return application


@pytest.fixture()
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as test_client:
        yield test_client
