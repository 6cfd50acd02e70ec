"""Shared pytest fixtures: in-memory database and fake LLM backends."""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Generator, List, Optional, Sequence

# Make the application root importable and give the settings a database URL
# before any application module is imported.
app_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(app_dir))
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from reqbot.models.conversation_models import ConversationMessage  # noqa: E402
from reqbot.repositories.interactions.database import Base  # noqa: E402
from reqbot.repositories.interactions.models import ChatMessage, Project  # noqa: E402
from reqbot.services.llm_gateway.models import ResponseMode  # noqa: E402
from reqbot.services.llm_gateway.providers.base import BaseLLMProvider  # noqa: E402


class FakeProvider(BaseLLMProvider):
    """Backend double that records calls and replays a reply or an error."""

    def __init__(
        self,
        name: str,
        reply: str = "",
        error: Optional[Exception] = None,
        api_key: Optional[str] = "test-key",
    ) -> None:
        super().__init__(api_key, f"{name}-model", timeout=1.0)
        self.name = name
        self.display_name = name.capitalize()
        self.reply = reply
        self.error = error
        self.calls: List[dict[str, Any]] = []

    def _invoke_impl(
        self,
        system_prompt: str,
        messages: Sequence[ConversationMessage],
        response_mode: ResponseMode,
    ) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "messages": list(messages),
                "response_mode": response_mode,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture()
def make_provider() -> Callable[..., FakeProvider]:
    return FakeProvider


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def project(db: Session) -> Project:
    stored = Project(name="Online Store", description="Checkout revamp")
    db.add(stored)
    db.commit()
    db.refresh(stored)
    return stored


@pytest.fixture()
def add_turns(db: Session) -> Callable[[int, Sequence[tuple[str, str]]], None]:
    def _add(project_id: int, turns: Sequence[tuple[str, str]]) -> None:
        for role, content in turns:
            db.add(ChatMessage(project_id=project_id, role=role, content=content))
            db.flush()
        db.commit()

    return _add
