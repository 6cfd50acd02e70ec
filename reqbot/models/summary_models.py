"""Canonical summary shape and the payloads of the summary and report endpoints."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from reqbot.models.conversation_models import CamelModel, ConversationMessage

LIST_FIELDS = (
    "functional",
    "non_functional",
    "stakeholders",
    "user_stories",
    "constraints",
    "risks",
)


class CanonicalSummary(BaseModel):
    """Structured requirements document produced from an interview transcript.

    Serialized with camelCase keys (``nonFunctional``, ``userStories``,
    ``costEstimate``); every list defaults to ``[]`` and every string to ``""``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overview: str = ""
    functional: List[str] = Field(default_factory=list)
    non_functional: List[str] = Field(default_factory=list)
    stakeholders: List[str] = Field(default_factory=list)
    user_stories: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    timeline: str = ""
    cost_estimate: str = ""
    summary: str = ""

    @classmethod
    def empty(cls) -> "CanonicalSummary":
        return cls()

    def is_empty(self) -> bool:
        """True when extraction produced nothing at all (soft failure signal)."""
        if any(getattr(self, name) for name in LIST_FIELDS):
            return False
        return not (
            self.overview or self.timeline or self.cost_estimate or self.summary
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class GenerateSummaryRequest(CamelModel):
    """Body of ``POST /generate-summary``."""

    project_id: int = Field(..., gt=0)
    conversation_history: Optional[List[ConversationMessage]] = None


class GenerateSummaryResponse(BaseModel):
    """Data model for a committed summary."""

    success: bool = True
    data: CanonicalSummary


class GenerateReportRequest(CamelModel):
    """Body of ``POST /generate-report``."""

    extracted_data: Optional[CanonicalSummary] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    project_name: Optional[str] = None
