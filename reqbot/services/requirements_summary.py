"""Orchestrate summary generation: resolve transcript, extract, commit."""

from __future__ import annotations

from typing import List, Optional, Sequence

from fastapi import Depends
from sqlalchemy.orm import Session

from configs import settings
from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import ConversationMessage
from reqbot.models.summary_models import CanonicalSummary
from reqbot.services.exceptions import EmptyTranscriptError, SummaryExtractionError
from reqbot.services.interactions.chat_messages_services import (
    ChatMessageService,
    get_chat_messages_service,
)
from reqbot.services.interactions.projects_services import (
    ProjectService,
    get_project_service,
)
from reqbot.services.summary_extractor import SummaryExtractor, get_summary_extractor
from reqbot.services.summary_persistence import (
    SummaryPersistence,
    get_summary_persistence,
)

logger = get_logger("summary")


class RequirementsSummaryService:
    """Turn a project's interview into its stored canonical summary."""

    def __init__(
        self,
        extractor: SummaryExtractor,
        project_service: ProjectService,
        chat_messages_service: ChatMessageService,
        persistence: SummaryPersistence,
        commit_empty: bool = False,
    ) -> None:
        self.extractor = extractor
        self.project_service = project_service
        self.chat_messages_service = chat_messages_service
        self.persistence = persistence
        self.commit_empty = commit_empty

    def resolve_transcript(
        self,
        db: Session,
        project_id: int,
        conversation_history: Optional[Sequence[ConversationMessage]],
    ) -> List[ConversationMessage]:
        """Prefer the supplied history; fall back to the stored transcript."""
        if conversation_history:
            return list(conversation_history)
        transcript = self.chat_messages_service.conversation(db, project_id)
        if not transcript:
            raise EmptyTranscriptError()
        return transcript

    def generate(
        self,
        db: Session,
        project_id: int,
        conversation_history: Optional[Sequence[ConversationMessage]] = None,
    ) -> CanonicalSummary:
        """
        Extract and commit the summary of a project's interview.

        Raises:
            ProjectNotFoundError: Unknown project.
            EmptyTranscriptError: No history supplied and nothing stored.
            SummaryExtractionError: Extraction failed (raise policy) or came back
                empty and empty summaries are not committed; the transcript is kept.
            SummaryPersistenceError: The commit was rolled back.
        """
        self.project_service.get(db, project_id)
        transcript = self.resolve_transcript(db, project_id, conversation_history)
        logger.info(
            "Generating summary for project %s from %d message(s)",
            project_id,
            len(transcript),
        )

        summary = self.extractor.extract(transcript)
        if summary.is_empty() and not self.commit_empty:
            raise SummaryExtractionError(
                "Summary extraction returned no data; the conversation was kept so you can retry"
            )

        self.persistence.commit_summary(db, project_id, summary)
        return summary


def get_requirements_summary_service(
    extractor: SummaryExtractor = Depends(get_summary_extractor),
    project_service: ProjectService = Depends(get_project_service),
    chat_messages_service: ChatMessageService = Depends(get_chat_messages_service),
    persistence: SummaryPersistence = Depends(get_summary_persistence),
) -> RequirementsSummaryService:
    """FastAPI dependency for RequirementsSummaryService."""
    return RequirementsSummaryService(
        extractor,
        project_service,
        chat_messages_service,
        persistence,
        commit_empty=settings.SUMMARY_COMMIT_EMPTY,
    )
