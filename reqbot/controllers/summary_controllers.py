"""Summary endpoint: extract the canonical summary and close the interview."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reqbot.models.conversation_models import ErrorResponse
from reqbot.models.summary_models import GenerateSummaryRequest, GenerateSummaryResponse
from reqbot.repositories.interactions.dependencies import get_db
from reqbot.services.exceptions import (
    EmptyTranscriptError,
    ProjectNotFoundError,
    SummaryExtractionError,
    SummaryPersistenceError,
)
from reqbot.services.requirements_summary import (
    RequirementsSummaryService,
    get_requirements_summary_service,
)

summary_router = APIRouter(tags=["Summary"])


@summary_router.post(
    "/generate-summary",
    responses={
        200: {"model": GenerateSummaryResponse, "description": "Committed summary"},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def generate_summary(
    data: GenerateSummaryRequest,
    db: Session = Depends(get_db),
    summary_service: RequirementsSummaryService = Depends(get_requirements_summary_service),
) -> GenerateSummaryResponse:
    """
    Summarize the interview and store the result on the project.

    Uses ``conversationHistory`` when given, otherwise the stored transcript.
    On success the transcript is cleared; on any failure it is left untouched.
    """
    try:
        summary = summary_service.generate(db, data.project_id, data.conversation_history)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EmptyTranscriptError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SummaryExtractionError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except SummaryPersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return GenerateSummaryResponse(data=summary)
