"""Interview endpoints: read the transcript, store turns, ask the bot for its next turn."""

from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from reqbot.logger_config import get_logger
from reqbot.models.conversation_models import (
    ChatRequest,
    ConversationResponse,
    ErrorResponse,
    TranscriptResponse,
    TurnResponse,
)
from reqbot.repositories.interactions.dependencies import get_db
from reqbot.repositories.interactions.schemas.chat_messages_schema import (
    ChatMessageRead,
)
from reqbot.services.conversation_driver import (
    DEFAULT_PROJECT_NAME,
    ConversationDriver,
    get_conversation_driver,
)
from reqbot.services.exceptions import InterviewClosedError, ProjectNotFoundError
from reqbot.services.interactions.chat_messages_services import (
    ChatMessageService,
    get_chat_messages_service,
)
from reqbot.services.llm_gateway import AllProvidersFailedError

logger = get_logger("api.chat")

chat_router = APIRouter(prefix="/chat", tags=["Chat"])


@chat_router.get(
    "",
    responses={
        200: {"model": TranscriptResponse, "description": "Ordered transcript"},
        400: {"model": ErrorResponse},
    },
)
def get_transcript(
    project_id: Optional[int] = Query(default=None, alias="projectId"),
    db: Session = Depends(get_db),
    chat_messages_service: ChatMessageService = Depends(get_chat_messages_service),
) -> TranscriptResponse:
    """Return every stored turn of a project, oldest first."""
    if not project_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="projectId query param is required",
        )
    turns = chat_messages_service.transcript(db, project_id)
    return TranscriptResponse(data=[ChatMessageRead.model_validate(turn) for turn in turns])


@chat_router.post(
    "",
    responses={
        200: {"model": ConversationResponse, "description": "Bot's next turn"},
        201: {"model": TurnResponse, "description": "Stored turn"},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def post_chat(
    data: ChatRequest,
    response: Response,
    db: Session = Depends(get_db),
    chat_messages_service: ChatMessageService = Depends(get_chat_messages_service),
    conversation_driver: ConversationDriver = Depends(get_conversation_driver),
) -> Union[ConversationResponse, TurnResponse]:
    """
    Drive the interview or store one turn, depending on ``role``.

    ``conversation`` returns the bot's next turn without storing anything; the
    client then stores the user turn and the bot turn with ``user``/``bot``.
    """
    if data.role == "conversation":
        if data.conversation_history is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="conversationHistory is required for conversation role",
            )
        try:
            bot_text = conversation_driver.next_turn(
                data.conversation_history,
                data.project_name or DEFAULT_PROJECT_NAME,
                data.content,
            )
        except AllProvidersFailedError as e:
            logger.error("Conversation turn failed for project %s: %s", data.project_id, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
            )
        return ConversationResponse(response=bot_text)

    try:
        turn = chat_messages_service.append(db, data.project_id, data.role, data.content)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InterviewClosedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    response.status_code = status.HTTP_201_CREATED
    return TurnResponse(data=ChatMessageRead.model_validate(turn))
