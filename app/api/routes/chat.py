from fastapi import APIRouter, Depends, HTTPException
import logging

from app.api.deps import get_assistant_service, get_current_user
from app.models.user import User
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.assistant_service import AssistantService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=ChatResponse)
def chat(
    request: ChatRequest,
    user: User = Depends(get_current_user),
    assistant: AssistantService = Depends(get_assistant_service),
):
    """Ask the civic assistant; upstream failures come back as a fallback reply"""
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    logger.info("💬 Chat message from %s (%s)", user.id, request.language)
    return ChatResponse(response=assistant.ask(request.message, request.language))
