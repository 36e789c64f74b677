# =============================================================================
# app/routers/messages.py - Message Inbox Endpoints
# =============================================================================
# Admin endpoints over stored contact messages.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import MessageServiceDep
from core.models.message import MarkReadResponse, Message

router = APIRouter()

MessageId = Annotated[str, Path(description="ObjectId hex string or plain string key")]


@router.get("", response_model=list[Message])
def list_messages(service: MessageServiceDep):
    """List all messages, newest first."""
    return service.list_all()


@router.get("/{message_id}", response_model=Message)
def get_message(message_id: MessageId, service: MessageServiceDep):
    """Get a single message by id."""
    return service.get(message_id)


@router.put("/{message_id}/read", response_model=MarkReadResponse)
def mark_message_read(message_id: MessageId, service: MessageServiceDep):
    """
    Mark a message as read.

    Sets `read` to true and stamps `readAt`. Calling it again on a message
    that is already read still returns 200.
    """
    service.mark_read(message_id)
    return MarkReadResponse()
