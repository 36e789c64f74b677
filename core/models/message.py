# =============================================================================
# core/models/message.py - Contact Message Schemas
# =============================================================================
# These models define the API contract for the contact form and the
# admin message endpoints:
# - ContactRequest: Input for POST /contact
# - ContactResponse: Output after a message is stored
# - Message: A stored message as returned to clients
# - MarkReadResponse: Output for PUT /messages/{id}/read
#
# Lifecycle: a message is created with read=false; marking it read sets
# read=true and stamps readAt. Messages are never deleted.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .content import DocumentId


class ContactRequest(BaseModel):
    """
    Body of a contact form submission.

    Every field is optional at the schema level so that a missing field
    is reported by the service as a 400 with a clear message instead of
    a generic schema error.

    Example:
        {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "message": "Loved the last episode!"
        }
    """

    name: str | None = Field(default=None, description="Sender name")
    email: str | None = Field(default=None, description="Sender email address")
    message: str | None = Field(default=None, description="Message body")


class ContactResponse(BaseModel):
    """Response when a contact message has been stored."""
    success: bool = True
    message: str = Field(default="Message sent successfully")
    id: str = Field(..., description="Identifier of the stored message")


class Message(BaseModel):
    """
    A stored contact message.

    Example:
        {
            "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "message": "Loved the last episode!",
            "createdAt": "2024-01-15T10:30:00Z",
            "read": false,
            "readAt": null
        }
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: DocumentId = Field(..., alias="_id")
    name: str | None = None
    email: str | None = None
    message: str | None = None

    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
        description="When the message was submitted"
    )

    read: bool = Field(
        default=False,
        description="Whether an admin has marked the message as read"
    )

    # Only present once the message has been marked read
    read_at: datetime | None = Field(
        default=None,
        alias="readAt",
        description="When the message was marked as read"
    )


class MarkReadResponse(BaseModel):
    """Response after marking a message as read."""
    success: bool = True
    message: str = Field(default="Message marked as read")
