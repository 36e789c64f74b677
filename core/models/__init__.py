# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - content.py: Podcast / Video documents and the debug report
# - message.py: Contact form and stored message schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Content Models - Read-only podcast and video documents
# -----------------------------------------------------------------------------
from .content import (
    ContentDocument,
    DebugConnection,
    DebugInfo,
    DebugStats,
    Podcast,
    SampleDocument,
    Video,
)

# -----------------------------------------------------------------------------
# Message Models - Contact form and admin inbox
# -----------------------------------------------------------------------------
from .message import (
    ContactRequest,
    ContactResponse,
    MarkReadResponse,
    Message,
)

__all__ = [
    # Content
    "ContentDocument",
    "DebugConnection",
    "DebugInfo",
    "DebugStats",
    "Podcast",
    "SampleDocument",
    "Video",
    # Messages
    "ContactRequest",
    "ContactResponse",
    "MarkReadResponse",
    "Message",
]
