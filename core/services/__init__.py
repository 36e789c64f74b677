# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .content_service import ContentService
from .debug_service import DebugService
from .message_service import EMAIL_PATTERN, MessageService

__all__ = [
    "ContentService",
    "DebugService",
    "EMAIL_PATTERN",
    "MessageService",
]
