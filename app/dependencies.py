# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests replace get_mongo_connection via app.dependency_overrides; every
# service dependency is built on top of it, so one override covers all.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.models.content import Podcast, Video
from core.services import ContentService, DebugService, MessageService
from lib.mongo_client import MongoConnection, get_mongo_connection


# Type alias for the shared store handle
ConnectionDep = Annotated[MongoConnection, Depends(get_mongo_connection)]


def get_podcast_service(connection: ConnectionDep) -> ContentService[Podcast]:
    """Service bound to the podcasts collection."""
    return ContentService(connection, settings.PODCASTS_COLLECTION, kind="Podcast", model=Podcast)


def get_video_service(connection: ConnectionDep) -> ContentService[Video]:
    """Service bound to the videos collection."""
    return ContentService(connection, settings.VIDEOS_COLLECTION, kind="Video", model=Video)


def get_message_service(connection: ConnectionDep) -> MessageService:
    """Service bound to the messages collection."""
    return MessageService(connection, settings.MESSAGES_COLLECTION)


def get_debug_service(connection: ConnectionDep) -> DebugService:
    """Service reporting on both content collections."""
    return DebugService(connection, settings.PODCASTS_COLLECTION, settings.VIDEOS_COLLECTION)


PodcastServiceDep = Annotated[ContentService[Podcast], Depends(get_podcast_service)]
VideoServiceDep = Annotated[ContentService[Video], Depends(get_video_service)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
DebugServiceDep = Annotated[DebugService, Depends(get_debug_service)]
