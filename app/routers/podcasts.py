# =============================================================================
# app/routers/podcasts.py - Podcast Endpoints
# =============================================================================
# Read-only access to the podcasts collection.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import PodcastServiceDep
from core.models.content import Podcast

router = APIRouter()


@router.get("", response_model=list[Podcast])
def list_podcasts(service: PodcastServiceDep):
    """
    List all podcasts, newest first.

    Returns 503 if the database is unreachable.
    """
    return service.list_all()


@router.get("/{podcast_id}", response_model=Podcast)
def get_podcast(
    podcast_id: Annotated[str, Path(description="ObjectId hex string or plain string key")],
    service: PodcastServiceDep,
):
    """
    Get a single podcast.

    The id is matched as an ObjectId when it parses as one, otherwise as
    a plain string `_id`.
    """
    return service.get(podcast_id)
