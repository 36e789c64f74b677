# =============================================================================
# app/routers/videos.py - Video Endpoints
# =============================================================================
# Read-only access to the videos collection.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import VideoServiceDep
from core.models.content import Video

router = APIRouter()


@router.get("", response_model=list[Video])
def list_videos(service: VideoServiceDep):
    """List all videos, newest first."""
    return service.list_all()


@router.get("/{video_id}", response_model=Video)
def get_video(
    video_id: Annotated[str, Path(description="ObjectId hex string or plain string key")],
    service: VideoServiceDep,
):
    """Get a single video by id."""
    return service.get(video_id)
