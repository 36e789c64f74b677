# =============================================================================
# core/models/content.py - Content Document Schemas
# =============================================================================
# Podcasts and videos are written by an out-of-band ingestion job, so their
# shape isn't fixed here. These models keep every stored attribute
# (extra="allow") and only type the fields the API itself relies on:
# - _id: the document identifier (ObjectIds rendered as hex strings, other
#   scalars and embedded documents kept as they are)
# - date: sort key for listings, stored as a datetime, a string or a number
#
# The debug models describe GET /api/debug.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# _id can be any BSON scalar or an embedded document, normalized beforehand
DocumentId = str | int | float | bool | dict[str, Any]


class ContentDocument(BaseModel):
    """
    A podcast or video document, passed through as stored.

    Example:
        {
            "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
            "title": "Episode 12",
            "date": "2024-01-15T10:30:00",
            "duration": 3120,
            "tags": ["design", "interview"]
        }
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: DocumentId = Field(
        ...,
        alias="_id",
        description="Document identifier"
    )

    # Numbers come back as numbers (epoch millis stay epoch millis)
    date: int | float | datetime | str | None = Field(
        default=None,
        description="Publication date, used for newest-first ordering"
    )


class Podcast(ContentDocument):
    """A document from the podcasts collection."""


class Video(ContentDocument):
    """A document from the videos collection."""


# =============================================================================
# Debug Models
# =============================================================================

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DebugConnection(_CamelModel):
    """Which database and collections the API is pointed at."""
    database: str
    podcasts_collection: str
    videos_collection: str
    connected: bool


class DebugStats(_CamelModel):
    """Document counts for the content collections."""
    podcast_count: int = Field(..., ge=0)
    video_count: int = Field(..., ge=0)


class SampleDocument(BaseModel):
    """Identifier and attribute names of one stored document."""

    model_config = ConfigDict(populate_by_name=True)

    id: DocumentId = Field(..., alias="_id")
    keys: list[str] = Field(default_factory=list)


class DebugInfo(_CamelModel):
    """
    Response for GET /api/debug.

    Example:
        {
            "connection": {"database": "Assets", "podcastsCollection": "podcasts", ...},
            "stats": {"podcastCount": 12, "videoCount": 0},
            "samplePodcast": {"_id": "65a1...", "keys": ["_id", "title", "date"]},
            "sampleVideo": null
        }
    """
    connection: DebugConnection
    stats: DebugStats
    sample_podcast: SampleDocument | None = None
    sample_video: SampleDocument | None = None
