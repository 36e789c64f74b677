# =============================================================================
# core/services/debug_service.py - Store Diagnostics
# =============================================================================
# Builds the GET /api/debug report: which database and collections the API
# is using, how many content documents exist, and the attribute names of
# one sample document per collection. Useful when the ingestion job writes
# documents in a shape the frontend doesn't expect.
# =============================================================================

import logging
from typing import Any

from pymongo.errors import PyMongoError

from app.exceptions import ServiceUnavailableError
from core.models.content import DebugConnection, DebugInfo, DebugStats, SampleDocument
from lib.mongo_client import MongoClientError, MongoConnection
from lib.utils import normalize_value

logger = logging.getLogger(__name__)


def _sample(document: dict[str, Any] | None) -> SampleDocument | None:
    if document is None:
        return None
    return SampleDocument(id=normalize_value(document["_id"]), keys=list(document.keys()))


class DebugService:
    """Service for store diagnostics."""

    def __init__(
        self,
        connection: MongoConnection,
        podcasts_collection: str,
        videos_collection: str,
    ):
        self.connection = connection
        self.podcasts_collection = podcasts_collection
        self.videos_collection = videos_collection

    def build_report(self) -> DebugInfo:
        """
        Count both content collections and sample one document from each.

        Raises:
            ServiceUnavailableError: If the store can't be reached or a query fails
        """
        try:
            podcasts = self.connection.collection(self.podcasts_collection)
            videos = self.connection.collection(self.videos_collection)

            podcast_count = podcasts.count_documents({})
            video_count = videos.count_documents({})

            first_podcast = podcasts.find_one({})
            first_video = videos.find_one({})
        except (MongoClientError, PyMongoError) as e:
            logger.error(f"Debug report failed: {e}")
            raise ServiceUnavailableError(str(e), message="Debug error")

        return DebugInfo(
            connection=DebugConnection(
                database=self.connection.database_name,
                podcasts_collection=self.podcasts_collection,
                videos_collection=self.videos_collection,
                connected=self.connection.is_connected,
            ),
            stats=DebugStats(podcast_count=podcast_count, video_count=video_count),
            sample_podcast=_sample(first_podcast),
            sample_video=_sample(first_video),
        )
