# =============================================================================
# core/services/content_service.py - Podcast / Video Read Logic
# =============================================================================
# Read-only access to the content collections. One ContentService instance
# is bound to one collection; podcasts and videos share the same rules:
# - listings are sorted newest first by `date`
# - lookups resolve the id as ObjectId first, then as a plain string
#
# Store failures are translated here so routers stay thin:
# listing failures -> 503, single-record failures -> 500.
# =============================================================================

import logging
from typing import Generic, TypeVar

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.exceptions import RecordNotFoundError, ServiceUnavailableError, StoreOperationError
from core.models.content import ContentDocument
from lib.mongo_client import MongoClientError, MongoConnection
from lib.utils import id_query, normalize_document

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=ContentDocument)


class ContentService(Generic[DocumentT]):
    """
    Service for one read-only content collection.

    Example:
        podcasts = ContentService(connection, "podcasts", kind="Podcast", model=Podcast)
        latest = podcasts.list_all()[0]
        episode = podcasts.get("65a1f0c2e4b0a1b2c3d4e5f6")
    """

    def __init__(
        self,
        connection: MongoConnection,
        collection_name: str,
        kind: str,
        model: type[DocumentT],
    ):
        self.connection = connection
        self.collection_name = collection_name
        self.kind = kind
        self.model = model

    def list_all(self) -> list[DocumentT]:
        """
        Fetch every document, newest first.

        Returns:
            List of documents sorted by `date` descending (possibly empty)

        Raises:
            ServiceUnavailableError: If the store can't be reached or the query fails
        """
        try:
            collection = self.connection.collection(self.collection_name)
            documents = list(collection.find({}).sort("date", DESCENDING))
        except (MongoClientError, PyMongoError) as e:
            logger.error(f"Error fetching {self.collection_name}: {e}")
            raise ServiceUnavailableError(str(e))

        logger.debug(f"Fetched {len(documents)} documents from {self.collection_name}")
        return [self.model.model_validate(normalize_document(doc)) for doc in documents]

    def get(self, raw_id: str) -> DocumentT:
        """
        Fetch one document by path identifier.

        Args:
            raw_id: Identifier from the URL (ObjectId hex or any string key)

        Returns:
            The matching document

        Raises:
            RecordNotFoundError: If no document has that id
            StoreOperationError: If the store can't be reached or the query fails
        """
        try:
            collection = self.connection.collection(self.collection_name)
            document = collection.find_one(id_query(raw_id))
        except (MongoClientError, PyMongoError) as e:
            logger.error(f"Error fetching {self.kind.lower()} {raw_id}: {e}")
            raise StoreOperationError(f"get_{self.kind.lower()}", str(e))

        if document is None:
            raise RecordNotFoundError(self.kind, raw_id)

        return self.model.model_validate(normalize_document(document))
