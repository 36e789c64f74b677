# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Lazily-connected, shared MongoDB handle
# - utils.py: Identifier resolution and document normalization
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import MongoClientError, MongoConnection, get_mongo_connection
from lib.utils import id_query, normalize_document, normalize_value, resolve_document_id, utc_now

__all__ = [
    # MongoDB
    "MongoClientError",
    "MongoConnection",
    "get_mongo_connection",
    # Documents
    "id_query",
    "normalize_document",
    "normalize_value",
    "resolve_document_id",
    "utc_now",
]
