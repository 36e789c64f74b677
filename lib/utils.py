# =============================================================================
# lib/utils.py - Shared Document Utilities
# =============================================================================
# Helpers for turning raw path segments into queries and raw BSON documents
# into JSON-safe values.
# =============================================================================

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from bson import Binary, Decimal128, ObjectId
from bson.binary import OLD_UUID_SUBTYPE, UUID_SUBTYPE, UuidRepresentation
from bson.errors import InvalidId


# =============================================================================
# Identifier Resolution
# =============================================================================

def resolve_document_id(raw_id: str) -> ObjectId | str:
    """
    Interpret a path identifier the way the collections store it.

    The value is first parsed as a native ObjectId. If that fails, the raw
    string is returned unchanged and used as a plain `_id` equality key, so
    documents inserted with string identifiers stay reachable.

    Args:
        raw_id: Identifier exactly as it appeared in the URL

    Returns:
        ObjectId when `raw_id` is a valid 24-char hex string, else `raw_id`

    Example:
        resolve_document_id("65a1f0c2e4b0a1b2c3d4e5f6")  # ObjectId('65a1...')
        resolve_document_id("episode-12")                # "episode-12"
    """
    try:
        return ObjectId(raw_id)
    except (InvalidId, TypeError):
        return raw_id


def id_query(raw_id: str) -> dict[str, Any]:
    """Build the `{_id: ...}` filter for a path identifier."""
    return {"_id": resolve_document_id(raw_id)}


# =============================================================================
# Document Normalization
# =============================================================================

# Values that pass through to pydantic unchanged
_JSON_SCALARS = (str, int, float, bool, datetime)


def normalize_value(value: Any) -> Any:
    """
    Convert one BSON value into something pydantic and JSON can carry.

    - ObjectId -> hex string
    - Decimal128 -> decimal string, so no precision is lost ("4.50" stays "4.50")
    - UUID, or Binary holding a UUID -> canonical UUID string
    - other Binary / bytes -> hex string
    - nested documents and arrays are walked recursively
    - any other BSON type (Regex, Timestamp, Code, MinKey, ...) -> str()

    Datetimes are left alone and rendered as ISO-8601 later.
    """
    if value is None or isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Decimal128):
        return str(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Binary):
        if value.subtype == UUID_SUBTYPE:
            return str(value.as_uuid(UuidRepresentation.STANDARD))
        if value.subtype == OLD_UUID_SUBTYPE:
            return str(value.as_uuid(UuidRepresentation.PYTHON_LEGACY))
        return value.hex()
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, dict):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return str(value)


def normalize_document(document: dict[str, Any]) -> dict[str, Any]:
    """Normalize a full document, keeping key order."""
    return {key: normalize_value(value) for key, value in document.items()}


def utc_now() -> datetime:
    """Current time as stored in `createdAt` / `readAt`."""
    return datetime.now(timezone.utc)
