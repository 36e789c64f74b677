# =============================================================================
# tests/test_utils.py - Document Utility Tests
# =============================================================================
# Tests for identifier resolution and BSON-to-JSON normalization.
# =============================================================================

import uuid
from datetime import datetime, timezone

import pytest
from bson import Binary, Decimal128, ObjectId, Regex, Timestamp
from bson.binary import UuidRepresentation

from lib.utils import id_query, normalize_document, normalize_value, resolve_document_id, utc_now


# =============================================================================
# Identifier Resolution
# =============================================================================

class TestResolveDocumentId:
    """ObjectId first, plain string otherwise."""

    def test_valid_object_id(self):
        """A 24-char hex string becomes an ObjectId."""
        raw = "65a1f0c2e4b0a1b2c3d4e5f6"

        resolved = resolve_document_id(raw)

        assert isinstance(resolved, ObjectId)
        assert str(resolved) == raw

    @pytest.mark.parametrize("raw", [
        "episode-12",
        "12345",
        "65a1f0c2e4b0a1b2c3d4e5",      # too short
        "zzzzzzzzzzzzzzzzzzzzzzzz",    # right length, not hex
        "",
    ])
    def test_falls_back_to_string(self, raw):
        """Anything that doesn't parse is used as-is."""
        assert resolve_document_id(raw) == raw
        assert isinstance(resolve_document_id(raw), str)

    def test_id_query(self):
        """id_query wraps the resolved id in an _id filter."""
        assert id_query("episode-12") == {"_id": "episode-12"}
        assert id_query("65a1f0c2e4b0a1b2c3d4e5f6") == {"_id": ObjectId("65a1f0c2e4b0a1b2c3d4e5f6")}


# =============================================================================
# Normalization
# =============================================================================

class TestNormalizeDocument:
    """BSON values become JSON-safe."""

    def test_object_id_to_string(self):
        oid = ObjectId()
        assert normalize_value(oid) == str(oid)

    def test_nested_values(self):
        """Nested documents and arrays are walked."""
        ref = ObjectId()
        published = datetime(2024, 1, 15, 10, 30)
        document = {
            "_id": ObjectId("65a1f0c2e4b0a1b2c3d4e5f6"),
            "title": "Episode 12",
            "date": published,
            "guest": {"id": ref, "name": "Grace"},
            "related": [ref, {"id": ref}],
            "duration": 3120,
            "explicit": False,
        }

        normalized = normalize_document(document)

        assert normalized["_id"] == "65a1f0c2e4b0a1b2c3d4e5f6"
        assert normalized["date"] is published
        assert normalized["guest"] == {"id": str(ref), "name": "Grace"}
        assert normalized["related"] == [str(ref), {"id": str(ref)}]
        assert normalized["duration"] == 3120
        assert normalized["explicit"] is False

    def test_decimal_to_string(self):
        """Decimal128 keeps its exact digits as a string."""
        assert normalize_value(Decimal128("4.5")) == "4.5"
        assert normalize_value(Decimal128("19.990")) == "19.990"

    def test_uuid_to_string(self):
        guid = uuid.uuid4()

        assert normalize_value(guid) == str(guid)
        assert normalize_value(Binary.from_uuid(guid)) == str(guid)
        assert normalize_value(Binary.from_uuid(guid, UuidRepresentation.PYTHON_LEGACY)) == str(guid)

    def test_binary_to_hex(self):
        assert normalize_value(Binary(b"\x01\xff")) == "01ff"
        assert normalize_value(b"\x00\x10") == "0010"

    @pytest.mark.parametrize("value", [Regex("^ep", "i"), Timestamp(1700000000, 1)])
    def test_other_bson_types_to_string(self, value):
        assert isinstance(normalize_value(value), str)

    def test_scalars_untouched(self):
        assert normalize_value(3.5) == 3.5
        assert normalize_value(1700000000000) == 1700000000000
        assert normalize_value(None) is None

    def test_key_order_kept(self):
        document = {"_id": "a", "zeta": 1, "alpha": 2}
        assert list(normalize_document(document)) == ["_id", "zeta", "alpha"]


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo == timezone.utc
