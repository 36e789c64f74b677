# =============================================================================
# core/services/message_service.py - Contact Message Business Logic
# =============================================================================
# Handles the contact form and the admin inbox:
# - validating and storing submissions
# - listing and fetching stored messages
# - marking a message as read
#
# Every store failure here is a 500; there is no 503 path for messages.
# =============================================================================

import logging
import re
from typing import Any

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.exceptions import InvalidContactError, RecordNotFoundError, StoreOperationError
from core.models.message import ContactRequest, Message
from lib.mongo_client import MongoClientError, MongoConnection
from lib.utils import id_query, normalize_document, utc_now

logger = logging.getLogger(__name__)

# local@domain.tld, no whitespace and exactly one @ between the parts
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_STORE_ERRORS = (MongoClientError, PyMongoError)


class MessageService:
    """
    Service for the messages collection.

    Example:
        service = MessageService(connection, "messages")
        message_id = service.submit(ContactRequest(name="Ada", email="ada@example.com", message="Hi"))
        service.mark_read(message_id)
    """

    def __init__(self, connection: MongoConnection, collection_name: str):
        self.connection = connection
        self.collection_name = collection_name

    # -------------------------------------------------------------------------
    # Contact Form
    # -------------------------------------------------------------------------

    @staticmethod
    def validate_contact(request: ContactRequest) -> dict[str, str]:
        """
        Check a submission and return its trimmed fields.

        Missing fields are reported before the email format. The email is
        matched after trimming, so " ada@example.com " is accepted and
        stored as "ada@example.com".

        Returns:
            Dict with trimmed `name`, `email` and `message`

        Raises:
            InvalidContactError: If a field is missing/blank or the email is malformed
        """
        fields = {
            "name": (request.name or "").strip(),
            "email": (request.email or "").strip(),
            "message": (request.message or "").strip(),
        }

        missing = [key for key, value in fields.items() if not value]
        if missing:
            raise InvalidContactError("All fields are required", field=missing[0])

        if not EMAIL_PATTERN.match(fields["email"]):
            raise InvalidContactError("Invalid email address", field="email")

        return fields

    def submit(self, request: ContactRequest) -> str:
        """
        Validate and store a contact message.

        Returns:
            The new message id as a string

        Raises:
            InvalidContactError: If validation fails (nothing is inserted)
            StoreOperationError: If the insert fails
        """
        fields = self.validate_contact(request)

        document: dict[str, Any] = {
            **fields,
            "createdAt": utc_now(),
            "read": False,
        }

        try:
            result = self.connection.collection(self.collection_name).insert_one(document)
        except _STORE_ERRORS as e:
            logger.error(f"Error submitting contact form: {e}")
            raise StoreOperationError("submit_contact", str(e))

        logger.info(f"Stored contact message {result.inserted_id}")
        return str(result.inserted_id)

    # -------------------------------------------------------------------------
    # Admin Inbox
    # -------------------------------------------------------------------------

    def list_all(self) -> list[Message]:
        """Fetch every message, newest first."""
        try:
            collection = self.connection.collection(self.collection_name)
            documents = list(collection.find({}).sort("createdAt", DESCENDING))
        except _STORE_ERRORS as e:
            logger.error(f"Error fetching messages: {e}")
            raise StoreOperationError("list_messages", str(e))

        logger.debug(f"Fetched {len(documents)} messages")
        return [Message.model_validate(normalize_document(doc)) for doc in documents]

    def get(self, raw_id: str) -> Message:
        """
        Fetch one message by path identifier.

        Raises:
            RecordNotFoundError: If no message has that id
            StoreOperationError: If the query fails
        """
        try:
            document = self.connection.collection(self.collection_name).find_one(id_query(raw_id))
        except _STORE_ERRORS as e:
            logger.error(f"Error fetching message {raw_id}: {e}")
            raise StoreOperationError("get_message", str(e))

        if document is None:
            raise RecordNotFoundError("Message", raw_id)

        return Message.model_validate(normalize_document(document))

    def mark_read(self, raw_id: str) -> None:
        """
        Set read=true and stamp readAt.

        Marking an already-read message again succeeds and refreshes readAt;
        only a missing document is an error.

        Raises:
            RecordNotFoundError: If no message matched
            StoreOperationError: If the update fails
        """
        try:
            result = self.connection.collection(self.collection_name).update_one(
                id_query(raw_id),
                {"$set": {"read": True, "readAt": utc_now()}},
            )
        except _STORE_ERRORS as e:
            logger.error(f"Error updating message {raw_id}: {e}")
            raise StoreOperationError("mark_message_read", str(e))

        if result.matched_count == 0:
            raise RecordNotFoundError("Message", raw_id)

        logger.info(f"Marked message {raw_id} as read")
