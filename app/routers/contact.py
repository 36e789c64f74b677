# =============================================================================
# app/routers/contact.py - Contact Form Endpoint
# =============================================================================
# Public endpoint behind the site's contact form.
# =============================================================================

from fastapi import APIRouter, status

from app.dependencies import MessageServiceDep
from core.models.message import ContactRequest, ContactResponse

router = APIRouter()


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def submit_contact(request: ContactRequest, service: MessageServiceDep):
    """
    Submit a contact message.

    All three fields are required and are stored trimmed. The email must
    look like `local@domain.tld`. Invalid submissions return 400 and
    nothing is stored.
    """
    message_id = service.submit(request)
    return ContactResponse(id=message_id)
