# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - podcasts.py: Podcast listing and lookup
# - videos.py: Video listing and lookup
# - contact.py: Contact form submission
# - messages.py: Stored message listing, lookup and mark-read
# - debug.py: Store diagnostics
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import podcasts
from . import videos
from . import contact
from . import messages
from . import debug

__all__ = [
    "health",
    "podcasts",
    "videos",
    "contact",
    "messages",
    "debug",
]
