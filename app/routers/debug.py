# =============================================================================
# app/routers/debug.py - Debug Endpoint
# =============================================================================
# Reports what the API sees in the content collections.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import DebugServiceDep
from core.models.content import DebugInfo

router = APIRouter()


@router.get("/debug", response_model=DebugInfo)
def debug_info(service: DebugServiceDep):
    """
    Connection details, document counts and one sample per collection.

    `samplePodcast` / `sampleVideo` are null when the collection is empty.
    """
    return service.build_report()
