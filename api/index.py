# =============================================================================
# api/index.py - Vercel Serverless Entry Point
# =============================================================================
# Vercel's Python runtime serves every /api/* request through this file.
# It only needs a module-level ASGI `app`; routing lives in app/main.py.
# =============================================================================

from app.main import app

__all__ = ["app"]
