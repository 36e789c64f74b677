# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routes:
# - models/: Pydantic schemas for content, messages and diagnostics
# - services/: One service per collection, translating store errors
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable and reusable.
# =============================================================================
