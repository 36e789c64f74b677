# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Content Hub API:
# - test_mongo_client.py: Lazy connect-or-reuse behavior
# - test_utils.py: Identifier resolution and document normalization
# - test_models.py: Pydantic model validation and serialization
# - test_services.py: Service-layer rules against mongomock
# - test_api_*.py: Endpoint tests through FastAPI's TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
