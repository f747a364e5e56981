"""
Integration test fixtures. Serves the FastAPI app through TestClient.
"""
import pytest


@pytest.fixture
def api_client():
    """FastAPI TestClient running the app lifespan."""
    from fastapi.testclient import TestClient
    from roleplay.main import app

    with TestClient(app) as client:
        yield client
