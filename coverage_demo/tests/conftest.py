"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from fastapi.testclient import TestClient

import coverage_demo.services.app_service as app_service_module
from coverage_demo.server import app
from coverage_demo.services.app_service import AppService


@pytest.fixture(autouse=True)
def reset_app_service():
    """Drop the cached service singleton and any dependency overrides."""
    app_service_module._app_service = None
    yield
    app_service_module._app_service = None
    app.dependency_overrides.clear()


@pytest.fixture
def service():
    """Fresh service instance."""
    return AppService()


@pytest.fixture
def client():
    """Test client running the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client
