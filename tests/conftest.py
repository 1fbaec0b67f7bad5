# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Builds the application around an in-memory store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from environment settings on import

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services import AppService, ReviewService
from tests.fakes import InMemoryCatalogStore

ADMIN_PASSWORD = "s3cret-admin"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryCatalogStore()


@pytest.fixture
def frontend_dir(tmp_path):
    """Directory with the two HTML entry points and one asset."""
    (tmp_path / "index.html").write_text("<html><body>Catalog</body></html>")
    (tmp_path / "admin.html").write_text("<html><body>Admin panel</body></html>")
    (tmp_path / "styles.css").write_text("body { margin: 0; }")
    return tmp_path


@pytest.fixture
def settings(frontend_dir):
    """Settings with a known admin password and the temporary frontend."""
    return Settings(
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        FRONTEND_DIR=str(frontend_dir),
        ADMIN_AUTH_REQUIRED=False,
    )


@pytest.fixture
def client(settings, store):
    """TestClient around an app wired to the in-memory store."""
    with TestClient(create_app(settings=settings, store=store)) as client:
        yield client


@pytest.fixture
def app_service(store):
    return AppService(store)


@pytest.fixture
def review_service(store):
    return ReviewService(store)


@pytest.fixture
def sample_app_payload():
    """Fully populated app as a client would send it."""
    return {
        "name": "Photo Editor Pro",
        "category": "Photography",
        "shortDescription": "Edit photos in seconds",
        "longDescription": "Filters, layers and one-tap fixes.",
        "icon": "https://cdn.example.com/icons/photo.png",
        "images": ["https://cdn.example.com/s1.png", "https://cdn.example.com/s2.png"],
        "buttonText": "INSTALL",
        "buttonLink": "https://example.com/install",
        "hasLoadingSteps": True,
        "loadingSteps": ["Connecting", "Preparing", "Done"],
        "stepInterval": 1500,
        "allowInput": True,
        "inputFields": [
            {"title": "Email", "placeholder": "you@example.com", "type": "email", "required": True},
            {"title": "Plan", "type": "select", "options": ["Free", "Pro"]},
        ],
        "inputButtonText": "Continue",
        "customFields": [{"label": "Size", "value": "42 MB", "icon": "disk"}],
        "users": "10K+",
        "order": 3,
        "isTrending": True,
    }
