"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient

from autocrop.config import CropSettings, Settings


@pytest.fixture(scope="function")
def api_settings(output_dir):
    """Settings whose default output directory is the test output directory"""
    return Settings(crop=CropSettings(output_path=str(output_dir)))


@pytest.fixture(scope="function")
def client(api_settings):
    """
    Create a test client with test settings in app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from autocrop.main import app

    previous = app.state.settings
    app.state.settings = api_settings
    app.state.debug = False

    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    app.state.settings = previous
