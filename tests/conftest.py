"""
Pytest configuration and fixtures
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from secureapp_api.app.core.config import Settings  # noqa: E402
from secureapp_api.app.core.dataset import load_dataset  # noqa: E402
from secureapp_api.app.main import create_app  # noqa: E402

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-01-02T03:04:05.678Z"


@pytest.fixture
def settings():
    """Settings pinned independently of the process environment"""
    return Settings(
        project_name="SecureApp Customer API",
        api_version="3.0.0",
        environment="test",
        host="127.0.0.1",
        port=3000,
        log_level="INFO",
        log_file=None,
    )


@pytest.fixture
def dataset():
    return load_dataset()


@pytest.fixture
def app(settings, dataset):
    """Create an app with a frozen clock"""
    return create_app(settings=settings, dataset=dataset, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(app):
    """Create a test client"""
    with TestClient(app) as test_client:
        yield test_client
