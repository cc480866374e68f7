"""
Shared pytest fixtures.

DynamoDB is emulated in-process with moto; every test gets fresh tables.
"""

import sys
from pathlib import Path

# Add project root to sys.path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    """Fake credentials and a table prefix; never talk to a real endpoint."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("TABLE_PREFIX", "test-")
    monkeypatch.setenv("ADMIN_API_TOKEN", ADMIN_TOKEN)
    monkeypatch.setenv("ADMIN_ID", "admin-1")
    monkeypatch.setenv("ADMIN_NAME", "Site Admin")
    monkeypatch.setenv("AUTO_INIT_DB", "true")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture
def dynamodb() -> Generator[None, None, None]:
    """Mocked AWS with all application tables created."""
    from config.db_config import create_tables

    with mock_aws():
        create_tables()
        yield


@pytest.fixture
def client(dynamodb) -> Generator[TestClient, None, None]:
    """Application client; startup seeds the training page settings."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def make_training(dynamodb) -> Callable[..., dict]:
    """Store a training; published and active unless overridden."""
    from helpers import training_helper

    counter = {"n": 0}

    def _make(**overrides) -> dict:
        counter["n"] += 1
        fields = {
            "title": f"Saffron Course {counter['n']}",
            "description": "Learn saffron cultivation",
            "duration": "3 Days",
            "price": 15000,
            "isActive": True,
            "isPublished": True,
            "maxParticipants": None,
        }
        fields.update(overrides)
        return training_helper.create_training(fields)

    return _make


@pytest.fixture
def make_blog(dynamodb) -> Callable[..., dict]:
    from helpers import content_helper

    def _make(title: str = "My Post", **overrides) -> dict:
        fields = {"title": title, "excerpt": "", "content": "Body", "isPublished": True}
        fields.update(overrides)
        return content_helper.create_item("blog", fields)

    return _make


@pytest.fixture
def make_product(dynamodb) -> Callable[..., dict]:
    from helpers import content_helper

    def _make(name: str = "Saffron 1g", **overrides) -> dict:
        fields = {"name": name, "description": "Threads", "price": 650, "isActive": True}
        fields.update(overrides)
        return content_helper.create_item("product", fields)

    return _make


@pytest.fixture
def comment_payload() -> dict:
    return {"name": "A", "email": "a@x.com", "comment": "hi"}
