from typing import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from community_directory.config import settings
from community_directory.core.rate_limit import limiter
from community_directory.database.supabase_client import SupabaseClient, get_supabase
from community_directory.main import app
from tests.utils import WEBHOOK_SECRET


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Production-like settings with a known signing secret and no store or JWT key."""
    monkeypatch.setattr(settings, "environment", "production")
    monkeypatch.setattr(settings, "clerk_webhook_secret", WEBHOOK_SECRET)
    monkeypatch.setattr(settings, "clerk_jwt_public_key", None)
    monkeypatch.setattr(settings, "supabase_url", "")
    monkeypatch.setattr(settings, "supabase_service_role_key", None)
    SupabaseClient.reset_client()
    limiter.reset()
    yield settings
    SupabaseClient.reset_client()
    limiter.reset()


@pytest.fixture
def supabase() -> MagicMock:
    return MagicMock(name="supabase")


@pytest.fixture
def client(supabase: MagicMock) -> Iterator[TestClient]:
    app.dependency_overrides[get_supabase] = lambda: supabase
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client() -> Iterator[TestClient]:
    app.dependency_overrides[get_supabase] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
