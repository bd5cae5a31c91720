"""Shared fixtures: an app whose upstream calls hit an httpx mock transport."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from gamedeals.api.deps import get_http_client, get_sessions
from gamedeals.core.session import SessionRegistry
from gamedeals.main import create_app


@pytest.fixture
def make_client():
    """Builds a TestClient whose CheapShark calls go to `handler`."""

    def _make(handler) -> tuple[TestClient, SessionRegistry]:
        app = create_app()
        upstream = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        sessions = SessionRegistry()
        app.dependency_overrides[get_http_client] = lambda: upstream
        app.dependency_overrides[get_sessions] = lambda: sessions
        return TestClient(app), sessions

    return _make
