from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from klvscope.api import app, get_history
from klvscope.config import settings
from klvscope.services.history import HistoryStore


@pytest.fixture
def history() -> HistoryStore:
    return HistoryStore(limit=3)


@pytest.fixture
def client(history: HistoryStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_history] = lambda: history
    with TestClient(app, headers={"X-API-Key": settings.api_key}) as test_client:
        yield test_client
    app.dependency_overrides.clear()
