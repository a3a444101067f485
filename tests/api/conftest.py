"""
API test fixtures.

Provides a FastAPI TestClient with service dependencies overridden by mocks.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from pdfsearch.api.deps import ServiceCache, get_chat_service, get_document_service, get_service_cache
from pdfsearch.api.main import create_app


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_document_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service_cache(memory_store) -> ServiceCache:
    cache = ServiceCache()
    cache._vector_store = memory_store
    return cache


@pytest.fixture
def client(mock_chat_service, mock_document_service, service_cache) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    app.dependency_overrides[get_document_service] = lambda: mock_document_service
    app.dependency_overrides[get_service_cache] = lambda: service_cache
    return TestClient(app)


@pytest.fixture
def headers() -> dict[str, str]:
    return {"X-User-Id": "user-1"}
