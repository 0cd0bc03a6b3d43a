import os

# Must be set before any service module reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("RUN_MIGRATIONS", "false")
os.environ.setdefault("DATA_SERVICE_URL", "http://testserver")

import httpx
import pytest
from fastapi.testclient import TestClient

from data_service.domain.models import Base
from data_service.infrastructure.db import engine
from data_service.main import app as data_app
from business_service.api.deps import get_http_client
from business_service.main import app as business_app


@pytest.fixture
def data_client():
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    return TestClient(data_app)


@pytest.fixture
def business_client(data_client):
    """Business service wired to the in-process data service."""
    business_app.dependency_overrides[get_http_client] = lambda: data_client
    yield TestClient(business_app)
    business_app.dependency_overrides.clear()


@pytest.fixture
def mock_data_service():
    """
    Business service wired to a scripted data service.

    Tests set ``handler`` to a function taking an ``httpx.Request`` and
    returning an ``httpx.Response``; every request seen is kept in
    ``requests``.
    """

    class ScriptedDataService:
        def __init__(self):
            self.requests = []
            self.handler = lambda request: httpx.Response(200, json=[])

        def __call__(self, request):
            self.requests.append(request)
            return self.handler(request)

    scripted = ScriptedDataService()

    def http_client():
        with httpx.Client(transport=httpx.MockTransport(scripted), base_url="http://data-service") as client:
            yield client

    business_app.dependency_overrides[get_http_client] = http_client
    scripted.client = TestClient(business_app)
    yield scripted
    business_app.dependency_overrides.clear()
