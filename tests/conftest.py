import os

os.environ.setdefault("LOG_FILE", "")

from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from main import create_app
from usersearch.core.config import settings
from usersearch.services.dataset import load_records

DATASET = Path(__file__).resolve().parent.parent / "dataset.xml"


@pytest.fixture(scope="session")
def records():
    return load_records(DATASET)


@pytest.fixture
def server(records):
    return TestClient(create_app(records))


@pytest.fixture
def token():
    return settings.ACCESS_TOKEN


@pytest.fixture
def fake_server():
    """Build an httpx client whose answers come from ``handler``; counts calls."""

    def _make(handler):
        calls = []

        def _handle(request):
            calls.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_handle))
        client.calls = calls
        return client

    return _make
