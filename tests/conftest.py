import pytest
from fastapi.testclient import TestClient

from wastebin_api.config import Settings
from wastebin_api.errors import StorageError
from wastebin_api.main import create_app


SECURITY_M = "test-m-secret"
SECURITY_K = "test-k-secret"

AUTH_HEADERS = {"m": SECURITY_M, "k": SECURITY_K}

VALID_PAYLOAD = {
    "cmd": "RP",
    "device": "D1",
    "battery": "3.7",
    "time": "2024-01-01T00:00:00",
    "dIndex": "5",
    "data": "42",
}


class FakeGateway:
    """Keeps inserted readings in a list instead of talking to Supabase."""

    def __init__(self, error=None):
        self.records = []
        self.error = error

    async def insert(self, reading):
        if self.error is not None:
            raise self.error
        self.records.append(reading)


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="service-key",
        security_m=SECURITY_M,
        security_k=SECURITY_K,
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(settings, gateway):
    app = create_app(settings=settings, gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(settings):
    gateway = FakeGateway(error=StorageError('null value in column "device_id"'))
    app = create_app(settings=settings, gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client
