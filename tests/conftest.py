import pytest
from fastapi.testclient import TestClient

from iptools.main import create_app

ENV_VARS = (
    "ANALYTICS_ID",
    "PUBLIC_ORIGIN",
    "HOST",
    "PORT",
    "FORWARDED_ALLOW_IPS",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    """Run every test against the default configuration."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(), base_url="https://testserver")
