"""Shared pytest fixtures for HTTP-backed search tests."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from daumapi.config import ClientSettings, get_settings

BASE_URL = "https://api.example/v2/search"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("DAUM_BASE_URL", "DAUM_APP_KEY", "DAUM_REQUEST_TIMEOUT_SECONDS", "DAUM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None, base_url=BASE_URL)


@pytest.fixture
def mock_client():
    clients: list[httpx.Client] = []

    def _build(handler: Handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()
