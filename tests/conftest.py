from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from au_postcode_mcp.infra.http import HttpClient
from au_postcode_mcp.infra.providers.locality_directory import LocalityDirectoryProvider
from au_postcode_mcp.services.validation_service import AddressValidationService

API_URL = "https://directory.test/postcode/search.json"

Handler = Callable[[httpx.Request], httpx.Response]


def json_handler(payload: object, status_code: int = 200, calls: list[httpx.Request] | None = None) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def make_directory():
    clients: list[HttpClient] = []

    def _make(handler: Handler) -> LocalityDirectoryProvider:
        http = HttpClient(
            timeout_seconds=1.0,
            user_agent="au-postcode-mcp/test",
            bearer_token="test-token",
            transport=httpx.MockTransport(handler),
        )
        clients.append(http)
        return LocalityDirectoryProvider(http=http, api_url=API_URL)

    yield _make

    for c in clients:
        c.close()


@pytest.fixture
def make_service(make_directory):
    def _make(handler: Handler) -> AddressValidationService:
        return AddressValidationService(directory=make_directory(handler))

    return _make
