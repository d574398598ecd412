from __future__ import annotations

import logging
from typing import Any

import httpx

from au_postcode_mcp.core.errors import UpstreamError

log = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        bearer_token: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": user_agent, "Content-Type": "application/json"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        self._client = httpx.Client(timeout=timeout_seconds, headers=headers, transport=transport)

    def get_json(self, url: str, *, params: dict[str, Any]) -> dict[str, Any]:
        try:
            r = self._client.get(url, params=params)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            log.warning("HTTP error: %s", e)
            raise UpstreamError(f"Upstream HTTP error: {e}") from e
        except ValueError as e:
            log.warning("Undecodable response from %s: %s", url, e)
            raise UpstreamError(f"Upstream returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            log.warning("Unexpected response type from %s: %s", url, type(data).__name__)
            raise UpstreamError("Upstream returned a non-object JSON body")
        return data

    def close(self) -> None:
        self._client.close()
