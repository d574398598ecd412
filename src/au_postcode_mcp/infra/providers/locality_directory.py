from __future__ import annotations

import logging
from typing import Any

from au_postcode_mcp.core.errors import UpstreamError, ValidationError
from au_postcode_mcp.core.models import Locality
from au_postcode_mcp.core.states import normalize_state
from au_postcode_mcp.core.text import normalize_postcode, normalize_query
from au_postcode_mcp.infra.http import HttpClient

log = logging.getLogger(__name__)


def _pick_str(v: Any) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s if s else None


def extract_locality_items(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Normalize ``localities.locality`` into a list of raw items.

    The directory sends a single object when there is one match, an array when
    there are several, and ``{"localities": ""}`` (or nothing) when there are none.
    """
    localities = payload.get("localities")
    if not isinstance(localities, dict):
        return []

    raw = localities.get("locality")
    if isinstance(raw, dict):
        return [raw]
    if isinstance(raw, list):
        return [item for item in raw if isinstance(item, dict)]
    return []


def to_locality(item: dict[str, Any]) -> Locality | None:
    # live payloads name the suburb "location"
    suburb_name = _pick_str(item.get("location")) or _pick_str(item.get("suburbName"))
    if not suburb_name:
        return None

    return Locality(
        suburb_name=suburb_name,
        state=normalize_state(_pick_str(item.get("state"))),
        postcode=normalize_postcode(item.get("postcode")),
    )


class LocalityDirectoryProvider:
    """Client for the third-party postcode/suburb search service."""

    def __init__(self, *, http: HttpClient, api_url: str) -> None:
        self._http = http
        self._api_url = api_url

    def search(self, postcode: str) -> list[Locality]:
        """
        Look up the localities registered under a postcode.

        Raises:
            ValidationError: the postcode is blank
            UpstreamError: the directory could not be reached or answered badly
        """
        query = normalize_query(postcode)
        if not query:
            raise ValidationError({"postcode": "Postcode is required"})

        try:
            payload = self._http.get_json(self._api_url, params={"q": query})
        except UpstreamError as e:
            log.error("Locality directory error for %s: %s", query, e)
            raise

        localities: list[Locality] = []
        for item in extract_locality_items(payload):
            loc = to_locality(item)
            if loc is None:
                log.debug("Skipping locality without a name: %s", item)
                continue
            localities.append(loc)

        log.debug("Directory returned %d localities for %s", len(localities), query)
        return localities
