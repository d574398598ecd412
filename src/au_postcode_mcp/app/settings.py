from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOCALITY_API_URL = (
    "https://gavg8gilmf.execute-api.ap-southeast-2.amazonaws.com/staging/postcode/search.json"
)


@dataclass
class Settings:
    # Locality directory
    locality_api_url: str
    locality_api_token: str

    # HTTP
    http_timeout_seconds: float
    http_user_agent: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _float(name: str, default: float) -> float:
    v = _clean(os.getenv(name, str(default)))
    return float(v)


def get_settings() -> Settings:
    """
    Token lookup with a legacy fallback:
    - LOCALITY_API_TOKEN if set
    - otherwise AUSPOST_API_KEY
    """
    token = _clean(os.getenv("LOCALITY_API_TOKEN"))
    if not token:
        token = _clean(os.getenv("AUSPOST_API_KEY"))

    if not token:
        raise RuntimeError(
            "Missing LOCALITY_API_TOKEN (or legacy AUSPOST_API_KEY) in environment (.env)."
        )

    return Settings(
        locality_api_url=_clean(os.getenv("LOCALITY_API_URL")) or DEFAULT_LOCALITY_API_URL,
        locality_api_token=token,
        http_timeout_seconds=_float("HTTP_TIMEOUT_SECONDS", 10.0),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "au-postcode-mcp/0.1.0")),
    )
