from __future__ import annotations

import re


_WS = re.compile(r"\s+")
_DIGITS = re.compile(r"^[0-9]+$")


def normalize_query(q: str) -> str:
    q = q.strip()
    q = _WS.sub(" ", q)
    return q


def normalize_postcode(value: str | int | None) -> str:
    """
    The directory usually returns postcodes as 4-digit strings, but some
    payloads carry them as numbers (200 instead of "0200"). Pad those back.
    """
    raw = str(value if value is not None else "").strip()
    if _DIGITS.match(raw) and len(raw) < 4:
        return raw.zfill(4)
    return raw


def same_suburb(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()
