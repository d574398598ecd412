from __future__ import annotations

AU_STATES: dict[str, str] = {
    "ACT": "Australian Capital Territory",
    "NSW": "New South Wales",
    "NT": "Northern Territory",
    "QLD": "Queensland",
    "SA": "South Australia",
    "TAS": "Tasmania",
    "VIC": "Victoria",
    "WA": "Western Australia",
}

STATE_CODES: tuple[str, ...] = tuple(AU_STATES)


def normalize_state(value: str | None) -> str:
    return (value or "").strip().upper()


def state_abbreviation(full_name: str | None) -> str | None:
    """
    Map a full state name (as returned by reverse geocoders) to its code.

    "New South Wales" -> "NSW". Unknown names return None.
    """
    wanted = (full_name or "").strip()
    for code, name in AU_STATES.items():
        if name == wanted:
            return code
    return None
