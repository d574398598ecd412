from __future__ import annotations

import re

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from au_postcode_mcp.core.errors import ValidationError
from au_postcode_mcp.core.states import STATE_CODES

_POSTCODE = re.compile(r"[0-9]{4}")

POSTCODE_MIN = 200
POSTCODE_MAX = 9999
SUBURB_MIN_LENGTH = 2
SUBURB_MAX_LENGTH = 100

POSTCODE_FORMAT_MESSAGE = "Postcode must be exactly 4 digits"
POSTCODE_RANGE_MESSAGE = "Postcode must be a valid Australian postcode (0200-9999)"
SUBURB_REQUIRED_MESSAGE = "Suburb is required"
SUBURB_TOO_LONG_MESSAGE = "Suburb name too long"
STATE_MESSAGE = f"State must be one of {', '.join(STATE_CODES)}"


class AddressInput(BaseModel):
    """Shape checks applied to form input before the directory is queried."""

    postcode: str
    suburb: str
    state: str

    @field_validator("postcode")
    @classmethod
    def _check_postcode(cls, v: str) -> str:
        if not _POSTCODE.fullmatch(v):
            raise PydanticCustomError("postcode_format", POSTCODE_FORMAT_MESSAGE)
        if not POSTCODE_MIN <= int(v) <= POSTCODE_MAX:
            raise PydanticCustomError("postcode_range", POSTCODE_RANGE_MESSAGE)
        return v

    @field_validator("suburb")
    @classmethod
    def _check_suburb(cls, v: str) -> str:
        if len(v) < SUBURB_MIN_LENGTH:
            raise PydanticCustomError("suburb_required", SUBURB_REQUIRED_MESSAGE)
        if len(v) > SUBURB_MAX_LENGTH:
            raise PydanticCustomError("suburb_too_long", SUBURB_TOO_LONG_MESSAGE)
        return v

    @field_validator("state")
    @classmethod
    def _check_state(cls, v: str) -> str:
        # upper-cased before the membership test, and kept upper-cased
        v = v.upper()
        if v not in STATE_CODES:
            raise PydanticCustomError("state_code", STATE_MESSAGE)
        return v


def _field_errors(exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        field = str(loc[0])
        # first failure per field wins
        errors.setdefault(field, err.get("msg") or "Invalid value")
    return errors


def parse_address_input(postcode: str, suburb: str, state: str) -> AddressInput:
    """
    Validate all three fields independently and return the normalized input.

    Raises:
        ValidationError: with one message per failing field.
    """
    try:
        return AddressInput(postcode=postcode, suburb=suburb, state=state)
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def check_address_input(postcode: str, suburb: str, state: str) -> dict[str, str]:
    try:
        parse_address_input(postcode, suburb, state)
    except ValidationError as e:
        return e.errors
    return {}
