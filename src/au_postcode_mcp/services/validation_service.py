from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from au_postcode_mcp.core.errors import UpstreamError, ValidationError
from au_postcode_mcp.core.models import Locality, ValidationResult
from au_postcode_mcp.core.schema import parse_address_input
from au_postcode_mcp.core.text import normalize_query
from au_postcode_mcp.core.validator import validate_localities
from au_postcode_mcp.infra.providers.locality_directory import LocalityDirectoryProvider

log = logging.getLogger(__name__)

LOOKUP_FAILED_MESSAGE = "Failed to validate address. Please try again later."
INVALID_INPUT_MESSAGE = "Invalid address input."


@dataclass(frozen=True)
class FormValidationResult:
    is_valid: bool
    message: str
    errors: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "message": self.message,
            "errors": dict(self.errors),
        }


class AddressValidationService:
    def __init__(self, *, directory: LocalityDirectoryProvider) -> None:
        self._directory = directory

    def validate(self, *, postcode: str, suburb: str, state: str = "") -> ValidationResult:
        """
        Check a postcode/suburb/state combination against the locality directory.

        One lookup by postcode, no retry. A directory failure becomes a
        generic retry-later verdict instead of an exception.
        """
        localities: list[Locality] = []
        # blank postcode: nothing to look up
        if normalize_query(postcode):
            try:
                localities = self._directory.search(postcode)
            except UpstreamError as e:
                log.error("Validation error: %s", e)
                return ValidationResult(is_valid=False, message=LOOKUP_FAILED_MESSAGE)

        result = validate_localities(
            postcode=postcode,
            suburb=suburb,
            state=state,
            localities=localities,
        )
        log.info(
            "Validated postcode=%s suburb=%r state=%s valid=%s",
            postcode,
            suburb,
            state,
            result.is_valid,
        )
        return result

    def validate_form(self, *, postcode: str, suburb: str, state: str) -> FormValidationResult:
        """
        Form submit flow: format checks first, then the directory lookup.

        Malformed input is reported per field and never reaches the directory.
        """
        try:
            address = parse_address_input(postcode, suburb, state)
        except ValidationError as e:
            log.info("Rejected address input: %s", e.errors)
            return FormValidationResult(
                is_valid=False,
                message=INVALID_INPUT_MESSAGE,
                errors=e.errors,
            )

        result = self.validate(postcode=address.postcode, suburb=address.suburb, state=address.state)
        return FormValidationResult(is_valid=result.is_valid, message=result.message, errors={})
