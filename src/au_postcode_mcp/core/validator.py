from __future__ import annotations

from collections.abc import Iterable

from au_postcode_mcp.core.models import Locality, ValidationResult
from au_postcode_mcp.core.text import same_suburb

VALID_MESSAGE = "The postcode, suburb, and state input are valid."


def find_locality(localities: Iterable[Locality], suburb: str) -> Locality | None:
    """First locality whose suburb name matches case-insensitively."""
    for loc in localities:
        if same_suburb(loc.suburb_name, suburb):
            return loc
    return None


def validate_localities(
    *,
    postcode: str,
    suburb: str,
    state: str,
    localities: Iterable[Locality],
) -> ValidationResult:
    """
    Reconcile postcode, suburb and state against the directory's localities.

    Args:
        postcode: postcode the localities were looked up with
        suburb: suburb entered by the user
        state: state code entered by the user; empty means no state constraint
        localities: localities the directory returned for the postcode

    Returns:
        ValidationResult. Mismatches are reported as is_valid=False, never raised.
    """
    localities = list(localities)

    if not localities:
        return ValidationResult(
            is_valid=False,
            message=f'Postcode "{postcode}" is invalid.',
        )

    matched = find_locality(localities, suburb)
    if matched is None:
        return ValidationResult(
            is_valid=False,
            message=f'The postcode {postcode} does not match the suburb "{suburb}".',
        )

    if state and matched.state != state:
        return ValidationResult(
            is_valid=False,
            message=f"The suburb {suburb} does not exist in the state ({state}).",
        )

    return ValidationResult(is_valid=True, message=VALID_MESSAGE)
