from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from au_postcode_mcp.app.container import Container
from au_postcode_mcp.core.schema import check_address_input
from au_postcode_mcp.core.states import AU_STATES, state_abbreviation


class AddressFormatResult(BaseModel):
    """Outcome of the format checks alone, with no directory lookup."""

    valid: bool = Field(..., description="True when every field passed")
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="One message per failing field (postcode, suburb, state)",
    )


def register_address_tools(mcp: FastMCP, container: Container) -> None:
    validation_service = container.validation_service

    @mcp.tool(
        name="validate_address",
        description=(
            "Check that an Australian postcode, suburb and state belong together, "
            "using the locality directory. An empty state skips the state check."
        ),
    )
    def validate_address(postcode: str, suburb: str, state: str = "") -> dict[str, Any]:
        """
        postcode + suburb (+ state) -> {isValid, message}.

        - postcode: e.g. '2000'
        - suburb: e.g. 'Sydney' (case-insensitive)
        - state: e.g. 'NSW'
        """
        return validation_service.validate(postcode=postcode, suburb=suburb, state=state).to_dict()

    @mcp.tool(
        name="check_address_format",
        description=(
            "Run the format checks on postcode, suburb and state without contacting "
            "the locality directory. Every field is reported separately."
        ),
    )
    def check_address_format(postcode: str, suburb: str, state: str) -> AddressFormatResult:
        errors = check_address_input(postcode, suburb, state)
        return AddressFormatResult(valid=not errors, errors=errors)

    @mcp.tool(
        name="validate_address_form",
        description=(
            "Address form submission: format checks first, then the locality "
            "directory lookup when the input is well formed."
        ),
    )
    def validate_address_form(postcode: str, suburb: str, state: str) -> dict[str, Any]:
        return validation_service.validate_form(postcode=postcode, suburb=suburb, state=state).to_dict()

    @mcp.tool(
        name="get_state_abbreviation",
        description="Map a full Australian state name (e.g. 'New South Wales') to its code.",
    )
    def get_state_abbreviation(state_name: str) -> dict[str, Any]:
        return {"state_name": state_name, "code": state_abbreviation(state_name)}

    @mcp.tool(
        name="list_states",
        description="List the Australian state and territory codes accepted by the form.",
    )
    def list_states() -> list[dict[str, str]]:
        return [{"code": code, "name": name} for code, name in AU_STATES.items()]
