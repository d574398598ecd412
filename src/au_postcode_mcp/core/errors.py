from __future__ import annotations


class PostcodeError(Exception):
    """Base error for au-postcode-mcp."""


class UpstreamError(PostcodeError):
    """Raised when the locality directory fails."""


class ValidationError(PostcodeError):
    """Raised when address input fails the format checks."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Invalid address input ({detail})")
