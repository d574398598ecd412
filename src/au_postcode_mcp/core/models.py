from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Locality:
    suburb_name: str
    state: str
    postcode: str


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "message": self.message,
        }
