"""Phone number validation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PhoneValidationResult:
    number: str
    formatted: str
    valid: bool
    exists: bool | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "number": self.number,
            "formatted": self.formatted,
            "valid": self.valid,
            "exists": self.exists,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def summarize_validation(results: list[PhoneValidationResult]) -> dict[str, int]:
    return {
        "total": len(results),
        "valid": sum(1 for result in results if result.valid),
        "invalid": sum(1 for result in results if not result.valid),
        "verified": sum(1 for result in results if result.exists is True),
        "notOnWhatsApp": sum(1 for result in results if result.exists is False),
        "unverified": sum(1 for result in results if result.exists is None),
    }
