"""Best-effort Brazilian WhatsApp number formatting and validation."""

from __future__ import annotations

import logging
import re

from whatsapp_gateway.interfaces.messaging_provider import MessagingProvider
from whatsapp_gateway.models.phone import PhoneValidationResult

logger = logging.getLogger(__name__)

BRAZIL_COUNTRY_CODE = "55"
MOBILE_FIRST_DIGITS = frozenset("6789")

_NON_DIGITS = re.compile(r"\D")


def format_brazilian_number(number: str) -> str:
    """Normalize to ``55`` + area code + local number.

    Twelve-digit mobile numbers (local part starting with 6-9) get the
    ninth digit inserted after the area code.
    """
    cleaned = _NON_DIGITS.sub("", number).lstrip("0")
    if not cleaned.startswith(BRAZIL_COUNTRY_CODE):
        cleaned = BRAZIL_COUNTRY_CODE + cleaned

    if len(cleaned) == 12 and cleaned[4] in MOBILE_FIRST_DIGITS:
        cleaned = cleaned[:4] + "9" + cleaned[4:]
    return cleaned


def validate_number(number: str) -> str | None:
    """Return an error description, or ``None`` when the number looks valid."""
    cleaned = _NON_DIGITS.sub("", number)

    if len(cleaned) < 10:
        return "Número muito curto"
    if len(cleaned) > 15:
        return "Número muito longo"

    if cleaned.startswith(BRAZIL_COUNTRY_CODE):
        without_country = cleaned[2:]
        area_code = int(without_country[:2])
        if area_code < 11 or area_code > 99:
            return "DDD inválido"
        local_number = without_country[2:]
        if len(local_number) not in (8, 9):
            return "Número local inválido"
    return None


class PhoneValidationService:
    """Validates numbers and, when a provider is available, checks they exist on WhatsApp."""

    def __init__(self, messaging_provider: MessagingProvider | None = None) -> None:
        self.messaging_provider = messaging_provider

    async def validate_numbers(self, numbers: list[str]) -> list[PhoneValidationResult]:
        logger.info("Validating numbers: count=%d", len(numbers))
        results: list[PhoneValidationResult] = []
        for number in numbers:
            formatted = format_brazilian_number(number)
            error = validate_number(formatted)
            exists: bool | None = None
            if error is None and self.messaging_provider is not None:
                exists = await self.messaging_provider.contact_exists(formatted)
            results.append(
                PhoneValidationResult(
                    number=number,
                    formatted=formatted,
                    valid=error is None,
                    exists=exists,
                    error=error,
                )
            )
        return results
