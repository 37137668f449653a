"""Phone number validation endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from whatsapp_gateway.api.deps import get_phone_validation_service
from whatsapp_gateway.core.errors import MalformedRequestError
from whatsapp_gateway.models.phone import summarize_validation
from whatsapp_gateway.schemas.validation import ValidateNumbersResponse
from whatsapp_gateway.services.phone_validator import PhoneValidationService

router = APIRouter()


@router.post("/validate-whatsapp", response_model=ValidateNumbersResponse)
async def validate_whatsapp(
    payload: dict[str, Any],
    validation_service: PhoneValidationService = Depends(get_phone_validation_service),
) -> dict[str, Any]:
    """Format and validate numbers; existence is checked only when WhatsApp is configured."""
    numbers = payload.get("numbers")
    if not isinstance(numbers, list) or not all(isinstance(number, str) for number in numbers):
        raise MalformedRequestError("Invalid request: 'numbers' array is required")

    results = await validation_service.validate_numbers(numbers)
    return {
        "results": [result.to_dict() for result in results],
        "summary": summarize_validation(results),
    }
