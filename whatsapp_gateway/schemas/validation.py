"""Schemas for phone number validation responses."""

from pydantic import BaseModel


class PhoneValidationSchema(BaseModel):
    number: str
    formatted: str
    valid: bool
    exists: bool | None = None
    error: str | None = None


class ValidationSummarySchema(BaseModel):
    total: int
    valid: int
    invalid: int
    verified: int
    notOnWhatsApp: int
    unverified: int


class ValidateNumbersResponse(BaseModel):
    results: list[PhoneValidationSchema]
    summary: ValidationSummarySchema
