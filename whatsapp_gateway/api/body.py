"""Request body decoding for routes that check credentials before reading the body."""

from collections.abc import Sequence
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from whatsapp_gateway.core.errors import MalformedRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Turn the first pydantic error into ``Invalid request: <field>: <reason>``."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the "body" root and positional indexes such as a JSON decode offset.
    location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    return f"Invalid request: {location or 'body'}: {first.get('msg', 'invalid value')}"


async def read_json_body(request: Request, schema: type[ModelT]) -> ModelT:
    try:
        data = await request.json()
    except ValueError as exc:
        raise MalformedRequestError("Invalid request: body must be valid JSON") from exc

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise MalformedRequestError(describe_validation_errors(exc.errors())) from exc
