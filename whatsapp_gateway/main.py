"""FastAPI entrypoint for the WhatsApp gateway."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from whatsapp_gateway.api.body import describe_validation_errors
from whatsapp_gateway.api.middleware import CorsMiddleware
from whatsapp_gateway.api.v1.router import api_router
from whatsapp_gateway.core.errors import GatewayServiceError, GatewayUnconfiguredError
from whatsapp_gateway.core.logging import configure_logging
from whatsapp_gateway.core.settings import settings
from whatsapp_gateway.core.tenant import DEFAULT_TENANT

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.app_version)
app.state.tenant = DEFAULT_TENANT
app.add_middleware(CorsMiddleware)


@app.exception_handler(GatewayUnconfiguredError)
async def handle_unconfigured(request: Request, exc: GatewayUnconfiguredError) -> JSONResponse:
    logger.error("WhatsApp credentials not configured")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details, "mock": True},
    )


@app.exception_handler(GatewayServiceError)
async def handle_service_error(request: Request, exc: GatewayServiceError) -> JSONResponse:
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": describe_validation_errors(exc.errors())})


@app.get("/")
async def health_check() -> dict[str, str]:
    """Simple health endpoint to validate service status."""
    return {"status": "ok", "message": "WhatsApp gateway is running"}


# Mount function routes under the same prefix the CRM front end already calls.
app.include_router(api_router, prefix="/functions/v1")
