"""Main router for API v1."""

from fastapi import APIRouter

from whatsapp_gateway.api.v1.routes.ai_chat import router as ai_chat_router
from whatsapp_gateway.api.v1.routes.templates import router as templates_router
from whatsapp_gateway.api.v1.routes.validation import router as validation_router
from whatsapp_gateway.api.v1.routes.whatsapp import router as whatsapp_router

api_router = APIRouter()

api_router.include_router(whatsapp_router, tags=["whatsapp"])
api_router.include_router(validation_router, tags=["whatsapp"])
api_router.include_router(ai_chat_router, tags=["ai"])
api_router.include_router(templates_router, tags=["templates"])
