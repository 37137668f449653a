"""Message template helpers."""

from fastapi import APIRouter, Depends

from whatsapp_gateway.api.deps import get_tenant
from whatsapp_gateway.core.tenant import TenantConfig
from whatsapp_gateway.schemas.templates import (
    TemplateCategorySchema,
    TemplatePreviewRequest,
    TemplatePreviewResponse,
)
from whatsapp_gateway.services.template_renderer import extract_variables, preview_template

router = APIRouter(prefix="/templates")


@router.get("/categories", response_model=list[TemplateCategorySchema])
async def list_categories(tenant: TenantConfig = Depends(get_tenant)) -> list[TemplateCategorySchema]:
    return [
        TemplateCategorySchema(value=category.value, label=category.label)
        for category in tenant.template_categories
    ]


@router.post("/preview", response_model=TemplatePreviewResponse)
async def preview(
    payload: TemplatePreviewRequest,
    tenant: TenantConfig = Depends(get_tenant),
) -> TemplatePreviewResponse:
    """Render a template with the caller's data, or the tenant sample values."""
    samples = payload.data if payload.data is not None else tenant.sample_variables()
    return TemplatePreviewResponse(
        variables=extract_variables(payload.content),
        preview=preview_template(payload.content, samples),
    )
