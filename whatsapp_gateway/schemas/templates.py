"""Schemas for template helpers."""

from pydantic import BaseModel, Field


class TemplateCategorySchema(BaseModel):
    value: str
    label: str


class TemplatePreviewRequest(BaseModel):
    content: str = Field(..., examples=["Olá {{nome}}, sua matrícula é {{matricula}}."])
    data: dict[str, str] | None = Field(default=None, description="Values to use instead of the sample set")


class TemplatePreviewResponse(BaseModel):
    variables: list[str]
    preview: str
