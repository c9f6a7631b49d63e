"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from formcanvas.models.element import FormElement
from formcanvas.models.form import FormConfig
from formcanvas.models.layout import DropZone, LayoutGroup


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    element_types: int = 0


class PaletteResponse(BaseModel):
    element_types: list[str] = Field(default_factory=list)


class ClassifyResponse(BaseModel):
    zone: DropZone


class GroupsResponse(BaseModel):
    groups: list[LayoutGroup] = Field(default_factory=list)


class LayoutResponse(BaseModel):
    elements: list[FormElement]
    groups: list[LayoutGroup] = Field(default_factory=list)
    zone: DropZone | None = None
    changed: bool = False
    issues: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class FormSummary(BaseModel):
    id: str
    name: str
    element_count: int = 0


class FormListResponse(BaseModel):
    forms: list[FormSummary] = Field(default_factory=list)


class FormResponse(BaseModel):
    form: FormConfig
    groups: list[LayoutGroup] = Field(default_factory=list)


class ElementResponse(BaseModel):
    form: FormConfig
    element: FormElement
