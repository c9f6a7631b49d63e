"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from formcanvas.models.element import FormElement
from formcanvas.models.layout import Bounds, DropZone, Point


class ClassifyRequest(BaseModel):
    pointer: Point = Field(..., description="Pointer position")
    bounds: Bounds = Field(..., description="Rendered box of the element under the pointer")


class SequenceRequest(BaseModel):
    elements: list[FormElement] = Field(..., description="Canonical ordered element list")


class DropMove(BaseModel):
    source_id: str = Field(..., description="Element being dragged")
    target_id: str = Field(..., description="Element under the pointer")
    pointer: Point | None = Field(default=None, description="Pointer position at drop time")
    bounds: Bounds | None = Field(default=None, description="Rendered box of the target")
    zone: DropZone | None = Field(
        default=None,
        description="Pre-classified zone; overrides pointer/bounds when given",
    )


class DropRequest(DropMove):
    elements: list[FormElement] = Field(..., description="Canonical ordered element list")


class CreateFormRequest(BaseModel):
    name: str = Field(default="Create account", description="Form title")


class AddElementRequest(BaseModel):
    type: str = Field(..., description="Palette element type, e.g. 'email'")
