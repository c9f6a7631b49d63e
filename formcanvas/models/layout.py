"""Layout engine value types: pointer geometry, drop zones, grouped view."""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from formcanvas.models.element import FormElement


class DropZone(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    @property
    def is_horizontal(self) -> bool:
        return self in (DropZone.LEFT, DropZone.RIGHT)


class Point(BaseModel):
    x: float
    y: float


class Bounds(BaseModel):
    """Rendered box of the drop target, in the pointer's coordinate space."""

    left: float = 0.0
    top: float = 0.0
    width: float = Field(..., ge=0.0)
    height: float = Field(..., ge=0.0)


class RowGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["row"] = "row"
    row_id: str = Field(..., alias="rowId")
    members: list[FormElement]


class StandaloneGroup(BaseModel):
    kind: Literal["standalone"] = "standalone"
    member: FormElement


LayoutGroup = Annotated[Union[RowGroup, StandaloneGroup], Field(discriminator="kind")]
