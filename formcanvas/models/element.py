"""Form element model and its position on the canvas."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Standalone(BaseModel):
    """Element laid out on its own line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["standalone"] = "standalone"


class RowMember(BaseModel):
    """Element sharing a horizontal row with at least one sibling."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["row"] = "row"
    row_id: str = Field(..., alias="rowId")
    # Only meaningful relative to the other members of the same row
    row_position: int | float = Field(..., alias="rowPosition")


Position = Annotated[Union[Standalone, RowMember], Field(discriminator="kind")]


class FormElement(BaseModel):
    """A single field on the canvas.

    The layout engine only reads ``id`` and ``position``; every other attribute
    (including unknown keys from imported documents) is carried through as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str
    type: str = "text"
    label: str = ""
    required: bool = False
    placeholder: str | None = None
    options: list[str] = Field(default_factory=list)
    description: str | None = None
    name: str | None = None
    position: Position = Field(default_factory=Standalone)

    @property
    def row_id(self) -> str | None:
        if isinstance(self.position, RowMember):
            return self.position.row_id
        return None

    def standalone(self) -> FormElement:
        """Copy of this element with row membership dropped."""
        return self.model_copy(update={"position": Standalone()})

    def in_row(self, row_id: str, row_position: int | float) -> FormElement:
        """Copy of this element placed in ``row_id`` at ``row_position``."""
        return self.model_copy(
            update={"position": RowMember(row_id=row_id, row_position=row_position)}
        )
