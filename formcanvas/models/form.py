"""Form document model — the JSON blob the builder imports, exports and persists."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from formcanvas.models.element import FormElement

Toggle = Literal["Default", "On", "Off"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PreviewSettings(_CamelModel):
    width: Literal["Full"] | int = "Full"
    nesting: bool = True


class ValidationSettings(_CamelModel):
    live_validation: Toggle = "Default"


class ColumnSettings(_CamelModel):
    default: bool = True
    tablet: bool = False
    desktop: bool = False


class LayoutSettings(_CamelModel):
    size: Literal["Default", "Small", "Medium", "Large"] = "Default"
    columns: ColumnSettings = Field(default_factory=ColumnSettings)
    labels: Toggle = "Default"
    placeholders: Toggle = "Default"
    errors: Toggle = "Default"
    messages: Toggle = "Default"


class TermsSettings(_CamelModel):
    enabled: bool = False
    required: bool = False
    text: str = ""
    help_text: str | None = None


class SubmitButtonSettings(_CamelModel):
    enabled: bool = True
    text: str = "Submit"
    styles: dict[str, str] = Field(default_factory=dict)


class FormSettings(_CamelModel):
    preview: PreviewSettings = Field(default_factory=PreviewSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    canvas_styles: dict[str, str] = Field(default_factory=dict)
    terms_and_conditions: TermsSettings = Field(default_factory=TermsSettings)
    submit_button: SubmitButtonSettings = Field(default_factory=SubmitButtonSettings)


class FormConfig(_CamelModel):
    """A whole form: its ordered elements plus presentation settings."""

    id: str = ""
    name: str = "Create account"
    elements: list[FormElement] = Field(default_factory=list)
    settings: FormSettings = Field(default_factory=FormSettings)
