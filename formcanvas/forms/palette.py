"""Field palette — the element types a form can be built from."""

from __future__ import annotations

import uuid

from formcanvas.models.element import FormElement, Standalone

ELEMENT_TYPES: tuple[str, ...] = (
    # Inputs
    "text", "email", "password", "date", "file", "textarea", "url", "phone",
    "hidden-input",
    # Choices
    "checkbox", "radio", "select", "multiselect",
    "checkbox-group", "checkbox-blocks", "checkbox-tabs",
    "radio-group", "radio-blocks", "radio-tabs", "toggle",
    # Sliders
    "slider", "range-slider", "vertical-slider",
    # Uploads
    "file-upload", "multi-file-upload", "image-upload", "multi-image-upload",
    # Static content
    "h1", "h2", "h3", "h4", "p", "paragraph", "quote", "image", "link",
    "divider", "danger-button", "static-html", "gallery",
    # Structure
    "container", "matrix", "matrix-table", "tabs", "steps", "grid",
    "2-columns", "3-columns", "4-columns", "table", "list", "nested-list",
)


def new_element_id() -> str:
    return f"element-{uuid.uuid4().hex}"


def create_element(element_type: str, element_id: str | None = None) -> FormElement:
    """Build a fresh standalone element with the palette defaults for its type."""
    if element_type not in ELEMENT_TYPES:
        raise ValueError(f"Unknown element type: {element_type!r}")

    return FormElement(
        id=element_id or new_element_id(),
        type=element_type,
        label=f"New {element_type}",
        required=False,
        placeholder=f"Enter {element_type}",
        options=[],
        description="",
        name=element_type.lower(),
        nestedData=False,
        position=Standalone(),
    )
