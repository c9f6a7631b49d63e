"""Form editing operations — palette drops, settings updates, deletes, layout drags.

Each function takes a ``FormConfig`` and returns a new one; layout changes go
through the engine pipeline so rows stay well-formed.
"""

from __future__ import annotations

import logging

from formcanvas.engine.pipeline import LayoutPipeline, LayoutResult, create_pipeline
from formcanvas.forms.palette import create_element
from formcanvas.models.element import FormElement
from formcanvas.models.form import FormConfig
from formcanvas.models.layout import Bounds, DropZone, Point

logger = logging.getLogger(__name__)


class ElementNotFoundError(LookupError):
    def __init__(self, element_id: str) -> None:
        super().__init__(f"Element not found: {element_id}")
        self.element_id = element_id


def add_element(form: FormConfig, element_type: str) -> tuple[FormConfig, FormElement]:
    """Append a new palette element to the bottom of the form."""
    element = create_element(element_type)
    logger.info("Added %s element %s to form %s", element_type, element.id, form.id)
    return form.model_copy(update={"elements": [*form.elements, element]}), element


def update_element(form: FormConfig, element: FormElement) -> FormConfig:
    """Replace an element's settings, keeping its current layout position."""
    for index, existing in enumerate(form.elements):
        if existing.id == element.id:
            break
    else:
        raise ElementNotFoundError(element.id)

    updated = element.model_copy(update={"position": existing.position})
    elements = list(form.elements)
    elements[index] = updated
    return form.model_copy(update={"elements": elements})


def delete_element(
    form: FormConfig,
    element_id: str,
    pipeline: LayoutPipeline | None = None,
) -> FormConfig:
    if not any(el.id == element_id for el in form.elements):
        raise ElementNotFoundError(element_id)

    result = (pipeline or create_pipeline()).run_delete(form.elements, element_id)
    return form.model_copy(update={"elements": result.elements})


def drop_element(
    form: FormConfig,
    source_id: str,
    target_id: str,
    pointer: Point | None = None,
    bounds: Bounds | None = None,
    zone: DropZone | None = None,
    pipeline: LayoutPipeline | None = None,
) -> tuple[FormConfig, LayoutResult]:
    """Drag one element onto another. Stale ids are a silent no-op."""
    result = (pipeline or create_pipeline()).run_drop(
        form.elements, source_id, target_id, pointer=pointer, bounds=bounds, zone=zone
    )
    return form.model_copy(update={"elements": result.elements}), result
