"""FastAPI dependency injection."""

from __future__ import annotations

from formcanvas.engine.pipeline import LayoutPipeline, create_pipeline
from formcanvas.forms.store import FormStore, get_form_store


def get_store() -> FormStore:
    return get_form_store()


def get_pipeline() -> LayoutPipeline:
    return create_pipeline()
