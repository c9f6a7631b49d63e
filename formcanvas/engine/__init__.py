"""FormCanvas layout engine."""

from formcanvas.engine.geometry import classify
from formcanvas.engine.integrity import enforce, normalize, repair
from formcanvas.engine.mutator import mutate, remove
from formcanvas.engine.pipeline import LayoutPipeline, LayoutResult, create_pipeline
from formcanvas.engine.projector import project
from formcanvas.engine.validation import check_invariants

__all__ = [
    "classify",
    "mutate",
    "remove",
    "enforce",
    "normalize",
    "repair",
    "project",
    "check_invariants",
    "LayoutPipeline",
    "LayoutResult",
    "create_pipeline",
]
