"""Layout pipeline — runs a drop or delete through the engine in order.

classify → mutate → enforce → project. Mutation output may hold a one-member
row until enforce runs, so callers should go through this pipeline rather than
calling the steps individually.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from formcanvas.engine.config import LayoutConfig
from formcanvas.engine.geometry import classify
from formcanvas.engine.integrity import enforce
from formcanvas.engine.mutator import mutate, remove
from formcanvas.engine.projector import project
from formcanvas.models.element import FormElement
from formcanvas.models.layout import Bounds, DropZone, LayoutGroup, Point

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Outcome of one pipeline run."""

    elements: list[FormElement]
    groups: list[LayoutGroup] = field(default_factory=list)
    zone: DropZone | None = None
    changed: bool = False
    elapsed_ms: float = 0.0


class LayoutPipeline:
    """Orchestrates the layout engine steps for one interaction."""

    def __init__(
        self,
        config: LayoutConfig | None = None,
        row_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.config = config or LayoutConfig()
        self.row_id_factory = row_id_factory

    def run_drop(
        self,
        sequence: Sequence[FormElement],
        source_id: str,
        target_id: str,
        pointer: Point | None = None,
        bounds: Bounds | None = None,
        zone: DropZone | None = None,
    ) -> LayoutResult:
        """Drop ``source_id`` on ``target_id``.

        An explicit ``zone`` wins; otherwise it is classified from pointer and
        bounds. With neither, nothing moves.
        """
        start = time.perf_counter()

        if zone is None and pointer is not None and bounds is not None:
            zone = classify(pointer, bounds, self.config)

        moved = mutate(
            sequence,
            source_id,
            target_id,
            zone,
            config=self.config,
            row_id_factory=self.row_id_factory,
        )
        elements = enforce(moved)
        result = self._finish(sequence, elements, start, zone=zone)

        logger.info(
            "Drop %s -> %s (%s): %s in %.1fms",
            source_id,
            target_id,
            zone.value if zone is not None else "no zone",
            "changed" if result.changed else "unchanged",
            result.elapsed_ms,
        )
        return result

    def run_delete(self, sequence: Sequence[FormElement], element_id: str) -> LayoutResult:
        """Remove one element and clean up the row it leaves behind."""
        start = time.perf_counter()
        elements = enforce(remove(sequence, element_id))
        result = self._finish(sequence, elements, start)
        logger.info("Delete %s: %s", element_id, "changed" if result.changed else "unchanged")
        return result

    def run_cleanup(self, sequence: Sequence[FormElement]) -> LayoutResult:
        """Enforce row integrity on an externally modified sequence."""
        start = time.perf_counter()
        return self._finish(sequence, enforce(sequence), start)

    @staticmethod
    def _finish(
        before: Sequence[FormElement],
        after: list[FormElement],
        start: float,
        zone: DropZone | None = None,
    ) -> LayoutResult:
        return LayoutResult(
            elements=after,
            groups=project(after),
            zone=zone,
            changed=list(before) != after,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
        )


def create_pipeline(config: LayoutConfig | None = None) -> LayoutPipeline:
    """Factory function for creating a pipeline instance."""
    return LayoutPipeline(config=config)
