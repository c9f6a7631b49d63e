"""Row integrity — dissolves rows that no longer have two members."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from formcanvas.engine.mutator import renumber_row
from formcanvas.models.element import FormElement

logger = logging.getLogger(__name__)

MIN_ROW_MEMBERS = 2


def enforce(sequence: Sequence[FormElement]) -> list[FormElement]:
    """Reset members of undersized rows to standalone.

    Rows with enough members are returned untouched, normalized or not.
    Idempotent and safe to run after any external change (delete, import).
    """
    sizes = Counter(el.row_id for el in sequence if el.row_id is not None)
    undersized = {row_id for row_id, count in sizes.items() if count < MIN_ROW_MEMBERS}
    if not undersized:
        return list(sequence)

    logger.debug("Dissolving %d undersized row(s): %s", len(undersized), sorted(undersized))
    return [el.standalone() if el.row_id in undersized else el for el in sequence]


def normalize(sequence: Sequence[FormElement]) -> list[FormElement]:
    """Renumber every row to a dense 0..n-1 run.

    Used when loading documents that were not produced by the mutator
    (gaps, duplicates or fractional positions).
    """
    result = list(sequence)
    seen: set[str] = set()
    for el in sequence:
        row_id = el.row_id
        if row_id is None or row_id in seen:
            continue
        seen.add(row_id)
        result = renumber_row(result, row_id)
    return result


def repair(sequence: Sequence[FormElement]) -> list[FormElement]:
    """Full load-time cleanup: dissolve undersized rows, then renumber the rest."""
    return normalize(enforce(sequence))
