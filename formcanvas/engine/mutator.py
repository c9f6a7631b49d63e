"""Layout mutator — moves one element relative to another.

Horizontal drops (left/right) put the source into a row with the target;
vertical drops (above/below) make the source standalone and splice it into
the top-level order. Row members are kept dense: a member joining an existing
row is given a fractional position (target ± 0.5) and the whole row is then
renumbered 0..n-1, so no fractional position ever leaves this module.

Every function here returns a new list and never modifies its input. Rows that
drop to a single member are left for ``integrity.enforce`` to dissolve.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence

from formcanvas.engine.config import LayoutConfig
from formcanvas.models.element import FormElement, RowMember
from formcanvas.models.layout import DropZone

logger = logging.getLogger(__name__)

_HALF_STEP = 0.5


def mutate(
    sequence: Sequence[FormElement],
    source_id: str,
    target_id: str,
    zone: DropZone | None,
    config: LayoutConfig | None = None,
    row_id_factory: Callable[[], str] | None = None,
) -> list[FormElement]:
    """Move ``source_id`` next to ``target_id`` according to ``zone``.

    Dropping onto itself, referencing an unknown id or passing no zone is a
    no-op: the returned list holds the same elements in the same order.
    """
    if zone is None:
        logger.debug("Mutate skipped: no drop zone resolved")
        return list(sequence)
    if source_id == target_id:
        logger.debug("Mutate skipped: %s dropped onto itself", source_id)
        return list(sequence)

    source = _find(sequence, source_id)
    if source is None or _find(sequence, target_id) is None:
        logger.debug("Mutate skipped: unknown element (%s -> %s)", source_id, target_id)
        return list(sequence)

    remaining = _without(sequence, source)
    target = _find(remaining, target_id)

    if zone.is_horizontal:
        cfg = config or LayoutConfig()
        factory = row_id_factory or (lambda: f"{cfg.row_id_prefix}{uuid.uuid4().hex[:12]}")
        return _place_beside(remaining, source, target, zone, factory)
    return _place_vertically(remaining, source.standalone(), target, zone)


def remove(sequence: Sequence[FormElement], element_id: str) -> list[FormElement]:
    """Delete one element; its former row is renumbered but not dissolved."""
    element = _find(sequence, element_id)
    if element is None:
        logger.debug("Remove skipped: unknown element %s", element_id)
        return list(sequence)
    return _without(sequence, element)


def renumber_row(sequence: Sequence[FormElement], row_id: str) -> list[FormElement]:
    """Renumber the members of ``row_id`` to 0..n-1, ordered by current position.

    Members with equal positions keep their flat sequence order.
    """
    members = [
        (index, el) for index, el in enumerate(sequence)
        if isinstance(el.position, RowMember) and el.position.row_id == row_id
    ]
    members.sort(key=lambda m: (m[1].position.row_position, m[0]))
    ranks = {el.id: rank for rank, (_, el) in enumerate(members)}

    renumbered = []
    for el in sequence:
        rank = ranks.get(el.id)
        if rank is not None and el.position.row_position != rank:
            el = el.in_row(row_id, rank)
        renumbered.append(el)
    return renumbered


def _place_beside(
    remaining: list[FormElement],
    source: FormElement,
    target: FormElement,
    zone: DropZone,
    new_row_id: Callable[[], str],
) -> list[FormElement]:
    if isinstance(target.position, RowMember):
        row_id = target.position.row_id
        offset = -_HALF_STEP if zone is DropZone.LEFT else _HALF_STEP
        moved = source.in_row(row_id, target.position.row_position + offset)
        updated = list(remaining)
    else:
        row_id = new_row_id()
        source_rank, target_rank = (0, 1) if zone is DropZone.LEFT else (1, 0)
        moved = source.in_row(row_id, source_rank)
        updated = [
            el.in_row(row_id, target_rank) if el.id == target.id else el
            for el in remaining
        ]

    at = _index_of(updated, target.id)
    if zone is DropZone.RIGHT:
        at += 1
    updated.insert(at, moved)
    return renumber_row(updated, row_id)


def _place_vertically(
    remaining: list[FormElement],
    source: FormElement,
    target: FormElement,
    zone: DropZone,
) -> list[FormElement]:
    # A row renders as one line, so above/below a member means above/below the row
    row_id = target.row_id
    if row_id is None:
        start = _index_of(remaining, target.id)
    else:
        start = next(i for i, el in enumerate(remaining) if el.row_id == row_id)

    at = start
    if zone is DropZone.BELOW:
        # The row is drawn at its first member; skip only the run of members there
        at += 1
        while row_id is not None and at < len(remaining) and remaining[at].row_id == row_id:
            at += 1
    updated = list(remaining)
    updated.insert(at, source)
    return updated


def _without(sequence: Sequence[FormElement], element: FormElement) -> list[FormElement]:
    remaining = [el for el in sequence if el.id != element.id]
    if element.row_id is not None:
        remaining = renumber_row(remaining, element.row_id)
    return remaining


def _find(sequence: Sequence[FormElement], element_id: str) -> FormElement | None:
    for el in sequence:
        if el.id == element_id:
            return el
    return None


def _index_of(sequence: Sequence[FormElement], element_id: str) -> int:
    for index, el in enumerate(sequence):
        if el.id == element_id:
            return index
    raise ValueError(f"Element not in sequence: {element_id}")
