"""Check a sequence against the layout invariants."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence

from formcanvas.engine.integrity import MIN_ROW_MEMBERS
from formcanvas.models.element import FormElement, RowMember


def duplicate_ids(sequence: Sequence[FormElement]) -> dict[str, int]:
    """Ids that occur more than once, with their counts, in first-seen order."""
    id_counts = Counter(el.id for el in sequence)
    return {element_id: count for element_id, count in id_counts.items() if count > 1}


def check_invariants(sequence: Sequence[FormElement]) -> list[str]:
    """Return a list of human-readable issues; empty means well-formed."""
    issues = [
        f"{element_id}: appears {count} times"
        for element_id, count in duplicate_ids(sequence).items()
    ]

    rows: dict[str, list[FormElement]] = defaultdict(list)
    for el in sequence:
        if isinstance(el.position, RowMember):
            rows[el.position.row_id].append(el)

    for row_id, members in rows.items():
        if len(members) < MIN_ROW_MEMBERS:
            issues.append(f"row {row_id}: only {len(members)} member(s)")
            continue

        positions = [m.position.row_position for m in members]
        fractional = [p for p in positions if not float(p).is_integer()]
        if fractional:
            issues.append(f"row {row_id}: fractional positions {sorted(fractional)}")
        elif sorted(positions) != list(range(len(members))):
            issues.append(f"row {row_id}: positions {sorted(positions)} are not 0..{len(members) - 1}")

    return issues
