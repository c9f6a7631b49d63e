"""Grouping projector — flat element sequence to render-ready rows."""

from __future__ import annotations

from collections.abc import Sequence

from formcanvas.models.element import FormElement
from formcanvas.models.layout import LayoutGroup, RowGroup, StandaloneGroup


def project(sequence: Sequence[FormElement]) -> list[LayoutGroup]:
    """Group row members together, keeping first-occurrence order.

    A row appears where its first member sits in the sequence; its members
    are sorted by row position (flat order breaks ties). Read-only.
    """
    groups: list[LayoutGroup] = []
    rows: dict[str, list[tuple[int, FormElement]]] = {}

    for index, el in enumerate(sequence):
        row_id = el.row_id
        if row_id is None:
            groups.append(StandaloneGroup(member=el))
            continue
        if row_id not in rows:
            rows[row_id] = []
            groups.append(RowGroup(row_id=row_id, members=[]))
        rows[row_id].append((index, el))

    for group in groups:
        if isinstance(group, RowGroup):
            members = sorted(rows[group.row_id], key=lambda m: (m[1].position.row_position, m[0]))
            group.members = [el for _, el in members]

    return groups
