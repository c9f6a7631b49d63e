"""Tests for the grouping projector."""

from formcanvas.engine.projector import project
from formcanvas.models.layout import RowGroup, StandaloneGroup
from tests.conftest import el


def _shape(groups):
    out = []
    for g in groups:
        if isinstance(g, RowGroup):
            out.append((g.row_id, [m.id for m in g.members]))
        else:
            out.append(g.member.id)
    return out


def test_empty():
    assert project([]) == []


def test_standalone_only():
    groups = project([el("A"), el("B")])
    assert all(isinstance(g, StandaloneGroup) for g in groups)
    assert _shape(groups) == ["A", "B"]


def test_mixed_canvas(mixed_canvas):
    assert _shape(project(mixed_canvas)) == [
        "H",
        ("names", ["F", "M", "L"]),
        "E",
        ("secrets", ["P", "Q"]),
    ]


def test_members_sorted_by_row_position():
    seq = [el("C", "r", 1), el("A"), el("B", "r", 0)]
    assert _shape(project(seq)) == [("r", ["B", "C"]), "A"]


def test_row_placed_at_first_member():
    seq = [el("A"), el("B", "r", 0), el("X"), el("C", "r", 1)]
    assert _shape(project(seq)) == ["A", ("r", ["B", "C"]), "X"]


def test_does_not_modify_sequence(mixed_canvas):
    snapshot = list(mixed_canvas)
    project(mixed_canvas)
    assert mixed_canvas == snapshot


def test_row_group_serializes_with_row_id_alias():
    group = project([el("A", "r", 0), el("B", "r", 1)])[0]
    data = group.model_dump(by_alias=True)
    assert data["kind"] == "row"
    assert data["rowId"] == "r"
    assert [m["id"] for m in data["members"]] == ["A", "B"]
