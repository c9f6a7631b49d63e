"""Tests for the invariant checker."""

from formcanvas.engine.validation import check_invariants, duplicate_ids
from tests.conftest import el


def test_well_formed(mixed_canvas):
    assert check_invariants(mixed_canvas) == []
    assert duplicate_ids(mixed_canvas) == {}


def test_duplicate_ids():
    issues = check_invariants([el("A"), el("A")])
    assert issues == ["A: appears 2 times"]


def test_duplicate_ids_counts_in_first_seen_order():
    seq = [el("B"), el("A"), el("B"), el("C"), el("A"), el("B")]
    assert duplicate_ids(seq) == {"B": 3, "A": 2}
    assert list(duplicate_ids(seq)) == ["B", "A"]


def test_undersized_row():
    issues = check_invariants([el("A", "r", 0), el("B")])
    assert len(issues) == 1
    assert "row r" in issues[0]


def test_gap_in_positions():
    issues = check_invariants([el("A", "r", 0), el("B", "r", 2)])
    assert len(issues) == 1
    assert "not 0..1" in issues[0]


def test_fractional_positions():
    issues = check_invariants([el("A", "r", 0), el("B", "r", 0.5)])
    assert len(issues) == 1
    assert "fractional" in issues[0]
