"""Shared test fixtures and element builders."""

from __future__ import annotations

import itertools

import pytest

from formcanvas.models.element import FormElement, RowMember


def el(element_id: str, row: str | None = None, pos: float | None = None, **attrs) -> FormElement:
    """Build an element; pass ``row`` and ``pos`` for a row member."""
    if row is None:
        return FormElement(id=element_id, **attrs)
    return FormElement(id=element_id, **attrs).in_row(row, pos)


def ids(sequence: list[FormElement]) -> list[str]:
    return [e.id for e in sequence]


def rows(sequence: list[FormElement]) -> dict[str, dict[str, float]]:
    """{row_id: {element_id: row_position}} for every row member."""
    result: dict[str, dict[str, float]] = {}
    for e in sequence:
        if isinstance(e.position, RowMember):
            result.setdefault(e.position.row_id, {})[e.id] = e.position.row_position
    return result


def by_id(sequence: list[FormElement], element_id: str) -> FormElement:
    return next(e for e in sequence if e.id == element_id)


@pytest.fixture
def row_id_factory():
    """Deterministic row ids: row-new-1, row-new-2, ..."""
    counter = itertools.count(1)
    return lambda: f"row-new-{next(counter)}"


@pytest.fixture
def two_standalone() -> list[FormElement]:
    return [el("A"), el("B")]


@pytest.fixture
def row_bc_and_a() -> list[FormElement]:
    """Row {B:0, C:1} followed by standalone A."""
    return [el("B", "r1", 0), el("C", "r1", 1), el("A")]


@pytest.fixture
def row_bc_and_d() -> list[FormElement]:
    """Row {B:0, C:1} followed by standalone D."""
    return [el("B", "r1", 0), el("C", "r1", 1), el("D")]


@pytest.fixture
def mixed_canvas() -> list[FormElement]:
    """Heading, a three-member row, a standalone field, a two-member row."""
    return [
        el("H", type="h1", label="Sign up"),
        el("F", "names", 0, type="text", label="First name"),
        el("M", "names", 1, type="text", label="Middle name"),
        el("L", "names", 2, type="text", label="Last name"),
        el("E", type="email", label="Email"),
        el("P", "secrets", 0, type="password", label="Password"),
        el("Q", "secrets", 1, type="password", label="Confirm"),
    ]
