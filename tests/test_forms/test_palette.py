"""Tests for palette element creation."""

import pytest

from formcanvas.forms.palette import ELEMENT_TYPES, create_element
from formcanvas.models.element import Standalone


def test_defaults_for_type():
    element = create_element("email")
    assert element.id.startswith("element-")
    assert element.type == "email"
    assert element.label == "New email"
    assert element.placeholder == "Enter email"
    assert element.name == "email"
    assert element.required is False
    assert element.options == []
    assert element.position == Standalone()


def test_ids_are_unique():
    assert len({create_element("text").id for _ in range(50)}) == 50


def test_explicit_id():
    assert create_element("h1", element_id="title").id == "title"


def test_unknown_type_rejected():
    with pytest.raises(ValueError, match="Unknown element type"):
        create_element("hologram")


def test_extra_attributes_kept_in_dump():
    data = create_element("toggle").model_dump(by_alias=True)
    assert data["nestedData"] is False
    assert data["position"] == {"kind": "standalone"}


def test_palette_covers_builder_types():
    for element_type in ("text", "textarea", "select", "2-columns", "static-html"):
        assert element_type in ELEMENT_TYPES
    assert len(set(ELEMENT_TYPES)) == len(ELEMENT_TYPES)
