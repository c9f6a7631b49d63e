"""Form store — one JSON document per form on disk.

Documents are written with the same camelCase keys the builder exports, so a
saved file can be imported back verbatim. Every load passes the elements
through the row integrity repair, so hand-edited or imported files with broken
rows come back well-formed instead of failing. Duplicate element ids cannot be
repaired without losing an element and are rejected.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from formcanvas.engine.integrity import repair
from formcanvas.engine.validation import duplicate_ids
from formcanvas.models.form import FormConfig

logger = logging.getLogger(__name__)

_FORM_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class FormNotFoundError(LookupError):
    def __init__(self, form_id: str) -> None:
        super().__init__(f"Form not found: {form_id}")
        self.form_id = form_id


class InvalidFormError(ValueError):
    """Document that cannot be repaired, e.g. two elements sharing an id."""

    def __init__(self, form_id: str, duplicates: dict[str, int]) -> None:
        listed = ", ".join(f"{element_id} (x{count})" for element_id, count in duplicates.items())
        super().__init__(f"Form {form_id or '<new>'} has duplicate element ids: {listed}")
        self.form_id = form_id
        self.duplicates = duplicates


def new_form_id() -> str:
    return f"form-{uuid.uuid4().hex[:12]}"


def to_document(form: FormConfig) -> dict[str, Any]:
    """Serialize a form to its JSON document shape."""
    return form.model_dump(mode="json", by_alias=True)


def from_document(data: dict[str, Any]) -> FormConfig:
    """Parse a JSON document and repair its row layout.

    Raises pydantic ``ValidationError`` for malformed documents and
    ``InvalidFormError`` when element ids are not unique.
    """
    form = FormConfig.model_validate(data)
    duplicates = duplicate_ids(form.elements)
    if duplicates:
        raise InvalidFormError(form.id, duplicates)
    elements = repair(form.elements)
    if elements != form.elements:
        logger.warning("Repaired row layout while loading form %s", form.id or "<new>")
        form = form.model_copy(update={"elements": elements})
    return form


class FormStore:
    """File-per-form JSON store."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def create(self, name: str = "Create account") -> FormConfig:
        form = FormConfig(id=new_form_id(), name=name)
        self.save(form)
        return form

    def get(self, form_id: str) -> FormConfig:
        path = self._path(form_id)
        if not path.exists():
            raise FormNotFoundError(form_id)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        form = from_document(data)
        # The file name is authoritative
        if form.id != form_id:
            form = form.model_copy(update={"id": form_id})
        return form

    def all(self) -> list[FormConfig]:
        """Every readable form; unreadable files are skipped with a warning."""
        forms = []
        for path in sorted(self.data_dir.glob("*.json")):
            try:
                forms.append(self.get(path.stem))
            except (FormNotFoundError, json.JSONDecodeError, ValidationError, InvalidFormError) as e:
                logger.warning("Skipping unreadable form file %s: %s", path.name, e)
        return forms

    def save(self, form: FormConfig) -> FormConfig:
        if not form.id:
            form = form.model_copy(update={"id": new_form_id()})
        path = self._path(form.id)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(to_document(form), f, indent=2, ensure_ascii=False)
        logger.info("Saved form %s (%d elements)", form.id, len(form.elements))
        return form

    def delete(self, form_id: str) -> None:
        path = self._path(form_id)
        if not path.exists():
            raise FormNotFoundError(form_id)
        path.unlink()
        logger.info("Deleted form %s", form_id)

    def import_form(self, data: dict[str, Any], form_id: str | None = None) -> FormConfig:
        """Store an externally produced document, repairing its layout.

        ``form_id`` overrides any id inside the document; without either a
        fresh id is assigned.
        """
        form = from_document(data)
        if form_id:
            form = form.model_copy(update={"id": form_id})
        return self.save(form)

    def export_form(self, form_id: str) -> dict[str, Any]:
        return to_document(self.get(form_id))

    def _path(self, form_id: str) -> Path:
        if not _FORM_ID_RE.match(form_id):
            raise FormNotFoundError(form_id)
        return self.data_dir / f"{form_id}.json"


# Singleton
_store: FormStore | None = None


def get_form_store() -> FormStore:
    """Get or create the global FormStore singleton."""
    global _store
    if _store is None:
        from formcanvas.config import settings

        _store = FormStore(Path(settings.forms_dir))
    return _store
