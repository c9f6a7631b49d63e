"""/api/forms — persisted form documents and their canvas edits."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from formcanvas.api.layout import to_layout_response
from formcanvas.dependencies import get_pipeline, get_store
from formcanvas.engine.pipeline import LayoutPipeline
from formcanvas.engine.projector import project
from formcanvas.forms import editor
from formcanvas.forms.store import FormNotFoundError, FormStore, InvalidFormError
from formcanvas.models.element import FormElement
from formcanvas.models.form import FormConfig
from formcanvas.models.requests import AddElementRequest, CreateFormRequest, DropMove
from formcanvas.models.responses import (
    ElementResponse,
    FormListResponse,
    FormResponse,
    FormSummary,
    GroupsResponse,
    LayoutResponse,
)

router = APIRouter(prefix="/forms")


def _load(store: FormStore, form_id: str) -> FormConfig:
    try:
        return store.get(form_id)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidFormError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _form_response(form: FormConfig) -> FormResponse:
    return FormResponse(form=form, groups=project(form.elements))


@router.get("", response_model=FormListResponse)
async def list_forms(store: FormStore = Depends(get_store)) -> FormListResponse:
    return FormListResponse(
        forms=[
            FormSummary(id=f.id, name=f.name, element_count=len(f.elements))
            for f in store.all()
        ]
    )


@router.post("", response_model=FormResponse, status_code=201)
async def create_form(
    req: CreateFormRequest,
    store: FormStore = Depends(get_store),
) -> FormResponse:
    return _form_response(store.create(req.name))


@router.get("/{form_id}", response_model=FormResponse)
async def get_form(form_id: str, store: FormStore = Depends(get_store)) -> FormResponse:
    return _form_response(_load(store, form_id))


@router.put("/{form_id}", response_model=FormResponse)
async def import_form(
    form_id: str,
    document: dict[str, Any],
    store: FormStore = Depends(get_store),
) -> FormResponse:
    """Replace a form with an imported JSON document."""
    try:
        form = store.import_form(document, form_id=form_id)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    except InvalidFormError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _form_response(form)


@router.get("/{form_id}/export")
async def export_form(form_id: str, store: FormStore = Depends(get_store)) -> dict[str, Any]:
    try:
        return store.export_form(form_id)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidFormError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.delete("/{form_id}", status_code=204)
async def delete_form(form_id: str, store: FormStore = Depends(get_store)) -> None:
    try:
        store.delete(form_id)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/{form_id}/groups", response_model=GroupsResponse)
async def form_groups(form_id: str, store: FormStore = Depends(get_store)) -> GroupsResponse:
    return GroupsResponse(groups=project(_load(store, form_id).elements))


@router.post("/{form_id}/elements", response_model=ElementResponse, status_code=201)
async def add_element(
    form_id: str,
    req: AddElementRequest,
    store: FormStore = Depends(get_store),
) -> ElementResponse:
    form = _load(store, form_id)
    try:
        form, element = editor.add_element(form, req.type)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ElementResponse(form=store.save(form), element=element)


@router.patch("/{form_id}/elements/{element_id}", response_model=ElementResponse)
async def update_element(
    form_id: str,
    element_id: str,
    changes: dict[str, Any],
    store: FormStore = Depends(get_store),
) -> ElementResponse:
    """Merge settings into an element. Layout position cannot be changed here."""
    form = _load(store, form_id)
    current = next((el for el in form.elements if el.id == element_id), None)
    if current is None:
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    merged = {**current.model_dump(by_alias=True), **changes, "id": element_id}
    try:
        element = FormElement.model_validate(merged)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e

    form = store.save(editor.update_element(form, element))
    updated = next(el for el in form.elements if el.id == element_id)
    return ElementResponse(form=form, element=updated)


@router.delete("/{form_id}/elements/{element_id}", response_model=FormResponse)
async def delete_element(
    form_id: str,
    element_id: str,
    store: FormStore = Depends(get_store),
    pipeline: LayoutPipeline = Depends(get_pipeline),
) -> FormResponse:
    form = _load(store, form_id)
    try:
        form = editor.delete_element(form, element_id, pipeline=pipeline)
    except editor.ElementNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _form_response(store.save(form))


@router.post("/{form_id}/drop", response_model=LayoutResponse)
async def drop_element(
    form_id: str,
    req: DropMove,
    store: FormStore = Depends(get_store),
    pipeline: LayoutPipeline = Depends(get_pipeline),
) -> LayoutResponse:
    form = _load(store, form_id)
    form, result = editor.drop_element(
        form,
        req.source_id,
        req.target_id,
        pointer=req.pointer,
        bounds=req.bounds,
        zone=req.zone,
        pipeline=pipeline,
    )
    if result.changed:
        store.save(form)
    return to_layout_response(result)
