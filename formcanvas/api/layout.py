"""POST /api/layout/* — stateless layout engine endpoints.

The caller owns the element list and sends it with every request; nothing is
persisted here.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException

from formcanvas.dependencies import get_pipeline
from formcanvas.engine.geometry import classify
from formcanvas.engine.pipeline import LayoutPipeline, LayoutResult
from formcanvas.engine.projector import project
from formcanvas.engine.validation import check_invariants, duplicate_ids
from formcanvas.models.element import FormElement
from formcanvas.models.requests import ClassifyRequest, DropRequest, SequenceRequest
from formcanvas.models.responses import ClassifyResponse, GroupsResponse, LayoutResponse

router = APIRouter(prefix="/layout")


def _require_unique_ids(elements: Sequence[FormElement]) -> None:
    duplicates = duplicate_ids(elements)
    if duplicates:
        raise HTTPException(
            status_code=422,
            detail=f"Duplicate element ids: {', '.join(sorted(duplicates))}",
        )


def to_layout_response(result: LayoutResult) -> LayoutResponse:
    return LayoutResponse(
        elements=result.elements,
        groups=result.groups,
        zone=result.zone,
        changed=result.changed,
        issues=check_invariants(result.elements),
        processing_time_ms=result.elapsed_ms,
    )


@router.post("/classify", response_model=ClassifyResponse)
async def classify_zone(
    req: ClassifyRequest,
    pipeline: LayoutPipeline = Depends(get_pipeline),
) -> ClassifyResponse:
    return ClassifyResponse(zone=classify(req.pointer, req.bounds, pipeline.config))


@router.post("/drop", response_model=LayoutResponse)
async def drop(
    req: DropRequest,
    pipeline: LayoutPipeline = Depends(get_pipeline),
) -> LayoutResponse:
    _require_unique_ids(req.elements)
    result = pipeline.run_drop(
        req.elements,
        req.source_id,
        req.target_id,
        pointer=req.pointer,
        bounds=req.bounds,
        zone=req.zone,
    )
    return to_layout_response(result)


@router.post("/enforce", response_model=LayoutResponse)
async def enforce_rows(
    req: SequenceRequest,
    pipeline: LayoutPipeline = Depends(get_pipeline),
) -> LayoutResponse:
    _require_unique_ids(req.elements)
    return to_layout_response(pipeline.run_cleanup(req.elements))


@router.post("/project", response_model=GroupsResponse)
async def project_groups(req: SequenceRequest) -> GroupsResponse:
    return GroupsResponse(groups=project(req.elements))
