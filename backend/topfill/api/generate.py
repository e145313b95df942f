"""POST /api/generate/{pattern} — one seeded pattern fill for a silhouette."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from topfill.engine.generator import generate as run_generation
from topfill.engine.registry import get_registry
from topfill.models.requests import GenerateRequest
from topfill.models.responses import GenerateResponse
from topfill.svg.path_source import PathDataError

router = APIRouter()


@router.post("/generate/{pattern}", response_model=GenerateResponse)
async def generate(pattern: str, req: GenerateRequest) -> GenerateResponse:
    if pattern not in get_registry().names():
        raise HTTPException(status_code=404, detail=f"Unknown pattern: {pattern}")

    start = time.perf_counter()
    try:
        result = run_generation(pattern, req.document, req.to_config(), name=req.name)
    except PathDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000

    return GenerateResponse(
        svg=result.svg,
        bytes=result.bytes,
        pattern=result.pattern,
        meta=result.meta,
        processing_time_ms=round(elapsed, 1),
    )
