"""POST /api/reconstruct — one reconstructed epicycle frame."""

from __future__ import annotations

import math

from fastapi import APIRouter, Depends

from epicycles.config import Settings
from epicycles.dependencies import get_pipeline, get_settings
from epicycles.engine.pipeline import ShapePipeline
from epicycles.engine.reconstruct import reconstruct
from epicycles.models.requests import ReconstructRequest
from epicycles.models.responses import EpicycleResponse, FrameResponse

router = APIRouter()


@router.post("/reconstruct", response_model=FrameResponse)
def reconstruct_frame(
    req: ReconstructRequest,
    pipeline: ShapePipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> FrameResponse:
    max_count = pipeline.catalog.resolve_epicycle_count(req.shape, req.auto, req.max_count)
    coefficients = pipeline.run_shape(req.shape)
    result = reconstruct(
        coefficients,
        req.time,
        max_count,
        target_size=settings.target_visual_size,
    )

    cycle_time = math.fmod(req.time, 2 * math.pi)
    if cycle_time < 0:
        cycle_time += 2 * math.pi

    return FrameResponse(
        shape=req.shape,
        time=req.time,
        max_count=max_count,
        progress=cycle_time / (2 * math.pi) * 100,
        epicycles=[EpicycleResponse(**e.to_dict()) for e in result.epicycles],
        final_point=list(result.final_point),
    )
