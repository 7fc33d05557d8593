"""GET /api/shapes — catalog entries and their coefficient sets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from epicycles.dependencies import get_pipeline, get_shape_catalog
from epicycles.engine.catalog import ShapeCatalog, ShapeDescriptor
from epicycles.engine.dft import coefficient_stats
from epicycles.engine.pipeline import ShapePipeline
from epicycles.models.responses import (
    CoefficientResponse,
    CoefficientSetResponse,
    CoefficientStatsResponse,
    ShapeListResponse,
    ShapeResponse,
)

router = APIRouter()


def _shape_response(d: ShapeDescriptor) -> ShapeResponse:
    return ShapeResponse.model_validate(d.to_dict())


@router.get("/shapes", response_model=ShapeListResponse)
def list_shapes(catalog: ShapeCatalog = Depends(get_shape_catalog)) -> ShapeListResponse:
    return ShapeListResponse(shapes=[_shape_response(d) for d in catalog.values()])


@router.get("/shapes/{key}", response_model=ShapeResponse)
def get_shape(key: str, catalog: ShapeCatalog = Depends(get_shape_catalog)) -> ShapeResponse:
    return _shape_response(catalog.lookup(key))


@router.get("/shapes/{key}/coefficients", response_model=CoefficientSetResponse)
def get_coefficients(
    key: str,
    limit: int | None = Query(default=None, gt=0, description="Return only the leading terms"),
    pipeline: ShapePipeline = Depends(get_pipeline),
) -> CoefficientSetResponse:
    # Sync endpoint: FastAPI runs it in the threadpool, the O(N²) DFT stays off the event loop
    coefficients = pipeline.run_shape(key)
    shown = coefficients.top(limit) if limit is not None else coefficients
    stats = coefficient_stats(coefficients)

    return CoefficientSetResponse(
        shape=key,
        point_count=coefficients.point_count,
        total_coefficients=len(coefficients),
        coefficients=[CoefficientResponse(**c.to_dict()) for c in shown],
        stats=CoefficientStatsResponse.model_validate(stats) if stats else None,
    )
