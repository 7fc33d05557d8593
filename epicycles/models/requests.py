"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReconstructRequest(BaseModel):
    shape: str = Field(..., description="Catalog shape key")
    time: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Animation time in radians of the fundamental",
    )
    max_count: int | None = Field(
        default=None,
        description="Epicycle count limit; required when auto is off",
    )
    auto: bool = Field(default=True, description="Use the catalog's recommended epicycle count")
