"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0


class EpicycleRange(BaseModel):
    min: int
    optimal: int
    max: int


class ShapeResponse(BaseModel):
    key: str
    name: str
    description: str
    kind: str
    point_count: int
    params: dict[str, float | int] = Field(default_factory=dict)
    epicycles: EpicycleRange
    complexity: str
    harmonics: str = ""
    characteristics: list[str] = Field(default_factory=list)
    color: str = ""


class ShapeListResponse(BaseModel):
    shapes: list[ShapeResponse] = Field(default_factory=list)


class CoefficientResponse(BaseModel):
    frequency: int
    amplitude: float
    phase: float
    real: float
    imag: float


class EnergyShare(BaseModel):
    frequency: int
    amplitude: float
    energy_percent: float


class CoefficientStatsResponse(BaseModel):
    total: int
    max_amplitude: float
    min_amplitude: float
    mean_amplitude: float
    total_energy: float
    dominant_frequency: int
    energy_distribution: list[EnergyShare] = Field(default_factory=list)


class CoefficientSetResponse(BaseModel):
    shape: str
    point_count: int
    total_coefficients: int
    coefficients: list[CoefficientResponse] = Field(default_factory=list)
    stats: CoefficientStatsResponse | None = None


class EpicycleResponse(BaseModel):
    start: list[float]
    end: list[float]
    radius: float
    frequency: int
    angle: float
    amplitude: float
    normalized_amplitude: float


class FrameResponse(BaseModel):
    shape: str
    time: float
    max_count: int
    progress: float
    epicycles: list[EpicycleResponse] = Field(default_factory=list)
    final_point: list[float]
