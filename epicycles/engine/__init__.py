"""Fourier epicycle engine: shapes → points → coefficients → rotating vectors."""

from epicycles.engine.animation import AnimationClock, AnimationLoop, CancellationToken
from epicycles.engine.catalog import ShapeCatalog, ShapeDescriptor, get_catalog
from epicycles.engine.dft import CoefficientSet, FourierCoefficient, compute_coefficients
from epicycles.engine.errors import EpicycleError, InvalidParameter, InvalidShape
from epicycles.engine.pipeline import ShapePipeline
from epicycles.engine.preprocess import preprocess
from epicycles.engine.reconstruct import Epicycle, ReconstructionResult, reconstruct
from epicycles.engine.registry import generate, generator, get_registry

__all__ = [
    "AnimationClock",
    "AnimationLoop",
    "CancellationToken",
    "ShapeCatalog",
    "ShapeDescriptor",
    "get_catalog",
    "CoefficientSet",
    "FourierCoefficient",
    "compute_coefficients",
    "EpicycleError",
    "InvalidParameter",
    "InvalidShape",
    "ShapePipeline",
    "preprocess",
    "Epicycle",
    "ReconstructionResult",
    "reconstruct",
    "generate",
    "generator",
    "get_registry",
]
