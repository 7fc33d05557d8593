"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from epicycles import __version__
from epicycles.config import settings
from epicycles.engine.errors import InvalidParameter, InvalidShape

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.epicycles_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _invalid_shape(request: Request, exc: InvalidShape) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc), "known": exc.known})


async def _invalid_parameter(request: Request, exc: InvalidParameter) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "parameter": exc.name})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Fourier Epicycles",
        description="DFT decomposition of closed curves into rotating vectors",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidShape, _invalid_shape)
    app.add_exception_handler(InvalidParameter, _invalid_parameter)

    # Import all generator modules so @generator decorators fire
    from epicycles.engine.registry import load_generators

    load_generators()

    from epicycles.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
