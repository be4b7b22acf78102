"""Application factory wiring the pipeline, error handling and routes.

No business logic belongs here.
"""

from __future__ import annotations

from fastapi import FastAPI

from storefront_pipeline.config import Settings
from storefront_pipeline.errors import ErrorNormalizer, register_error_handlers
from storefront_pipeline.middleware import PipelineMiddleware
from storefront_pipeline.pipeline import Pipeline
from storefront_pipeline.routes import register_routes
from storefront_pipeline.stages.cors import CorsHeaders
from storefront_pipeline.stages.request_logger import RequestLogger
from storefront_pipeline.storage import MemStorage, Storage


def build_pipeline(settings: Settings) -> Pipeline:
    """Return the default CORS + access-log pipeline for ``settings``."""
    return Pipeline(
        CorsHeaders(
            allow_origin=settings.cors_allow_origin,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
        ),
        RequestLogger(
            log_bodies=settings.log_response_bodies,
            max_line_length=settings.log_line_max_length,
        ),
    )


def create_app(
    settings: Settings | None = None,
    storage: Storage | None = None,
    *,
    pipeline: Pipeline | None = None,
) -> FastAPI:
    """Create and configure the storefront application.

    Logging is configured by the process entry point, not here, so the
    factory can be called repeatedly (e.g. from tests).

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or Settings()
    storage = storage if storage is not None else MemStorage()
    normalizer = ErrorNormalizer()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.storage = storage

    app.add_middleware(
        PipelineMiddleware,
        pipeline=pipeline or build_pipeline(settings),
        normalizer=normalizer,
    )
    register_error_handlers(app, normalizer)
    register_routes(app, storage, prefix=settings.api_prefix)

    return app
