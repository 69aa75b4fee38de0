from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphlearn.common.logging import get_logger
from graphlearn.common.settings import get_settings
from graphlearn.services.api.routers import health, materials, reviews

logger = get_logger(__name__)


def create_app() -> FastAPI:
    cfg = get_settings()
    app = FastAPI(
        title="Graphlearn API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if cfg.is_dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers
    app.include_router(health.router)
    app.include_router(materials.router)
    app.include_router(reviews.router)

    logger.info("%s API ready (env=%s, prefix=%s)", cfg.app_name, cfg.app_env, cfg.api.prefix)
    return app


app = create_app()
