from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dlnaprofile.common.logging import get_logger
from dlnaprofile.common.settings import get_settings
from dlnaprofile.services.api.routers import health, profiles
from dlnaprofile.services.probe.ffprobe_adapter import FFprobeError

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__)


async def ffprobe_error_handler(request: Request, exc: FFprobeError) -> JSONResponse:
    logger.warning("Probe failed (%s): %s", request.url.path, exc.message)
    return JSONResponse(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, content={"detail": exc.message})


def create_app() -> FastAPI:
    get_logger(level=cfg.log_level)
    app = FastAPI(
        title="DLNA Profile API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(FFprobeError, ffprobe_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(profiles.router)
    return app

app = create_app()
