"""
FitZone+ Manager API application setup.

- Loads `.env` and configures logging
- Builds the in-memory gym service (seeded unless configuration says otherwise)
- Registers route modules from `routes/*`
- Maps application errors to JSON responses
"""

import logging

from dotenv import load_dotenv  # type: ignore
from fastapi import FastAPI, Request  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from config import get_config
from config.base import BaseConfig
from logging_config import configure_logging
from services.gym_service import GymService
from shared.exceptions import FitZoneError, create_error_response, handle_exception, status_code_for
from startup import build_service

from routes.classes import router as classes_router
from routes.health import router as health_router
from routes.reports import router as reports_router
from routes.subscriptions import router as subscriptions_router
from routes.trainers import router as trainers_router

_LOG = logging.getLogger(__name__)


def create_app(config: BaseConfig = None, service: GymService = None) -> FastAPI:
    """Application factory; tests pass their own config and service."""
    config = config or get_config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        description="Gym classes, trainers, subscriptions and pricing",
        debug=config.debug,
    )
    app.state.config = config
    app.state.gym = service or build_service(config)

    if config.api.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.api.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(FitZoneError)
    async def _fitzone_error_handler(request: Request, exc: FitZoneError) -> JSONResponse:
        handle_exception(exc, _LOG, context={"path": request.url.path})
        payload = create_error_response(exc, include_details=config.debug)
        return JSONResponse(status_code=status_code_for(exc), content=payload)

    app.include_router(health_router)
    app.include_router(classes_router)
    app.include_router(trainers_router)
    app.include_router(subscriptions_router)
    app.include_router(reports_router)

    for problem in config.validate():
        _LOG.warning("Configuration problem: %s", problem)

    return app


# ───────────────────── env / init ─────────────────────
load_dotenv()
configure_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    api = app.state.config.api
    uvicorn.run(app, host=api.host, port=api.port)
