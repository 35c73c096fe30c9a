"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pulse.config import get_settings
from pulse.errors import InvalidInput, PulseError
from pulse.log_buffer import install_log_buffer_handler
from pulse.models import ErrorResponse
from pulse.routers import (
    health_router,
    survey_router,
    scoring_router,
    alerts_router,
    team_router,
    logs_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(colors=False),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting HR Pulse...")
    settings = get_settings()
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    logger.info(f"Store backend: {settings.store_backend}")
    yield
    logger.info("Shutting down HR Pulse...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    install_log_buffer_handler(settings.log_buffer_max_lines)

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## HR Pulse API

        Daily pulse surveys turned into employee risk signals.

        ### Features:
        - Weighted survey scoring with low / medium / high risk levels
        - Seven-day trend analysis of score history
        - Alert inbox with read tracking
        - Team risk distribution for managers, HR and admins
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(survey_router)
    app.include_router(scoring_router)
    app.include_router(alerts_router)
    app.include_router(team_router)
    app.include_router(logs_router)

    @app.exception_handler(PulseError)
    async def pulse_error_handler(request: Request, exc: PulseError):
        if exc.status_code >= 500:
            logger.error(f"{exc.code}: {exc.message}")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = InvalidInput("Invalid request")
        body = ErrorResponse(
            detail=error.message,
            error_code=error.code,
            errors=jsonable_errors(exc),
        )
        return JSONResponse(status_code=error.status_code, content=body.model_dump(exclude_none=True))

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)}
        )

    return app


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Location and message of each validation failure."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pulse.main:app", host="0.0.0.0", port=8000, reload=True)
