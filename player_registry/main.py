"""Main FastAPI application for the player registry."""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from player_registry.core import ServiceException, db_manager, get_global_settings
from player_registry.core.logging import get_logger, setup_logging
from player_registry.features.players import players_router


# Configure logging
settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up player registry application")
    yield
    logger.info("Shutting down player registry application")
    await db_manager.close()


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    """Map service exceptions to their HTTP status."""
    logger.info(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error_type=exc.__class__.__name__,
        error_message=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def _error_summary(exc: RequestValidationError) -> list[Dict[str, Any]]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer undecodable parameters and bodies with 400 Bad Request."""
    logger.info("request_malformed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": _error_summary(exc)})


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Create, read, update, delete, list and count player records.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

# Create FastAPI application
app = FastAPI(
    title="Player Registry",
    description="""
    CRUD service for game-character player records.

    ## Features

    * **Listing**: filter by name, title, race, profession, birthday range,
      ban status, experience and level; sort; paginate
    * **Progression**: level and experience-to-next-level derived from experience
    * **Partial updates**: only the fields sent are changed
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_exception_handler(ServiceException, service_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(players_router)


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """Liveness probe."""
    return {"status": "healthy", "service": "player-registry", "version": app.version}
