"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from wordrecall.config import configure_logging, get_settings
from wordrecall.database import dispose_engine, initialize_database
from wordrecall.domain.common.exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    ConfigurationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from wordrecall.exceptions import WordRecallError
from wordrecall.infrastructure.common.rate_limit import limiter
from wordrecall.infrastructure.common.routers import settings as settings_router
from wordrecall.infrastructure.identity.routers import auth, users
from wordrecall.infrastructure.study.routers import list_study, study_sessions, word_lists

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info("starting_application", environment=settings.ENVIRONMENT, version=settings.VERSION)

    yield

    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Build word lists and test yourself on them by free recall",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


@app.exception_handler(WordRecallError)
async def wordrecall_error_handler(request: Request, exc: WordRecallError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, exc.message)


@app.exception_handler(EntityNotFoundError)
async def not_found_error_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    return _error_response(status.HTTP_403_FORBIDDEN, exc.message)


@app.exception_handler(BusinessRuleViolationError)
async def business_rule_error_handler(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return _error_response(status.HTTP_409_CONFLICT, exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("unhandled_domain_error", error=exc.message, details=exc.details)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


# Public
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)

# Authenticated
app.include_router(word_lists.router, prefix=settings.API_V1_PREFIX)
app.include_router(list_study.router, prefix=settings.API_V1_PREFIX)
app.include_router(study_sessions.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": "/docs",
    }
