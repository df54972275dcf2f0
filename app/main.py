from __future__ import annotations

import uuid
from typing import Callable

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from sqlalchemy.exc import SQLAlchemyError

from app.api.routes import certificados, citas, detalles, estaciones, health, inspecciones, usuarios, vehiculos
from app.core.config import settings
from app.core.errors import ServiceError
from app.core.logging import configure_logging, get_logger
from app.db.session import engine
from app.models import Base

configure_logging()
logger = get_logger(__name__)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)


app = FastAPI(title=settings.app_name)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


@app.middleware("http")
async def add_request_id(request: Request, call_next: Callable[[Request], Response]) -> Response:
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info("request_rechazada", tipo=exc.tipo, detail=exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.as_dict())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("database_error", error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno del servidor", "tipo": "internal"},
    )


@app.on_event("startup")
async def startup_event() -> None:
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)
    logger.info("app_started", app=settings.app_name)


app.include_router(health.router)
app.include_router(usuarios.router)
app.include_router(estaciones.router)
app.include_router(vehiculos.router)
app.include_router(citas.router)
app.include_router(inspecciones.router)
app.include_router(detalles.router)
app.include_router(certificados.router)
