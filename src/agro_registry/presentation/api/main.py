from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, generate_latest
from starlette.responses import Response

from agro_registry.config import settings
from agro_registry.domain.errors import ConflictError, DomainError, NotFoundError, ValidationError
from agro_registry.logging_config import configure_logging
from agro_registry.presentation.api.routes.crops import router as crops_router
from agro_registry.presentation.api.routes.dashboard import router as dashboard_router
from agro_registry.presentation.api.routes.farms import router as farms_router
from agro_registry.presentation.api.routes.harvests import router as harvests_router
from agro_registry.presentation.api.routes.health import router as health_router
from agro_registry.presentation.api.routes.producers import router as producers_router

registry = CollectorRegistry()
domain_errors = Counter(
    "agro_registry_domain_errors",
    "Domain rule violations returned by the API",
    ["code"],
    registry=registry,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ConflictError: 409,
    ValidationError: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Agro Registry API",
    description="Rural producers, farms, harvests and crops",
    version="1.0.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(producers_router)
app.include_router(farms_router)
app.include_router(harvests_router)
app.include_router(crops_router)
app.include_router(dashboard_router)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    domain_errors.labels(code=exc.code).inc()
    status = next((s for cls, s in STATUS_BY_ERROR.items() if isinstance(exc, cls)), 400)
    return JSONResponse(
        status_code=status,
        content={"code": exc.code, "message": exc.message, "details": exc.details},
    )


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # report the first offending field in the same shape as a domain ValidationError
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "body"
    error = ValidationError(field, first.get("msg", "invalid request body"))
    return await domain_error_handler(request, error)
