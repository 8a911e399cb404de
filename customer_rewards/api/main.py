"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from customer_rewards.api.middleware import RequestIDMiddleware, MetricsMiddleware
from customer_rewards.api.v1 import customers, rewards
from customer_rewards.infrastructure.database.session import init_db
from customer_rewards.infrastructure.observability.logging import setup_logging
from customer_rewards.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        init_db()
    yield


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests are client errors (400), not 422"""
    errors = exc.errors()

    # Absent or unparseable JSON body
    if any(err["loc"] == ("body",) or err["type"] == "json_invalid" for err in errors):
        return JSONResponse(status_code=400, content={"detail": "Customer data is missing"})

    field_errors = {
        ".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0]): err["msg"]
        for err in errors
    }
    return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": field_errors})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Customer Rewards Service",
        description="Customer purchase history and tiered loyalty points",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(customers.router, prefix="/v1", tags=["customers"])
    app.include_router(rewards.router, prefix="/v1", tags=["rewards"])

    return app


app = create_app()
