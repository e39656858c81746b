import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charity_events.config import CORS_ORIGINS, configure_logging
from charity_events.database import build_engine, build_session_factory
from charity_events.response_model import ErrorResponseModel

from charity_events.routes.event_route import router as EventRouter
from charity_events.routes.admin_route import router as AdminRouter
from charity_events.routes.registration_route import router as RegistrationRouter
from charity_events.routes.category_route import router as CategoryRouter

# Imported for their table registration on Base.metadata
from charity_events.models.category_model import Category
from charity_events.models.organization_model import Organization
from charity_events.models.event_model import Event
from charity_events.models.registration_model import Registration

logger = logging.getLogger(__name__)


# Static routes under /api/events are registered before /{event_id}
ROUTERS = [
    (EventRouter, "Event", "/api/events"),
    (RegistrationRouter, "Registration", "/api/registrations"),
    (CategoryRouter, "Category", "/api/categories"),
    (AdminRouter, "Admin", "/api/admin"),
]


def api_endpoints():
    """(methods, path) for every endpoint the application serves."""
    endpoints = []
    for router, _, prefix in ROUTERS:
        for route in router.routes:
            methods = ",".join(sorted(getattr(route, "methods", None) or []))
            endpoints.append((methods, prefix + route.path))
    return endpoints


def create_app(engine=None) -> FastAPI:
    """Build the API around a database engine.

    When ``engine`` is omitted one is built from the environment and
    disposed on shutdown; a caller-supplied engine is left to the caller.
    """
    configure_logging()
    owns_engine = engine is None
    if owns_engine:
        engine = build_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Available endpoints:")
        for methods, path in api_endpoints():
            logger.info("   %-6s %s", methods, path)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title="Charity Events API", lifespan=lifespan)
    app.state.session_factory = build_session_factory(engine)

    for router, tag, prefix in ROUTERS:
        app.include_router(router, tags=[tag], prefix=prefix)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["POST", "GET", "OPTIONS", "DELETE", "PUT"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request_time(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Request %s %s took %.2fms, status %d",
            request.method,
            request.url.path,
            duration_ms,
            response.status_code,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponseModel("Invalid request", detail=jsonable_encoder(exc.errors())),
        )

    return app
