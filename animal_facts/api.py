"""FastAPI application factory for stateless request/response services."""

import inspect
import logging
import time
import uuid
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .models import ErrorResponse
from .processor import BaseProcessor, StatelessAction

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamps every log record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


@dataclass
class ServiceConfig:
    """
    Configuration for building a stateless service application.

    Args:
        name: Override service name (defaults to processor.name)
        version: Override service version (defaults to processor.version)
        description: Short description for generated docs
        cors_allow_origins: Origins allowed to call the service from a browser
        log_level: Root logging level
    """

    name: str | None = None
    version: str | None = None
    description: str | None = None
    cors_allow_origins: list[str] = field(default_factory=list)
    log_level: str = "INFO"


def create_app(processor: BaseProcessor, config: ServiceConfig | None = None) -> FastAPI:
    """
    Create a FastAPI application for a stateless processor.

    Args:
        processor: The processor instance implementing business logic
        config: Optional service configuration
    """

    config = config or ServiceConfig()

    configure_logging(config.log_level)

    service_name = config.name or processor.name
    service_version = config.version or processor.version
    service_description = config.description or f"{service_name} stateless API"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", service_name, service_version)
        await processor.startup()
        yield
        logger.info("Shutting down %s", service_name)
        await processor.shutdown()

    app = FastAPI(
        title=f"{service_name.title()} Stateless API",
        description=service_description,
        version=service_version,
        lifespan=lifespan,
    )

    app.state.processor = processor
    app.state.service_config = config

    if config.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_allow_origins,
            allow_methods=["GET"],
        )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Assign a request id and write one access log line per request."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        """Handle Pydantic validation errors (e.g., query parameter validation)."""
        logger.error("Validation error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "detail": str(exc)},
        )

    @app.get("/health-check")
    async def health_check():
        logger.info("Health check performed!")
        return Response(status_code=200)

    actions = processor.get_stateless_actions()
    if not actions:
        logger.warning(
            "Processor %s registered with stateless service but get_stateless_actions() returned nothing.",
            processor.name,
        )

    def make_endpoint(action: StatelessAction):
        QueryParamsModel = action.query_params_model

        async def finish(call_result):
            if inspect.isawaitable(call_result):
                call_result = await call_result
            return call_result

        if QueryParamsModel:
            async def endpoint(request: Request):
                query_params = QueryParamsModel.model_validate(dict(request.query_params))
                return await finish(action.handler(query_params))
        else:
            async def endpoint():
                return await finish(action.handler())

        return endpoint

    for action in actions:
        logger.info("Registering stateless action '%s' at %s", action.name, action.path)

        endpoint = make_endpoint(action)

        route_kwargs = {
            "methods": list(action.methods),
            "response_model": action.response_model,
            "summary": action.summary,
            "description": action.description,
            "tags": list(action.tags) if action.tags else None,
            "responses": {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        }
        route_kwargs = {k: v for k, v in route_kwargs.items() if v is not None}

        app.api_route(action.path, **route_kwargs)(endpoint)

    return app
