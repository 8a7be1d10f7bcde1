"""FastAPI application factory for the minislot deployment server."""

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import Settings
from ..exceptions import TemplateError
from ..logging_config import setup_logging
from .dependencies import init_dependencies
from .routes import deployment_router, health_router, reference_data_router

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "invalid request body: " + "; ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or an invalid body is a 400 with an error string."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": f"validation failed: {_format_validation_errors(exc)}"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": ...} instead of FastAPI's {"detail": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Server settings (read from the environment if not provided)

    Raises:
        TemplateError: If the manifest template cannot be loaded
    """
    settings = settings or Settings.from_env()
    init_dependencies(settings)

    app = FastAPI(
        title="minislot",
        description="Deploy Katana dev nodes to Kubernetes",
        version=__version__,
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include all routers
    app.include_router(health_router)
    app.include_router(deployment_router)
    app.include_router(reference_data_router)

    logger.info(f"minislot API ready (template: {settings.template_path})")

    return app


def main() -> int:
    """Run the deployment server."""
    import uvicorn

    try:
        settings = Settings.from_env()
    except ValueError as e:
        setup_logging(banner=False)
        logger.error(f"Cannot start server: invalid configuration: {e}")
        return 1

    setup_logging(log_file=settings.log_file, debug=settings.debug)

    try:
        application = create_app(settings)
    except TemplateError as e:
        logger.error(f"Cannot start server: {e.describe()}")
        return 1

    uvicorn.run(application, host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
