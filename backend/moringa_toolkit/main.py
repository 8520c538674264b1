import logging

from fastapi import FastAPI, Request
from .api.routes import root_router
from .core.config import settings, get_settings
from .core.logging import configure_logging
import uvicorn

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    # Runs in the reload worker too, not only in run()
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="Minimal demo app: one HTML page and one JSON endpoint"
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(">>> [REQUEST] %s %s", request.method, request.url)
        response = await call_next(request)
        logger.info("<<< [RESPONSE] Status: %s", response.status_code)
        return response

    application.include_router(root_router)
    return application


app = create_app()


def run() -> None:
    """Start the server and block until it is stopped."""
    current = get_settings()
    configure_logging(current.LOG_LEVEL)
    logger.info(
        "Starting %s on %s:%s (%s)",
        current.PROJECT_NAME, current.BIND_ADDRESS, current.PORT, current.ENVIRONMENT,
    )
    uvicorn.run(
        "moringa_toolkit.main:app",
        host=current.BIND_ADDRESS,
        port=current.PORT,
        log_level=current.LOG_LEVEL,
        reload=current.reload,
        workers=1,
    )


if __name__ == "__main__":
    run()
