"""
Todo API - Main application module.
"""
import logging
import time
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import Settings, get_settings
from .core.errors import TodoError, TITLE_REQUIRED, INVALID_DATA, SERVER_ERROR
from .core.registry import build_registry
from .routers import todos

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

GREETING = "Hello, world!"

# Body validation messages per HTTP method
VALIDATION_MESSAGES = {
    "POST": TITLE_REQUIRED,
    "PUT": INVALID_DATA,
}


async def request_logging_middleware(request: Request, call_next):
    """Log all requests with timing; unhandled failures become 500 here"""
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as exc:
        response = await general_exception_handler(request, exc)
    process_time = time.time() - start_time

    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


async def todo_exception_handler(request: Request, exc: TodoError):
    """Answer registry failures with their plain-text message"""
    logger.debug(f"{request.method} {request.url.path} rejected: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed or missing request bodies with 400"""
    logger.debug(f"{request.method} {request.url.path} validation failed: {exc.errors()}")
    message = VALIDATION_MESSAGES.get(request.method, INVALID_DATA)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse(SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI application and its registry from settings"""
    app = FastAPI(
        title="Todo API",
        description="API for managing tasks",
        version=settings.service_version,
        docs_url=settings.docs_url,
        redoc_url=None,
        servers=[{"url": settings.public_url}],
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(TodoError, todo_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.state.registry = build_registry(settings)

    app.include_router(
        todos.router,
        prefix=settings.api_prefix + "/todos",
        tags=["todos"]
    )

    @app.on_event("startup")
    async def startup_event():
        """Log where the service is listening"""
        logger.info(f"Starting {settings.service_name} on {settings.public_url}")
        logger.info(f"API docs available at {settings.public_url}{settings.docs_url}")

    @app.get("/", response_class=PlainTextResponse, summary="Greeting message")
    async def root():
        """Root endpoint"""
        return GREETING

    return app


app = create_app(settings)


def run():
    """Run the service with uvicorn"""
    import uvicorn
    uvicorn.run("todo_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
