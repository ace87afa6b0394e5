"""Main application entry point."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
import logging
import time
from contextlib import asynccontextmanager

from .config import settings
from .exceptions import PromptEngineerError
from .api.auth import router as auth_router
from .api.diagnostics import router as diagnostics_router
from .api.generate import router as generate_router
from .api.library import router as library_router
from .database.init import create_tables

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger(__name__)


async def log_requests_middleware(request: Request, call_next):
    """Log method, path, status and duration. Bodies and headers carry secrets and are not logged."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f} ms)"
    )
    return response


async def domain_error_handler(request: Request, exc: PromptEngineerError):
    """Last resort for domain errors a route did not translate itself."""
    logger.error(f"Untranslated {type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting Prompt Engineer Pro (model {settings.openrouter_model}, "
        f"API key {'set' if settings.openrouter_api_key else 'missing, offline generation only'})"
    )
    try:
        await create_tables()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Could not prepare database schema: {e}")
        logger.warning("Generation will work, the prompt library will not")
    yield
    logger.info("Shutting down Prompt Engineer Pro...")


def create_app() -> FastAPI:
    """Build the application with its middleware and routers."""
    app = FastAPI(
        title="Prompt Engineer Pro",
        description="Turns short ideas into detailed, structured AI prompts",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # The browser front end is the only expected origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.middleware("http")(log_requests_middleware)
    app.add_exception_handler(PromptEngineerError, domain_error_handler)

    for router in (generate_router, library_router, auth_router, diagnostics_router):
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {"name": "Prompt Engineer Pro", "version": "0.1.0", "status": "running"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "prompt_engineer.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug,
    )
