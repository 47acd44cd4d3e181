"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_studio import __version__
from prompt_studio.api.handlers import get_services
from prompt_studio.api.routes import router
from prompt_studio.utils.config import get_settings
from prompt_studio.utils.logger import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file="backend.log" if settings.debug else None)
    logger = get_logger()

    key_status = settings.validate_api_keys()
    missing_keys = [k for k, v in key_status.items() if not v]
    if missing_keys:
        logger.warning(f"Missing API keys for: {', '.join(missing_keys)}")
        logger.warning("Remote enhancement is disabled; /api/enhance returns local results.")

    # Build the engine once at startup so the first request is not slowed down
    get_services()

    yield


app = FastAPI(
    title="Prompt Studio",
    description="Rule-based prompt analysis, transformation and quality scoring",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware for the UI layer
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Prompt Studio",
        "description": "Prompt analysis, transformation and quality scoring",
        "version": __version__,
        "endpoints": {
            "analyze": "POST /api/analyze",
            "transform": "POST /api/transform",
            "transform_batch": "POST /api/transform/batch",
            "validate": "POST /api/validate",
            "enhance": "POST /api/enhance",
            "detect_template": "POST /api/templates/detect",
            "templates": "GET /api/templates",
            "template": "GET /api/templates/{template_id}",
            "apply_template": "POST /api/templates/{template_id}/apply",
            "metrics": "GET /api/metrics",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "api_keys": settings.validate_api_keys(),
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "prompt_studio.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
