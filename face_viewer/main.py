# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import photo_router
from .application.services.capture_service import CaptureService
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.http_client_factory import close_inference_http_client

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Checks required configuration on startup; on shutdown stops every
    capture ticker and closes the shared HTTP client.
    """
    settings = get_settings()
    for name in settings.missing_required():
        logger.error(f"{name} is not set in .env file")
    logger.info(f"Starting face viewer API {APP_VERSION} for package '{settings.package_name}'")

    yield

    try:
        capture_service = get_container().get(CaptureService)
        await capture_service.shutdown()
    except Exception as e:
        logger.error(f"Error stopping capture service: {e}", exc_info=True)

    await close_inference_http_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()

    application = FastAPI(
        title="Face Viewer API",
        version=APP_VERSION,
        description="Photo capture and face detection backend for smart glasses",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(photo_router, prefix="/api")

    @application.get("/health")
    async def health_check():
        """Service liveness and configuration status."""
        return {
            "status": "healthy",
            "version": APP_VERSION,
            "configured": not settings.missing_required(),
        }

    return application


# Create application instance
app = create_application()
