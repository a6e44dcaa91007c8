# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from . import __version__
from .api import auth_router, root_router, users_router, register_error_handlers
from .core.config import get_settings
from .di.container import get_container

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Builds the DI container, and with it the process-wide user store,
    before the first request is served.
    """
    get_container()
    logger.info("User store initialized")
    
    yield
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Global error handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    
    # Create FastAPI app
    application = FastAPI(
        title=settings.app_title,
        version=__version__,
        description="In-memory user registration and login API",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )
    
    register_error_handlers(application)
    
    # Register API routers
    application.include_router(root_router)
    application.include_router(auth_router)
    application.include_router(users_router)
    
    return application


# Create application instance
app = create_application()
