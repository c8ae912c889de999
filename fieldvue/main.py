# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Dict
import logging
import asyncio

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import ai_router, auth_router, customer_router, job_router, room_router, upload_router
from .application.services.analysis_queue import AnalysisQueue
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database, ensure_indexes, ping_database
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.storage.local_blob_store import LocalBlobStore

logger = logging.getLogger(__name__)


async def _create_indexes() -> None:
    try:
        await ensure_indexes()
        logger.info("MongoDB indexes ensured")
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.error(f"Failed to create MongoDB indexes: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Starts the background analysis queue and index creation; on shutdown
    drains the queue, then closes the shared HTTP client and MongoDB client.
    """
    settings = get_settings()
    container = get_container()

    analysis_queue: AnalysisQueue = container.get(AnalysisQueue)
    analysis_queue.start()

    index_task = asyncio.create_task(_create_indexes())

    yield

    if not index_task.done():
        index_task.cancel()
        try:
            await index_task
        except asyncio.CancelledError:
            pass

    try:
        await analysis_queue.shutdown(timeout=settings.analysis_shutdown_timeout)
    except Exception as e:
        logger.error(f"Error stopping analysis queue: {e}", exc_info=True)

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration and the public file mount

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Job, room and image measurement backend",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(job_router, prefix="/api/v1/jobs")
    application.include_router(room_router, prefix="/api/v1/rooms")
    application.include_router(customer_router, prefix="/api/v1/customers")
    application.include_router(upload_router, prefix="/api/v1/uploads")
    application.include_router(ai_router, prefix="/api/v1/ai")

    # Public blobs are served straight from disk
    public_dir = LocalBlobStore().public_dir
    public_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/files", StaticFiles(directory=str(public_dir)), name="files")

    @application.get("/", tags=["meta"])
    async def root() -> Dict[str, str]:
        return {"name": settings.app_name, "version": settings.app_version}

    @application.get("/health", tags=["meta"])
    async def health() -> Dict[str, str]:
        try:
            await ping_database()
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="unhealthy",
            )
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
