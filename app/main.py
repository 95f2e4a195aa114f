from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.creators import router as creators_router
from app.api.health import router as health_router
from app.api.videos import router as videos_router
from core.config import get_settings
from core.logging import setup_json_logging
from core.store import VideoStore

settings = get_settings()

# Setup logging
setup_json_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = VideoStore.open(settings.data_file)
    logger.info("Video store ready", extra={
        "data_file": str(settings.data_file),
        "videos": len(app.state.store.videos),
        "creators": len(app.state.store.creators)
    })
    yield


app = FastAPI(title="Micro Learning Video API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, prefix="/api")
app.include_router(videos_router, prefix="/api")
app.include_router(creators_router, prefix="/api")


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error", extra={
        "error_type": type(exc).__name__,
        "error": str(exc)
    })
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error",
            "error": str(exc)
        }
    )
