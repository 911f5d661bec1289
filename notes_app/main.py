"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_app.api.notes import router as notes_router
from notes_app.api.webhooks import router as webhooks_router
from notes_app.config import get_settings
from notes_app.database import engine, Base
from notes_app.exceptions import NotesAppError
from notes_app.models import Note, WebhookConfig, WebhookEventSetting  # noqa: F401 - Import to register models

settings = get_settings()

# Configure logging
handlers = [logging.StreamHandler()]  # Console output
if settings.log_file:
    handlers.append(logging.FileHandler(settings.log_file))  # File output

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=handlers,
)

# Set specific log levels for noisy libraries
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title="Notes",
    description="Notes with webhook notifications on create, read, update and delete",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotesAppError)
async def notes_app_error_handler(request: Request, exc: NotesAppError):
    """Render domain errors in the same shape as HTTPException."""
    if exc.status_code >= 500:
        logger.error(f"💥 {request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include routers
app.include_router(notes_router)
app.include_router(webhooks_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
