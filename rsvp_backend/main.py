"""RSVP Guest Backend application."""
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rsvp_backend.core.config import settings
from rsvp_backend.core.errors import RSVPError, UpstreamStoreError
from rsvp_backend.routes import lookup, submit
from rsvp_backend.sheets.client import has_valid_credentials

# Configure logging
log_dir = Path(settings.log_dir).expanduser()
log_dir.mkdir(parents=True, exist_ok=True)
log_file = log_dir / "latest.log"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=str(log_file),
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.app_name,
    description="Guest lookup and RSVP submission backed by a Google Sheets roster",
    version="0.1.0",
)

# Configure CORS for the RSVP site
origins = (
    ["*"]
    if settings.allowed_origins == "*"
    else [o.strip() for o in settings.allowed_origins.split(",")]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(lookup.router)
app.include_router(submit.router)


@app.exception_handler(RSVPError)
async def rsvp_error_handler(request: Request, exc: RSVPError):
    """Render domain errors as {"error": ..., "details": ...}."""
    if isinstance(exc, UpstreamStoreError):
        logger.error(f"{request.url.path} failed: {exc.details}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors."""
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body.", "details": str(exc.errors())},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "sheets_configured": has_valid_credentials(
            settings.spreadsheet_id, settings.google_credentials
        ),
        "email_configured": bool(settings.resend_api_key and settings.resend_from),
    }
