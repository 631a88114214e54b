from contextlib import asynccontextmanager
from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from loguru import logger

from .config import Settings, get_settings
from .errors import ConfigurationError, FetchError
from .logging import setup_logging
from .models import ErrorResponse, HealthResponse, OfferingsResponse
from .pipeline import load_offerings, offerings_from_bytes


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(get_settings().log_level)
    yield


app = FastAPI(
    title="offerings",
    description="Currently open training offerings from a published spreadsheet feed",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ConfigurationError)
def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(FetchError)
def fetch_error_handler(request: Request, exc: FetchError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get(
    "/offerings",
    response_model=OfferingsResponse,
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def list_offerings(today: Optional[date] = None, settings: Settings = Depends(get_settings)):
    return load_offerings(settings, today)


@app.post("/offerings/preview", response_model=OfferingsResponse)
async def preview_offerings(
    file: UploadFile = File(...),
    today: Optional[date] = None,
    settings: Settings = Depends(get_settings),
):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    return offerings_from_bytes(raw, today, open_match=settings.open_match)
