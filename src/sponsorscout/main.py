"""FastAPI application entry point."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from sponsorscout.config import settings
from sponsorscout.routers import companies, data, jobs
from sponsorscout.services.storage import StorageError
from sponsorscout.utils.logger import setup_logger

setup_logger(settings.log_level)

app = FastAPI(
    title="Sponsor Scout API",
    description="H-1B sponsor rosters and job aggregation across ATS platforms",
    version="0.1.0",
)

# CORS middleware to allow the dashboard to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# Mount routers
app.include_router(jobs.router, prefix="/api")
app.include_router(companies.router, prefix="/api")
app.include_router(data.router, prefix="/api")
