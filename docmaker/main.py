"""
FastAPI application for generating downloadable CSV and XLSX files.

Clients POST a record set and a document type, receive a download
link, then GET the generated file by name.

The same application can run:
- Locally with uvicorn (``python -m docmaker``)
- In Docker containers or behind any ASGI server
"""

import logging
import os
import sys

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docmaker.dependencies import get_base_url, get_file_store, get_storage_root
from docmaker.routers import router
from docmaker.services import FileStore

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Document Maker",
    description="Convert JSON record sets into downloadable CSV and XLSX files",
    version="1.0.0",
    docs_url="/docs" if os.getenv("ENVIRONMENT") == "development" else None,
    redoc_url="/redoc" if os.getenv("ENVIRONMENT") == "development" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

# Include API routes
app.include_router(router)


@app.get("/health")
def health_check(file_store: FileStore = Depends(get_file_store)):
    """
    Report whether generated documents can be written.

    Returns 200 with status ``healthy`` when the storage root is writable,
    otherwise 503 with status ``unhealthy`` so load balancers stop routing
    POST traffic to this instance.
    """
    writable = file_store.is_writable()
    if not writable:
        logger.error(f"Storage root is not writable: {file_store.root}")
    return JSONResponse(
        status_code=200 if writable else 503,
        content={
            "status": "healthy" if writable else "unhealthy",
            "service": "docmaker",
            "storage_writable": writable,
        },
    )


@app.on_event("startup")
async def startup_event():
    """Log configuration on application startup."""
    logger.info("Starting Document Maker FastAPI application")
    logger.info(f"Storage root: {get_storage_root()}")
    logger.info(f"Download base URL: {get_base_url()}")
    logger.info(f"Python version: {sys.version}")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Turn an exception no route handled into a 500 response.

    The body keeps the ``detail`` key used by every handled error; the
    exception text is only exposed when ENVIRONMENT is ``development``.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": (
                str(exc)
                if os.getenv("ENVIRONMENT") == "development"
                else "Internal server error"
            ),
        },
    )
