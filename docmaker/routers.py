"""
FastAPI router for document generation and download.

Defines the single endpoint path that accepts record sets on POST and
serves generated files on GET.

This router delegates to services for business logic, keeping
routing concerns separate from encoding and storage.
"""

import logging
from typing import Optional

import pydantic
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from docmaker.dependencies import get_document_service, get_request_body
from docmaker.errors import (
    EncodingError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from docmaker.models import DocumentRequest
from docmaker.services import DocumentService

logger = logging.getLogger(__name__)

router = APIRouter()


def _describe_validation_error(exc: pydantic.ValidationError) -> str:
    """Turn a pydantic error into a short client-facing message."""
    errors = exc.errors()
    if any(error["loc"][:1] == ("typeofDoc",) for error in errors):
        return "Invalid document type"
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
        for error in errors
    )
    return f"Invalid request body: {details}"


@router.post("/")
def create_document(
    body: bytes = Depends(get_request_body),
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Generate a CSV or XLSX file from a record set.

    **Body:**
    - `data`: list of records, each a mapping of column name to scalar value
    - `typeofDoc`: `csv` or `xlsx`

    Columns come from the first record's keys. Later records missing a
    column get an empty cell; keys the first record lacks are dropped.

    Returns:
        dict: `{"downloadLink": "<url>"}`

    Raises:
        HTTPException 400: Malformed body or unsupported document type
        HTTPException 500: Encoding or storage failure
    """
    try:
        document_request = DocumentRequest.model_validate_json(body)
    except pydantic.ValidationError as e:
        message = _describe_validation_error(e)
        logger.error(f"Rejected document request: {message}")
        raise HTTPException(status_code=400, detail=message)

    try:
        descriptor = document_service.create_document(document_request)
        return descriptor.to_response()

    except ValidationError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    except EncodingError as e:
        logger.error(f"Error generating {document_request.format} file: {e}")
        raise HTTPException(
            status_code=e.status_code, detail=f"Error generating file: {e}"
        )

    except StorageError as e:
        logger.error(f"Error saving {document_request.format} file: {e}")
        raise HTTPException(status_code=e.status_code, detail=f"Error saving file: {e}")

    except Exception as e:
        logger.error(f"Unexpected error generating document: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail="Internal server error while generating document"
        )


@router.get("/")
@router.get("/download")
def download_document(
    file: Optional[str] = Query(
        None,
        description="Name of a previously generated file",
        examples=["file_1700000000_0f1e2d3c4b5a69788796a5b4c3d2e1f0.csv"],
    ),
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Download a previously generated file.

    Returns:
        Response: Raw file bytes as an attachment

    Raises:
        HTTPException 400: Missing or invalid file name
        HTTPException 404: File not found
    """
    if not file:
        logger.error("Download requested without a file name")
        raise HTTPException(status_code=400, detail="File name is missing")

    try:
        logger.info(f"Processing download: file={file}")
        content = document_service.fetch_document(file)

    except ValidationError as e:
        logger.error(f"Rejected file name {file!r}: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    except NotFoundError:
        logger.error(f"File not found: {file}")
        raise HTTPException(status_code=404, detail="File not found")

    except StorageError as e:
        logger.error(f"Error reading {file}: {e}")
        raise HTTPException(status_code=e.status_code, detail=f"Error reading file: {e}")

    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={"Content-Disposition": f"attachment; filename={file}"},
    )
