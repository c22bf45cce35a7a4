"""
FastAPI dependencies for dependency injection.

Dependencies provide configuration and services to route handlers.
All settings come from environment variables so the same application
runs under uvicorn locally and in containers.
"""

import os
import tempfile

from fastapi import Request

from docmaker.services import DocumentService, FileStore

DEFAULT_PORT = 3000


def get_port() -> int:
    """
    Listening port from the PORT environment variable.

    Raises:
        ValueError: If PORT is set but not an integer
    """
    value = os.environ.get("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {value!r}")


def get_storage_root() -> str:
    """
    Directory for generated files, from STORAGE_ROOT.

    Defaults to the system temporary directory.
    """
    return os.environ.get("STORAGE_ROOT") or tempfile.gettempdir()


def get_base_url() -> str:
    """
    URL prefix for download links, from BASE_URL.

    Defaults to the local download endpoint on the configured port.
    """
    base_url = os.environ.get("BASE_URL")
    if base_url:
        return base_url
    return f"http://localhost:{get_port()}/download"


def get_file_store() -> FileStore:
    """
    Dependency that provides a FileStore instance.

    Returns:
        FileStore rooted at the configured storage directory
    """
    return FileStore(root=get_storage_root())


def get_document_service() -> DocumentService:
    """
    Dependency that provides a DocumentService instance.

    Returns:
        Configured DocumentService instance
    """
    return DocumentService(file_store=get_file_store(), base_url=get_base_url())


async def get_request_body(request: Request) -> bytes:
    """
    Dependency that reads the raw request body.

    Reading the body needs the event loop; taking it as a dependency
    lets the route itself be a plain function run in the threadpool.
    """
    return await request.body()
