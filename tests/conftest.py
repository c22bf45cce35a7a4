"""
Shared test fixtures and configuration.

This file contains pytest fixtures that are shared across unit, integration,
and acceptance tests. Fixtures are organized by scope and purpose.
"""

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docmaker.services import DocumentService, FileStore


BASE_URL = "http://testserver/download"


# ============================================================================
# Path and Environment Fixtures
# ============================================================================


@pytest.fixture(scope="function")
def storage_root(tmp_path) -> Path:
    """Directory that receives generated files for one test."""
    root = tmp_path / "storage"
    root.mkdir()
    return root


@pytest.fixture(scope="function")
def mock_env_vars(monkeypatch, storage_root):
    """Set up environment variables for the application."""
    monkeypatch.setenv("STORAGE_ROOT", str(storage_root))
    monkeypatch.setenv("BASE_URL", BASE_URL)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("PORT", raising=False)

    return {
        "STORAGE_ROOT": str(storage_root),
        "BASE_URL": BASE_URL,
    }


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def sample_records() -> list:
    """
    Create a uniform record set for testing.

    Every record has the same keys in the same order.
    """
    return [
        {
            "id": i,
            "organisation": f"org-{i % 5}",
            "name": f"Record {i}",
            "value": i * 1.5,
            "active": i % 2 == 0,
        }
        for i in range(1, 21)
    ]


@pytest.fixture(scope="session")
def heterogeneous_records() -> list:
    """Records whose key sets and key orders differ from the first record."""
    return [
        {"a": 1, "b": "x"},
        {"b": "y", "a": 2},
        {"a": 3},
        {"a": 4, "b": "z", "c": "dropped"},
    ]


@pytest.fixture(scope="session")
def fixed_clock():
    """Clock pinned to a known instant for workbook metadata."""
    moment = datetime(2024, 1, 2, 3, 4, 5)
    return lambda: moment


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture(scope="function")
def file_store(storage_root) -> FileStore:
    """FileStore rooted in a per-test directory."""
    return FileStore(root=str(storage_root))


@pytest.fixture(scope="function")
def document_service(file_store) -> DocumentService:
    """DocumentService wired to the per-test file store."""
    return DocumentService(file_store=file_store, base_url=BASE_URL)


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture(scope="function")
def client(mock_env_vars):
    """
    Create a FastAPI test client writing into a temporary storage root.

    Dependencies read the environment per request, so the client always
    sees the storage root configured for the current test.
    """
    from docmaker.main import app

    return TestClient(app)


@pytest.fixture(scope="function")
def file_name_from_link():
    """Extract the ``file`` query parameter from a download link."""
    from urllib.parse import parse_qs, urlparse

    def extract(link: str) -> str:
        return parse_qs(urlparse(link).query)["file"][0]

    return extract
