"""
Service layer for business logic.

Services encapsulate document encoding and file storage,
keeping routes thin and focused on HTTP concerns.
"""

from .document_service import DocumentService
from .file_store import FileStore
from .tabular_encoder import CSVEncoder, SpreadsheetEncoder, collect_fields, get_encoder

__all__ = [
    "CSVEncoder",
    "DocumentService",
    "FileStore",
    "SpreadsheetEncoder",
    "collect_fields",
    "get_encoder",
]
