"""
Document Service for generating and retrieving export files.

Ties the tabular encoders to the file store:
- POST path: encode records, persist the bytes, build a download link
- GET path: load a previously generated file by name
"""

import logging

from docmaker.models import DocumentRequest, DownloadDescriptor
from docmaker.services.file_store import FileStore
from docmaker.services.tabular_encoder import get_encoder
from docmaker.utils import build_download_link

logger = logging.getLogger(__name__)


class DocumentService:
    """Service that turns validated requests into downloadable files."""

    def __init__(self, file_store: FileStore, base_url: str):
        """
        Initialize the document service.

        Args:
            file_store: Store used to persist and read generated files
            base_url: URL prefix for download links
        """
        self.file_store = file_store
        self.base_url = base_url
        logger.info(f"Initialized DocumentService with base URL '{base_url}'")

    def create_document(self, request: DocumentRequest) -> DownloadDescriptor:
        """
        Generate a document and return a link to it.

        Args:
            request: Validated document request

        Returns:
            DownloadDescriptor pointing at the saved file

        Raises:
            ValidationError: If the format has no encoder
            EncodingError: If the records cannot be encoded
            StorageError: If the file cannot be written
        """
        logger.info(
            f"Generating {request.format} document from {len(request.records)} records"
        )

        encoder = get_encoder(request.format)
        content = encoder.encode(request.records)
        filename = self.file_store.save(content, encoder.extension)

        link = build_download_link(self.base_url, filename)
        logger.info(f"Document ready: {filename}")
        return DownloadDescriptor(download_link=link)

    def fetch_document(self, filename: str) -> bytes:
        """
        Read a generated document.

        Raises:
            InvalidFileNameError: If the name fails the traversal check
            NotFoundError: If the file does not exist
        """
        return self.file_store.load(filename)
