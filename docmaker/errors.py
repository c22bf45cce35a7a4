"""
Error taxonomy for document generation and retrieval.

Services raise these exceptions; the router translates them into
HTTP responses using the ``status_code`` carried by each class.
None of them are retried: every operation is local, so a retry
would produce the same outcome.
"""


class DocMakerError(Exception):
    """Base class for all service errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DocMakerError):
    """Client input is malformed, missing or unsupported."""

    status_code = 400


class InvalidFileNameError(ValidationError):
    """Requested file name would resolve outside the storage root."""


class EncodingError(DocMakerError):
    """Records cannot be serialized to the requested format."""

    status_code = 500


class StorageError(DocMakerError):
    """Generated file could not be written or read."""

    status_code = 500


class NotFoundError(DocMakerError):
    """Requested file does not exist in the storage root."""

    status_code = 404
