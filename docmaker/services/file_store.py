"""
File Store for generated documents.

Handles writing generated bytes under a single storage root and
reading them back by bare file name.
"""

import logging
import os
import time
import uuid
from pathlib import Path
from typing import Callable, Optional

from docmaker.errors import (
    InvalidFileNameError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def generate_file_name(extension: str) -> str:
    """
    Generate a file name for a new document.

    The timestamp keeps names sortable by creation time; the random
    suffix keeps two saves in the same second from overwriting each other.
    """
    return f"file_{int(time.time())}_{uuid.uuid4().hex}.{extension}"


class FileStore:
    """
    Store for generated documents on the local filesystem.

    Provides:
    - Unique name generation for new files
    - Path traversal protection on reads
    - Translation of OS errors into service errors
    """

    def __init__(
        self,
        root: str,
        name_factory: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the file store.

        Args:
            root: Directory that holds every generated file
            name_factory: Callable mapping an extension to a new file name
        """
        self.root = Path(root)
        self.name_factory = name_factory or generate_file_name
        logger.info(f"Initialized file store at '{self.root}'")

    def save(self, content: bytes, extension: str) -> str:
        """
        Write content to a newly named file.

        Args:
            content: Bytes to persist
            extension: File extension without the dot (csv, xlsx)

        Returns:
            Generated file name, relative to the storage root

        Raises:
            ValidationError: If the extension is not alphanumeric
            StorageError: If the file cannot be written
        """
        if not extension or not extension.isalnum():
            raise ValidationError(f"Invalid file extension: {extension!r}")

        name = self.name_factory(extension)
        path = self.root / name

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise StorageError(f"could not write {name}: {e.strerror or e}") from e

        logger.info(f"Saved {len(content)} bytes to {path}")
        return name

    def is_writable(self) -> bool:
        """
        Check whether ``save`` can write into the storage root.

        A root that does not exist yet counts as writable when its nearest
        existing ancestor is, since ``save`` creates it.
        """
        candidate = self.root.absolute()
        while not candidate.exists() and candidate != candidate.parent:
            candidate = candidate.parent
        return candidate.is_dir() and os.access(candidate, os.W_OK)

    def path_for(self, name: str) -> Path:
        """
        Resolve a bare file name inside the storage root.

        Raises:
            InvalidFileNameError: If the name contains path separators,
                parent references, or resolves outside the root
        """
        if (
            not name
            or "/" in name
            or "\\" in name
            or ".." in name
            or "\x00" in name
            or name == "."
        ):
            raise InvalidFileNameError(f"Invalid file name: {name!r}")

        root = self.root.resolve()
        path = (root / name).resolve()

        # Symlinks inside the root must not lead out of it either
        if path.parent != root:
            raise InvalidFileNameError(f"Invalid file name: {name!r}")

        return path

    def load(self, name: str) -> bytes:
        """
        Read a previously saved file.

        Args:
            name: File name returned by ``save``

        Returns:
            The file's bytes

        Raises:
            InvalidFileNameError: If the name fails the traversal check
            NotFoundError: If no such file exists in the root
            StorageError: If the file exists but cannot be read
        """
        path = self.path_for(name)

        if not path.is_file():
            logger.info(f"File not found: {path}")
            raise NotFoundError(f"File '{name}' not found")

        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f"File '{name}' not found") from e
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise StorageError(f"could not read {name}: {e.strerror or e}") from e

        logger.info(f"Loaded {len(content)} bytes from {path}")
        return content
