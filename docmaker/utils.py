"""
Utility functions for document generation.

FastAPI handles request parsing and routing, so this module only
contains small helpers shared by the encoders and the router.
"""

from typing import Any
from urllib.parse import urlencode


def get_content_type(format: str) -> str:
    """Get content type for the given format."""
    content_types = {
        "csv": "text/csv",
        "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    }
    return content_types.get(format, "application/octet-stream")


def stringify_value(value: Any) -> str:
    """
    Render a cell value as text.

    ``None`` becomes an empty string and booleans use their JSON
    spelling. JSON does not distinguish ``1.0`` from ``1``, so floats
    with an integral value below 1e21 drop the fractional part; larger
    ones keep exponent notation. Everything else goes through ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def build_download_link(base_url: str, filename: str) -> str:
    """Build the URL a client uses to fetch a generated file."""
    return f"{base_url}?{urlencode({'file': filename})}"
