"""Pydantic models for request validation and responses."""

from typing import Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Cell values accepted in a record. Nested objects and arrays are rejected.
Scalar = Union[str, int, float, bool, None]

Record = Dict[str, Scalar]


class DocumentRequest(BaseModel):
    """
    Body of a POST request: the records to export and the output format.

    Only the wire names ``data`` and ``typeofDoc`` are accepted, and the
    format must match ``csv`` or ``xlsx`` exactly.
    """

    records: List[Record] = Field(
        ..., alias="data", description="Rows to export, one mapping per row"
    )
    format: Literal["csv", "xlsx"] = Field(
        ..., alias="typeofDoc", description="Output document format"
    )


class DownloadDescriptor(BaseModel):
    """Response to a successful POST, pointing at the generated file."""

    model_config = ConfigDict(populate_by_name=True)

    download_link: str = Field(..., alias="downloadLink")

    def to_response(self) -> dict:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True)
