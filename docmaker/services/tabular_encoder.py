"""
Tabular encoders for converting record sets into document bytes.

Two encoders share one contract, ``encode(records) -> bytes``:

- CSVEncoder writes comma separated text with minimal quoting
- SpreadsheetEncoder writes a single-sheet XLSX workbook via openpyxl

Column headers come from the first record only (see ``collect_fields``).
Both encoders lay every row out in header order, so a record whose keys
are enumerated in a different order still lines up with its columns.
"""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Sequence, Type

from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError

from docmaker.errors import EncodingError, ValidationError
from docmaker.utils import get_content_type, stringify_value

logger = logging.getLogger(__name__)


def collect_fields(records: Sequence[Mapping[str, object]]) -> List[str]:
    """
    Derive the ordered column list for a record set.

    Headers are the keys of the first record, in its own order. Keys that
    only appear in later records are dropped from the output, and keys a
    later record lacks are rendered as empty cells. Inputs are expected to
    be homogeneous.

    Args:
        records: Record set to inspect

    Returns:
        Column names, empty if there are no records
    """
    if not records:
        return []
    return list(records[0].keys())


def _row_values(record: Mapping[str, object], fields: Sequence[str]) -> List[str]:
    return [stringify_value(record.get(field)) for field in fields]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TabularEncoder:
    """Base class for record set encoders."""

    extension: str = ""

    @property
    def media_type(self) -> str:
        return get_content_type(self.extension)

    def encode(self, records: Sequence[Mapping[str, object]]) -> bytes:
        """
        Serialize records into document bytes.

        Raises:
            EncodingError: If the records cannot be written in this format
        """
        raise NotImplementedError


class CSVEncoder(TabularEncoder):
    """Encode records as UTF-8 CSV with one header row."""

    extension = "csv"

    def encode(self, records: Sequence[Mapping[str, object]]) -> bytes:
        if not records:
            raise EncodingError("no data provided")

        fields = collect_fields(records)
        buffer = io.StringIO()

        try:
            buffer.write(self._format_row(fields))
            for record in records:
                buffer.write(self._format_row(_row_values(record, fields)))
        except csv.Error as e:
            logger.error(f"CSV writer failed: {e}")
            raise EncodingError(str(e)) from e

        logger.info(f"Encoded {len(records)} rows x {len(fields)} columns as CSV")
        return buffer.getvalue().encode("utf-8")

    @staticmethod
    def _format_row(values: Sequence[str]) -> str:
        """
        Format one CSV row terminated by ``\\n``.

        The writer only quotes characters found in its line terminator, so
        rows are written with ``\\r\\n`` to get fields holding a bare ``\\r``
        quoted, then the terminator is replaced.
        """
        line = io.StringIO()
        csv.writer(line, lineterminator="\r\n").writerow(values)
        return line.getvalue()[:-2] + "\n"


class SpreadsheetEncoder(TabularEncoder):
    """
    Encode records as an XLSX workbook with a single sheet.

    An empty record set produces a workbook whose sheet has no rows.
    The workbook's created/modified properties are taken from ``clock``
    so they can be pinned in tests; the rest of the output depends only
    on the records.
    """

    extension = "xlsx"
    sheet_title = "Sheet1"

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self.clock = clock

    def encode(self, records: Sequence[Mapping[str, object]]) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self.sheet_title

        timestamp = self.clock()
        workbook.properties.created = timestamp
        workbook.properties.modified = timestamp

        fields = collect_fields(records)
        try:
            if records:
                sheet.append(fields)
                for record in records:
                    # Missing and null values stay as empty cells
                    sheet.append(
                        [
                            None if record.get(field) is None
                            else stringify_value(record[field])
                            for field in fields
                        ]
                    )
        except IllegalCharacterError as e:
            logger.error(f"Value cannot be stored in a worksheet: {e}")
            raise EncodingError(f"value cannot be stored in a worksheet: {e}") from e

        output = io.BytesIO()
        try:
            workbook.save(output)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write workbook: {e}")
            raise EncodingError(str(e)) from e

        logger.info(
            f"Encoded {len(records)} rows x {len(fields)} columns as XLSX"
        )
        return output.getvalue()


ENCODERS: Dict[str, Type[TabularEncoder]] = {
    "csv": CSVEncoder,
    "xlsx": SpreadsheetEncoder,
}


def get_encoder(format: str) -> TabularEncoder:
    """
    Get an encoder instance for the requested format.

    Raises:
        ValidationError: If the format is not supported
    """
    encoder_class = ENCODERS.get(format)
    if encoder_class is None:
        raise ValidationError(f"Unsupported document type: {format}")
    return encoder_class()
