"""Fixed-column CSV output for synthesized bars."""

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Union

from synthdata.data.models import CSV_COLUMNS, OHLCVRecord
from synthdata.errors import PersistenceError
from synthdata.logging import get_logger
from synthdata.utils.time import format_timestamp


def format_field(value: Union[datetime, float, str]) -> str:
    """Render one CSV field. Fields are numeric or alphanumeric, never quoted."""
    if isinstance(value, datetime):
        return format_timestamp(value)
    return str(value)


def format_record(record: OHLCVRecord) -> str:
    """Render one record as a comma-joined line without terminator."""
    return ",".join(format_field(value) for value in record.as_row())


class CsvWriter:
    """Writes bar sequences to a CSV file, overwriting any existing file."""

    def __init__(self, output_path: Union[str, Path], create_dirs: bool = True):
        self.output_path = Path(output_path)
        self.create_dirs = create_dirs
        self.logger = get_logger(__name__)

    def write(self, records: Iterable[OHLCVRecord]) -> int:
        """
        Write the header and every record.

        Records are consumed lazily, so a generator of bars is streamed to
        disk without being materialized.

        Args:
            records: Bars in output order

        Returns:
            Number of data rows written

        Raises:
            PersistenceError: If the file or its directory cannot be written
        """
        if self.create_dirs:
            try:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise PersistenceError(
                    f"Cannot create directory {self.output_path.parent}: {e}",
                    operation="mkdir",
                    target=str(self.output_path.parent)
                ) from e

        rows = 0
        try:
            with open(self.output_path, "w", newline="") as f:
                f.write(",".join(CSV_COLUMNS) + "\n")
                for record in records:
                    f.write(format_record(record) + "\n")
                    rows += 1
        except OSError as e:
            self.logger.error(
                "CSV write failed",
                output_path=str(self.output_path),
                rows_written=rows,
                error=str(e)
            )
            raise PersistenceError(
                f"Cannot write {self.output_path}: {e}",
                operation="write",
                target=str(self.output_path)
            ) from e

        self.logger.debug("CSV written", output_path=str(self.output_path), rows=rows)
        return rows
