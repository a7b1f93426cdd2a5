"""Reads newline-delimited load-test result logs."""
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .models import Dataset, ResultRecord
from .exceptions import RecordParseError, RecordReadError


# Configure logging
logger = logging.getLogger(__name__)


class RecordReader:
    """Reads newline-delimited JSON result records."""

    @staticmethod
    def parse_line(line: str, path: Union[Path, str] = "<string>", line_number: int = 0) -> ResultRecord:
        """
        Decode a single JSON line into a ResultRecord.

        Raises:
            RecordParseError: If the line is not a complete, well-typed record.
        """
        try:
            return ResultRecord.model_validate_json(line)
        except ValidationError as e:
            raise RecordParseError(
                f"Error parsing record at {path}:{line_number}: {e}",
                path=path,
                line_number=line_number,
            ) from e

    def read_records(self, path: Union[Path, str]) -> Dataset:
        """
        Read every record of a result log in file order.

        Args:
            path: Path to the newline-delimited record log.

        Returns:
            List of records; empty for an empty file.

        Raises:
            RecordReadError: If the file cannot be opened or read.
            RecordParseError: On the first malformed line.
        """
        records = []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                for line_number, line in enumerate(f, start=1):
                    records.append(self.parse_line(line.rstrip("\r\n"), path, line_number))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to open file {path}: {e}")
            raise RecordReadError(f"Failed to read record log {path}") from e

        logger.info(f"Read {len(records)} records from {path}")
        return records
