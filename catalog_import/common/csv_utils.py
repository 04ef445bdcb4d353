"""
CSV Utilities

Common functions for reading product export CSV files.
Handles large field sizes and the UTF-8 / Shift_JIS split between
platform exports.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

# Windows-flavoured Shift_JIS, which is what Japanese platforms export
FALLBACK_ENCODING = 'cp932'

# Rows inspected for U+FFFD replacement characters
GARBLED_SAMPLE_SIZE = 10


@dataclass
class CSVTable:
    """Header row plus data rows of a parsed CSV file."""
    headers: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)
    encoding: str = 'utf-8'

    @property
    def row_count(self) -> int:
        return len(self.rows)


def configure_csv(field_size_limit: int = 10 * 1024 * 1024) -> None:
    """
    Configure CSV module for large fields.

    Args:
        field_size_limit: Maximum field size in bytes (default: 10MB)
    """
    csv.field_size_limit(field_size_limit)


def parse_csv_text(text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Parse CSV text into trimmed headers and header-keyed rows.

    Empty lines are skipped. Missing trailing cells become empty strings
    and cells beyond the header row are dropped.

    Args:
        text: Decoded CSV content

    Returns:
        Tuple of (headers, rows)
    """
    reader = csv.reader(io.StringIO(text))
    headers: List[str] = []
    rows: List[Dict[str, str]] = []

    for record in reader:
        if not record:
            continue
        if not headers:
            headers = [cell.strip() for cell in record]
            continue
        padded = record + [''] * (len(headers) - len(record))
        rows.append(dict(zip(headers, padded)))

    return headers, rows


def has_garbled_text(rows: List[Dict[str, str]]) -> bool:
    """Return True if sampled rows contain U+FFFD replacement characters."""
    for row in rows[:GARBLED_SAMPLE_SIZE]:
        for value in row.values():
            if '\ufffd' in (value or ''):
                return True
    return False


def read_csv_table(file_path: str | Path) -> CSVTable:
    """
    Read a CSV export, detecting its encoding.

    UTF-8 (with or without BOM) is tried first; if the bytes do not decode
    or the decoded rows look garbled, the file is read as Shift_JIS.

    Args:
        file_path: Path to CSV file

    Returns:
        CSVTable with headers, rows and the encoding that was used
    """
    configure_csv()
    raw = Path(file_path).read_bytes()

    try:
        text = raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        logger.info("%s is not valid UTF-8, reading as Shift_JIS", file_path)
    else:
        headers, rows = parse_csv_text(text)
        if not has_garbled_text(rows):
            return CSVTable(headers=headers, rows=rows, encoding='utf-8')
        logger.info("Garbled UTF-8 text in %s, retrying as Shift_JIS", file_path)

    headers, rows = parse_csv_text(raw.decode(FALLBACK_ENCODING, errors='replace'))
    return CSVTable(headers=headers, rows=rows, encoding='shift_jis')


# Initialize CSV configuration on module import
configure_csv()
