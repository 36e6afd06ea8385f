"""
Dataset loading: reads the XML user dump once at startup.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Tuple, Union
from pydantic import ValidationError
from usersearch.core.logging import logger
from usersearch.exceptions import DatasetError
from usersearch.schemas import UserRecord

ROW_FIELDS = ("id", "first_name", "last_name", "age", "about", "gender")


def _row_to_record(row: ET.Element) -> UserRecord:
    values = {}
    for field in ROW_FIELDS:
        text = row.findtext(field)
        if text is not None:
            values[field] = text.strip()
    return UserRecord(**values)


def parse_records(content: Union[str, bytes]) -> Tuple[UserRecord, ...]:
    """Parse ``<root><row>...</row></root>`` into records, keeping file order."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DatasetError(f"Malformed dataset XML: {e}")

    try:
        return tuple(_row_to_record(row) for row in root.iter("row"))
    except ValidationError as e:
        raise DatasetError(f"Invalid dataset row: {e}")


def load_records(path: Union[str, Path]) -> Tuple[UserRecord, ...]:
    """Load the record set from an XML file."""
    logger.info(f"[Dataset] Loading records from {path}")

    try:
        content = Path(path).read_bytes()
    except OSError as e:
        logger.error(f"[Dataset] Cannot read {path}: {e}")
        raise DatasetError(f"Cannot read dataset {path}")

    records = parse_records(content)
    logger.info(f"[Dataset] Loaded {len(records)} records")
    return records
