"""
Dataset loading: raw XML bytes from disk, decoded into person records.
"""

import logging
import xml.etree.ElementTree as ElementTree
from typing import List

from usersearch.exceptions import DatasetException, ErrorCode
from usersearch.schemas import User

logger = logging.getLogger(__name__)


def read_dataset(path: str) -> bytes:
    """Read the dataset blob. Any read failure is reported as a missing file."""
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        logger.error(f"Dataset read failed for '{path}': {e}")
        raise DatasetException(ErrorCode.DATASET_MISSING)


def _row_to_user(row: ElementTree.Element) -> User:
    first_name = row.findtext("first_name", "")
    last_name = row.findtext("last_name", "")
    return User(
        id=int(row.findtext("id", "0")),
        name=f"{first_name} {last_name}",
        age=int(row.findtext("age", "0")),
        about=row.findtext("about", ""),
        gender=row.findtext("gender", ""),
    )


def decode_users(blob: bytes) -> List[User]:
    """
    Decode a ``<root><row>...</row></root>`` document into records.

    Rows keep their document order. Unknown row elements are ignored.

    Raises:
        DatasetException: If the document is not well-formed or a numeric
            field does not hold an integer.
    """
    try:
        root = ElementTree.fromstring(blob)
        return [_row_to_user(row) for row in root.iter("row")]
    except (ElementTree.ParseError, ValueError) as e:
        logger.error(f"Dataset decode failed: {e}")
        raise DatasetException(ErrorCode.DATASET_CORRUPT)
