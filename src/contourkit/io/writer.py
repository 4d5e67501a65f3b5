"""Contour writer for saving JSON contour files."""

import json
from collections.abc import Iterable
from pathlib import Path

import structlog

from contourkit.domain import Contour
from contourkit.exceptions import ContourSaveError

logger = structlog.get_logger(__name__)


class ContourWriter:
    """Writes contours in the format ContourReader loads."""

    def __init__(self, path: Path) -> None:
        """Initialize the contour writer.

        Args:
            path: Destination path
        """
        self._path = path

    @staticmethod
    def get_normalized_path(input_path: Path) -> Path:
        """Generate output path for a normalized contour file.

        Args:
            input_path: Path to the original contour file

        Returns:
            Sibling path with "-normalized" appended to the stem
        """
        return input_path.with_name(f"{input_path.stem}-normalized{input_path.suffix}")

    def write(self, contours: Iterable[Contour]) -> int:
        """Serialize contours to the destination file.

        Args:
            contours: Contours to write, in order

        Returns:
            Number of contours written

        Raises:
            ContourSaveError: If the contours cannot be serialized or written
        """
        entries = [contour.to_dict() for contour in contours]
        try:
            text = json.dumps({"contours": entries}, indent=2)
            self._path.write_text(text + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise ContourSaveError(str(self._path), str(e)) from e

        logger.info("Contours written", path=str(self._path), count=len(entries))
        return len(entries)
