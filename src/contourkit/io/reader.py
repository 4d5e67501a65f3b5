"""Contour reader for loading JSON contour files.

This module provides the ContourReader class for loading contour files
into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

import structlog

from contourkit.domain import Contour, contour_from_dict
from contourkit.exceptions import ContourFormatError, ContourLoadError

logger = structlog.get_logger(__name__)


class ContourReader:
    """Loads JSON contour files.

    The expected document is an object with a ``contours`` list; each entry
    has a ``kind`` ("open" or "closed") and a ``points`` list.

    Example:
        reader = ContourReader(Path("shapes.json"))
        reader.load()
        for contour in reader.iter_contours():
            print(len(contour.points))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the contour reader.

        Args:
            path: Path to the JSON contour file
        """
        self._path = path
        self._contours: list[Contour] | None = None

    def load(self) -> None:
        """Load and parse the contour file.

        Raises:
            FileNotFoundError: If the file does not exist
            ContourLoadError: If the file cannot be read
            ContourFormatError: If the file is not a valid contour document
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Contour file not found: {self._path}")

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ContourLoadError(str(self._path), str(e)) from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ContourFormatError(str(self._path), f"invalid JSON: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("contours"), list):
            raise ContourFormatError(str(self._path), "expected an object with a 'contours' list")

        contours: list[Contour] = []
        for index, entry in enumerate(document["contours"]):
            try:
                contours.append(contour_from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                raise ContourFormatError(str(self._path), f"contour {index}: {e}") from e

        self._contours = contours
        logger.debug("Contours loaded", path=str(self._path), count=len(contours))

    @property
    def contours(self) -> list[Contour]:
        """Return the loaded contours.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._contours is None:
            raise RuntimeError("Contours not loaded. Call load() first.")
        return self._contours

    @property
    def contour_count(self) -> int:
        """Return the number of loaded contours.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return len(self.contours)

    def iter_contours(self) -> Iterator[Contour]:
        """Iterate over the loaded contours.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        yield from self.contours
