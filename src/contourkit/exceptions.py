"""Exception hierarchy for contourkit.

The geometry kernel never raises; these cover reading and writing contour
files and the command line around it.
"""


class ContourKitError(Exception):
    """Base exception for all contourkit errors."""

    pass


class ContourFileError(ContourKitError):
    """Errors related to contour file loading or saving."""

    pass


class ContourLoadError(ContourFileError):
    """Error loading a contour file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load contours '{path}': {reason}")


class ContourSaveError(ContourFileError):
    """Error saving a contour file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save contours '{path}': {reason}")


class ContourFormatError(ContourFileError):
    """Invalid contour file contents."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid contour file '{path}': {details}")
