"""
Plate Errors Module

Errors raised while reading plate input and while filling in worksheets.
Every input error is fatal: the run stops before any output is written.
"""
from typing import Optional


class PlateInputError(Exception):
    """
    Base class for fatal input errors.

    Carries the file name and, where known, the file line number and the
    text of the offending line.
    """

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        file_line: Optional[int] = None,
        text: Optional[str] = None
    ):
        super().__init__(message)
        self.filename = filename
        self.file_line = file_line
        self.text = text


class ConfigurationError(PlateInputError):
    """
    Error raised when the configuration file is missing or malformed.

    The file must contain a line "M x" or "I x", where x is the reflector
    foot spacing in mm or inches respectively.
    """
    pass


class ReadingFormatError(PlateInputError):
    """Error raised when a line of a data file is not an angle in arcseconds."""
    pass


class InsufficientStationsError(PlateInputError):
    """Error raised when a data file holds too few readings."""
    pass


class StationCapacityError(PlateInputError):
    """Error raised when a data file holds more readings than allowed."""
    pass


class MissingLineError(PlateInputError):
    """Error raised when one of the eight measurement lines has no data."""
    pass


class IncompleteWorksheetError(Exception):
    """
    Error raised when a stage reads a worksheet value that an earlier stage
    has not produced yet.
    """
    pass


class PropagationError(Exception):
    """
    Error raised when a line cannot be solved because the lines supplying
    its corner values can never be solved first.
    """
    pass
