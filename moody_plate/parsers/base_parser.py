"""
Base Parser Module

Abstract base class for the plate input file parsers.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Iterator, Tuple
import logging

from ..config.settings import get_settings
from ..engine.plate_errors import PlateInputError


logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for plate input parsers."""

    # Error raised when the file itself cannot be read
    error_class = PlateInputError

    def __init__(self, encoding: str = None):
        """
        Initialize the parser.

        Args:
            encoding: File encoding to use. If None, uses default from settings.
        """
        self.settings = get_settings()
        self.encoding = encoding or self.settings.encoding.default_encoding
        self.warnings: List[str] = []

    @abstractmethod
    def parse(self, filepath: str):
        """
        Parse a file.

        Args:
            filepath: Path to the file to parse
        """
        pass

    def read_file(self, filepath: str) -> List[str]:
        """
        Read file with encoding fallback.

        Args:
            filepath: Path to the file

        Returns:
            List of lines from the file
        """
        path = Path(filepath)
        if not path.is_file():
            raise self.error_class(
                f"Unable to find/open input data file {path.name}",
                filename=str(filepath)
            )

        encodings = [self.encoding] + self.settings.encoding.fallback_encodings

        for enc in encodings:
            try:
                with open(path, 'r', encoding=enc) as f:
                    lines = f.readlines()
                logger.debug(f"Successfully read {filepath} with encoding {enc}")
                return lines
            except (UnicodeDecodeError, LookupError):
                continue

        # Last resort: read with errors='replace'
        with open(path, 'r', encoding='latin-1', errors='replace') as f:
            lines = f.readlines()
        self.add_warning(f"Could not detect encoding of {path.name}, used latin-1 with replacements")
        return lines

    def data_lines(self, lines: List[str]) -> Iterator[Tuple[int, str]]:
        """
        Yield (file line number, stripped text) for every line that is not
        blank and not a '#' comment.
        """
        for file_line, text in enumerate(lines, start=1):
            content = text.strip()
            if not content or content.startswith('#'):
                continue
            yield file_line, content

    def extract_filename(self, filepath: str) -> str:
        """Extract just the filename without path."""
        return Path(filepath).name

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)
        logger.warning(message)

    def clear_messages(self):
        """Clear all warning messages."""
        self.warnings = []
