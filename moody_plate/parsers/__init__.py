"""
Parsers Package

Parsers for the plate configuration file and the eight reading files.
"""
from .base_parser import BaseParser
from .config_parser import ConfigParser, read_config
from .reading_parser import ReadingParser, line_id_from_filename, load_readings

__all__ = [
    'BaseParser',
    'ConfigParser',
    'read_config',
    'ReadingParser',
    'line_id_from_filename',
    'load_readings',
]
