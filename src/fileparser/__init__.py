"""
Comment-stripping batch parser for configuration files and SQL scripts.

Configuration files yield one batch per line; SQL scripts yield one batch
per block of statements between GO separators.
"""

from .dialects import DialectProfile, FileType, SplitMode, get_profile
from .factory import FileTypeRegistry, get_file_type, get_registry, parse_file
from .scanner import Parser, scan, scan_text

__all__ = [
    "DialectProfile",
    "FileType",
    "SplitMode",
    "get_profile",
    "FileTypeRegistry",
    "get_file_type",
    "get_registry",
    "parse_file",
    "Parser",
    "scan",
    "scan_text",
]
