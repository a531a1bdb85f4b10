"""
File type registry: picks a dialect from a file's extension.
"""

import logging
import os
from typing import Dict, List, Optional

from .consts import DEFAULT_ENCODING, EXTENSION_MAP
from .dialects import FileType
from .scanner import scan

logger = logging.getLogger(__name__)


class FileTypeRegistry:
    """
    Maps file extensions to file types.

    Usage:
        registry = FileTypeRegistry()
        file_type = registry.get_file_type("deploy.sql")

    Built-in mappings come from EXTENSION_MAP; more can be added with
    registry.register(".ext", FileType.SQL_SCRIPT).
    """

    def __init__(self, extension_map: Optional[Dict[str, str]] = None):
        self._extension_map: Dict[str, FileType] = {}

        for ext, name in (extension_map if extension_map is not None else EXTENSION_MAP).items():
            self.register(ext, FileType.from_name(name))

    def register(self, extension: str, file_type: FileType):
        """Register a file type for an extension (e.g., '.sql')."""
        ext = extension.lower()
        if not ext.startswith('.'):
            ext = '.' + ext
        self._extension_map[ext] = file_type

    def get_file_type(self, filepath_or_extension: str) -> Optional[FileType]:
        """
        Get the file type for a file.

        Args:
            filepath_or_extension: File path or extension (e.g., ".sql" or "file.sql")

        Returns:
            FileType or None if the extension is not registered
        """
        # A bare ".sql" has no extension as far as splitext is concerned
        ext = os.path.splitext(filepath_or_extension)[1]
        if not ext and filepath_or_extension.startswith('.'):
            ext = filepath_or_extension

        return self._extension_map.get(ext.lower())

    def get_supported_extensions(self) -> List[str]:
        """Get list of all registered file extensions."""
        return list(self._extension_map.keys())

    def get_extension_map(self) -> Dict[str, FileType]:
        return dict(self._extension_map)

    def is_supported(self, filepath: str) -> bool:
        """Check if a file type is supported."""
        return self.get_file_type(filepath) is not None


# Global registry instance
_registry: Optional[FileTypeRegistry] = None


def get_registry() -> FileTypeRegistry:
    """Get the global registry instance."""
    global _registry
    if _registry is None:
        _registry = FileTypeRegistry()
    return _registry


def get_file_type(filepath: str) -> Optional[FileType]:
    """Convenience function to look up the file type for a file."""
    return get_registry().get_file_type(filepath)


def parse_file(
    filepath: str,
    file_type: Optional[FileType] = None,
    encoding: Optional[str] = None,
) -> List[str]:
    """
    Convenience function to parse a file into batches.

    Args:
        filepath: Path to the file
        file_type: Dialect to use; detected from the extension when omitted
        encoding: Text encoding, defaults to DEFAULT_ENCODING

    Returns:
        List of batches

    Raises:
        ValueError: If no file type is given and the extension is not registered
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid in the chosen encoding
    """
    if file_type is None:
        file_type = get_file_type(filepath)
        if file_type is None:
            _, ext = os.path.splitext(filepath)
            raise ValueError(f"Extension {ext or '(none)'} not supported for {filepath}")

    logger.info(f"Parsing {filepath} as {file_type.value}")

    with open(filepath, 'r', encoding=encoding or DEFAULT_ENCODING, newline=None) as f:
        return scan(file_type.profile, f)
