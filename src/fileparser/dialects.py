"""
Dialect profiles: the comment and batch-split rules for each file type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SplitMode(Enum):
    """How the scanner turns interesting lines into batches."""
    PER_LINE = "per_line"
    BY_TOKEN = "by_token"


@dataclass(frozen=True)
class DialectProfile:
    """
    Tokens and split rules for one kind of file.

    Block comment start/end are set together or not at all, and a split
    token is required exactly when splitting by token.
    """
    split_mode: SplitMode
    line_comment: Optional[str] = None
    block_comment_start: Optional[str] = None
    block_comment_end: Optional[str] = None
    split_token: Optional[str] = None

    def __post_init__(self):
        if bool(self.block_comment_start) != bool(self.block_comment_end):
            raise ValueError("Block comment start and end tokens must be set together")
        if self.split_mode is SplitMode.BY_TOKEN and not self.split_token:
            raise ValueError("A split token is required when splitting by token")
        if self.split_mode is not SplitMode.BY_TOKEN and self.split_token:
            raise ValueError(f"Split token is only used in {SplitMode.BY_TOKEN.value} mode")

    @property
    def has_line_comment(self) -> bool:
        return bool(self.line_comment)

    @property
    def has_block_comment(self) -> bool:
        return bool(self.block_comment_start and self.block_comment_end)

    @property
    def preserve_blank_lines(self) -> bool:
        """Blank lines are kept as batch content unless every line is its own batch."""
        return self.split_mode is not SplitMode.PER_LINE


CONFIGURATION_PROFILE = DialectProfile(
    split_mode=SplitMode.PER_LINE,
    line_comment="#",
)

SQL_SCRIPT_PROFILE = DialectProfile(
    split_mode=SplitMode.BY_TOKEN,
    line_comment="--",
    block_comment_start="/*",
    block_comment_end="*/",
    split_token="GO",
)


class FileType(Enum):
    """The supported kinds of file, each bound to its fixed profile."""
    CONFIGURATION = "config"
    SQL_SCRIPT = "sql"

    @property
    def profile(self) -> DialectProfile:
        return _PROFILES[self]

    @classmethod
    def from_name(cls, name: str) -> "FileType":
        """
        Resolve a user-facing name such as 'sql' or 'configuration'.

        Raises:
            ValueError: If the name matches no file type
        """
        key = name.strip().lower().replace("-", "_")
        file_type = _ALIASES.get(key)
        if file_type is None:
            raise ValueError(f"Unknown file type: {name}")
        return file_type


_PROFILES = {
    FileType.CONFIGURATION: CONFIGURATION_PROFILE,
    FileType.SQL_SCRIPT: SQL_SCRIPT_PROFILE,
}

_ALIASES = {
    "config": FileType.CONFIGURATION,
    "configuration": FileType.CONFIGURATION,
    "sql": FileType.SQL_SCRIPT,
    "sqlscript": FileType.SQL_SCRIPT,
    "sql_script": FileType.SQL_SCRIPT,
}


def get_profile(file_type: FileType) -> DialectProfile:
    """Get the dialect profile for a file type."""
    return file_type.profile
