"""
Line scanner that strips comments and splits text into batches.

Comments must start and end on their own lines with nothing but whitespace
around the delimiters. A line comment swallows the whole line, and a block
comment swallows every line from its start line through its end line.
"""

import io
import logging
import string
from contextlib import closing, nullcontext
from typing import Iterable, Iterator, List, Optional, Tuple

from .consts import BATCH_SEPARATOR, DEFAULT_ENCODING
from .dialects import DialectProfile, FileType, SplitMode

logger = logging.getLogger(__name__)

# ASCII-only folding keeps token matching independent of locale
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_BOM = "\ufeff"


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _starts_with(line: str, token: str) -> bool:
    return _fold(line.lstrip()).startswith(_fold(token))


def _ends_with(line: str, token: str) -> bool:
    return _fold(line.rstrip()).endswith(_fold(token))


def _strip_newline(line: str) -> str:
    """Drop a single trailing line terminator (\\n, \\r\\n or \\r)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def scan(profile: DialectProfile, lines: Iterable[str]) -> List[str]:
    """
    Split lines into batches according to a dialect profile.

    Args:
        profile: Comment and split rules to apply
        lines: Lines of text, with or without their line terminators

    Returns:
        Batches in the order they were closed
    """
    batches: List[str] = []
    current: List[str] = []
    current_length = 0
    in_block_comment = False
    line_count = 0

    for raw in lines:
        line = _strip_newline(raw)
        line_count += 1
        # Decoding with plain utf-8 leaves the byte-order mark in place
        if line_count == 1 and line.startswith(_BOM):
            line = line[len(_BOM):]

        if not profile.preserve_blank_lines and not line.strip():
            continue

        if profile.has_line_comment and not in_block_comment:
            if _starts_with(line, profile.line_comment):
                continue

        if profile.has_block_comment:
            # Not skipped yet, the end token may sit on the same line
            if not in_block_comment and _starts_with(line, profile.block_comment_start):
                in_block_comment = True

            if in_block_comment and _ends_with(line, profile.block_comment_end):
                in_block_comment = False
                continue

            if in_block_comment:
                continue

        if profile.split_mode is SplitMode.PER_LINE:
            batches.append(line)
        elif _starts_with(line, profile.split_token):
            batches.append("".join(current))
            current = []
            current_length = 0
        else:
            if current_length > 0:
                current.append(BATCH_SEPARATOR)
                current_length += len(BATCH_SEPARATOR)
            current.append(line)
            current_length += len(line)

    if current_length > 0:
        batches.append("".join(current))

    if in_block_comment:
        logger.warning("Block comment was not closed before end of input; trailing lines dropped")

    logger.debug(f"Scanned {line_count} lines into {len(batches)} batches")
    return batches


def scan_text(profile: DialectProfile, text: str) -> List[str]:
    """Split an in-memory string into batches, accepting any line ending."""
    return scan(profile, io.StringIO(text, newline=None))


class Parser:
    """
    Parses streams of a single file type and keeps the last result.

    Usage:
        parser = Parser(FileType.SQL_SCRIPT)
        parser.parse(stream)
        for batch in parser.batches:
            ...
    """

    def __init__(self, file_type: FileType, encoding: Optional[str] = None):
        self.file_type = file_type
        self.profile = file_type.profile
        self.encoding = encoding or DEFAULT_ENCODING
        self._batches: List[str] = []

    @property
    def batches(self) -> Tuple[str, ...]:
        """Batches from the last parse; empty until a stream has been parsed."""
        return tuple(self._batches)

    def parse(self, stream) -> Tuple[str, ...]:
        """
        Parse a stream, replacing any previous result.

        Binary streams are decoded with the parser's encoding. Streams are
        closed once parsing ends, whether or not it succeeded.

        Args:
            stream: Binary stream, text stream, or iterable of lines

        Returns:
            The new batches
        """
        self._batches = []

        with self._open_lines(stream) as lines:
            self._batches = scan(self.profile, self._decoded(lines))

        logger.debug(f"Parsed {len(self._batches)} {self.file_type.value} batches")
        return self.batches

    def _open_lines(self, stream):
        if isinstance(stream, io.RawIOBase):
            stream = io.BufferedReader(stream)
        if isinstance(stream, io.BufferedIOBase):
            return io.TextIOWrapper(stream, encoding=self.encoding, newline=None)
        if hasattr(stream, "close"):
            return closing(stream)
        return nullcontext(stream)

    def _decoded(self, lines: Iterable) -> Iterator[str]:
        # Binary file-likes outside the io hierarchy yield bytes lines
        for line in lines:
            if isinstance(line, (bytes, bytearray)):
                line = bytes(line).decode(self.encoding)
            yield line
