import sys
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from satsort.core.errors import SatSortError, MalformedInputError, ResourceLimitError
from satsort.core.logging import get_logger

logger = get_logger("satsort.ingest")

def read_lines(stream: BinaryIO,
               name: str = "<stdin>",
               max_lines: Optional[int] = None,
               max_line_bytes: Optional[int] = None) -> List[bytes]:
    """
    Reads newline terminated lines from a binary stream.
    Accepts '\\n' and '\\r\\n' terminators; the terminator is not part of the line.
    Raises MalformedInputError on an unterminated last line or a stray carriage
    return, and ResourceLimitError when a ceiling is exceeded.
    """
    data = stream.read()
    if not data:
        return []

    chunks = data.split(b"\n")
    if chunks[-1]:
        raise MalformedInputError(
            f"{name}:{len(chunks)}: unexpected end-of-file in line (missing new line)")
    chunks.pop()

    if max_lines is not None and len(chunks) > max_lines:
        raise ResourceLimitError(
            f"{name}: {len(chunks)} lines exceed the limit of {max_lines} lines")

    lines = []
    for lineno, chunk in enumerate(chunks, start=1):
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        if b"\r" in chunk:
            raise MalformedInputError(
                f"{name}:{lineno}: carriage return not followed by new line")
        if max_line_bytes is not None and len(chunk) > max_line_bytes:
            raise ResourceLimitError(
                f"{name}:{lineno}: line of {len(chunk)} bytes exceeds the limit of {max_line_bytes} bytes")
        lines.append(chunk)

    logger.info(f"Read {len(lines)} lines from {name}")
    return lines

def load_lines(path: Optional[Union[str, Path]] = None, **limits) -> List[bytes]:
    """Reads lines from a file, or from standard input when no path is given."""
    if path is None:
        return read_lines(sys.stdin.buffer, name="<stdin>", **limits)
    try:
        with open(path, "rb") as f:
            return read_lines(f, name=str(path), **limits)
    except OSError as e:
        raise SatSortError(f"can not read '{path}': {e}")
