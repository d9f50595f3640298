"""
Reading and writing text around the normalization pipeline.

Named files are processed line by line; standard input is read as one buffer.
"""

import io
import sys
from typing import Optional, TextIO

from hangul_normalizer.core.config import ENCODING
from hangul_normalizer.core.logging_config import get_logger
from hangul_normalizer.core.normalizer import NormalizeConfig, normalize

logger = get_logger(__name__)


def open_input(path: Optional[str]) -> TextIO:
    """Open `path` for reading, or return stdin when no path is given."""
    if path is None:
        # newline="\n": lines end only at \n and \r is never translated
        return io.TextIOWrapper(sys.stdin.buffer, encoding=ENCODING, newline="\n")
    logger.debug(f"Opening input file {path} ({ENCODING})")
    return open(path, "r", encoding=ENCODING, newline="\n")


def open_output(path: Optional[str]) -> TextIO:
    """Create/truncate `path` for writing, or return stdout when no path is given."""
    if path is None:
        return sys.stdout
    logger.debug(f"Opening output file {path} ({ENCODING})")
    return open(path, "w", encoding=ENCODING, newline="")


def normalize_lines(reader: TextIO, writer: TextIO, config: NormalizeConfig) -> int:
    """
    Normalize each line of `reader` on its own and write it followed by a newline.

    Returns:
        Number of lines processed
    """
    count = 0
    for line in reader:
        # only \n ends a line; a \r right before it belongs to the terminator
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        writer.write(normalize(line, config))
        writer.write("\n")
        count += 1
    logger.info(f"Normalized {count} lines")
    return count


def normalize_buffer(reader: TextIO, writer: TextIO, config: NormalizeConfig) -> int:
    """
    Normalize the whole of `reader` in one call. No newline is appended.

    Returns:
        Number of characters written
    """
    text = normalize(reader.read(), config)
    writer.write(text)
    logger.info(f"Normalized buffer, {len(text)} characters written")
    return len(text)
