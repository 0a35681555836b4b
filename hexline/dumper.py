"""
Dump driver connecting a byte source, the line reader and an output sink.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .config import Formatting
from .exceptions import SourceReadError
from .hex_reader import HexLineReader
from .logging_config import get_logger
from .sink import STDIO_NAME, OutputSink

logger = get_logger('dumper')


def dump_stream(source: BinaryIO, sink: OutputSink, fmt: Formatting) -> int:
    """
    Write the hex dump of a byte source to a sink.

    Args:
        source: Binary object with readinto()
        sink: Destination for rendered lines
        fmt: Layout to render with

    Returns:
        Number of data bytes rendered

    Raises:
        SourceReadError: If reading fails (lines already written are kept)
        SinkWriteError: If writing fails
    """
    reader = HexLineReader(source, fmt)
    total = 0
    for line in reader:
        sink.write(line)
        total += reader.bytes_read
    return total


@contextmanager
def open_source(path: Optional[str | Path] = None) -> Iterator[BinaryIO]:
    """
    Open a byte source for the duration of a with-block.

    Args:
        path: Input file, or None / '-' for standard input

    Yields:
        Binary stream; files are closed on exit, standard input is not
    """
    if path is None or str(path) == STDIO_NAME:
        yield sys.stdin.buffer
        return

    try:
        f = open(path, 'rb')
    except OSError as e:
        raise SourceReadError(f"Cannot open input file {path}: {e}") from e
    with f:
        yield f


def dump_file(input_path: Optional[str | Path], output_path: Optional[str | Path],
              fmt: Formatting) -> int:
    """
    Dump an input file (or stdin) to an output file (or stdout).

    Returns:
        Number of data bytes rendered
    """
    with open_source(input_path) as source, OutputSink.open(output_path) as sink:
        total = dump_stream(source, sink, fmt)
        logger.info(f"Dumped {total} bytes from {input_path or '<stdin>'} "
                    f"as {sink.lines_written} lines to {sink.name}")
    return total
