"""
Output sink for rendered hex dump lines.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .exceptions import SinkWriteError
from .logging_config import get_logger

logger = get_logger('sink')

STDIO_NAME = '-'


class OutputSink:
    """Writes rendered lines to standard output or to a file it owns."""

    def __init__(self, stream: TextIO, owns_stream: bool = False, name: str = '<stdout>'):
        """
        Initialize OutputSink.

        Args:
            stream: Text stream to write to
            owns_stream: Close the stream when the sink is closed
            name: Display name for log and error messages
        """
        self.stream = stream
        self.owns_stream = owns_stream
        self.name = name
        self.lines_written = 0

    @classmethod
    @contextmanager
    def open(cls, path: Optional[str | Path] = None) -> Iterator['OutputSink']:
        """
        Open a sink for the duration of a with-block.

        Args:
            path: Output file to create, or None / '-' for standard output

        Yields:
            OutputSink, flushed (and closed if it owns a file) on exit
        """
        if path is None or str(path) == STDIO_NAME:
            sink = cls(sys.stdout)
        else:
            try:
                stream = open(path, 'w', encoding='ascii', newline='')
            except OSError as e:
                raise SinkWriteError(f"Cannot create output file {path}: {e}") from e
            sink = cls(stream, owns_stream=True, name=str(path))

        try:
            yield sink
        except BaseException:
            # Keep the original error; a failed flush is secondary here
            try:
                sink.close()
            except SinkWriteError as e:
                logger.warning(str(e))
            raise
        sink.close()

    def write(self, line: str) -> None:
        """Write one rendered line."""
        try:
            self.stream.write(line)
        except OSError as e:
            raise SinkWriteError(f"Failed to write to {self.name}: {e}") from e
        self.lines_written += 1

    def close(self) -> None:
        """
        Flush the stream, closing it if owned.

        Raises:
            SinkWriteError: If buffered lines could not be written out; an
                owned stream is closed regardless
        """
        error: Optional[OSError] = None
        try:
            self.stream.flush()
        except OSError as e:
            error = e

        if self.owns_stream:
            try:
                self.stream.close()
            except OSError as e:
                error = error or e

        if error is not None:
            raise SinkWriteError(f"Failed to flush {self.name}: {error}") from error
