"""
Line-by-line hex reader over a binary byte source.
"""

from typing import BinaryIO, Iterator, Optional

from .config import Formatting
from .exceptions import SourceReadError
from .line_counter import LineCounter
from .logging_config import get_logger
from .text_utilities import ascii_field, hex_field, pad_spaces

logger = get_logger('hex_reader')


class HexLineReader:
    """
    Reads a byte source into formatted hex dump lines.

    One-shot: each pull reads one chunk and renders one line. After the
    first empty read a final address-only line is produced and the reader
    is exhausted.

    Example line:
        [0x000010]  41 42 43 44  45 46 47 48  |ABCDEFGH|
    """

    def __init__(self, source: BinaryIO, fmt: Formatting):
        """
        Initialize HexLineReader.

        Args:
            source: Object with readinto(), e.g. a file opened in 'rb' mode
            fmt: Layout to render with
        """
        self.source = source
        self.fmt = fmt
        self.counter = LineCounter(fmt.chunk_width)
        self.buf = bytearray(fmt.chunk_width)
        self.bytes_read = 0
        self.exhausted = False

    def _fill_buf(self) -> None:
        """Fill the buffer from the source and record the byte count."""
        try:
            n = self.source.readinto(self.buf)
        except OSError as e:
            self.bytes_read = 0
            logger.error(f"Read failed at address {self.counter:#x}: {e}")
            raise SourceReadError(f"Failed to read bytes from source: {e}") from e
        self.bytes_read = n or 0

    def _chunk(self) -> bytes:
        """Buffer contents limited to the bytes of the most recent read."""
        return bytes(self.buf[:self.bytes_read])

    def get_next_line(self) -> Optional[str]:
        """
        Read and render the next line.

        Returns:
            Rendered line ending in a newline, or None once exhausted

        Raises:
            SourceReadError: If the source fails while filling the buffer
        """
        if self.exhausted:
            return None

        self._fill_buf()
        address = f'[{self.counter:#08x}]'

        if self.bytes_read == 0:
            logger.debug(f"End of input at address {self.counter:#x}")
            self.exhausted = True
            return address + '\n'

        chunk = self._chunk()
        hex_part = hex_field(chunk, self.fmt)
        remainder = self.fmt.ascii_field_width - len(hex_part)
        line = f'{address}  {hex_part}{pad_spaces(remainder)}|{ascii_field(chunk)}|\n'

        self.counter.increment()
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.get_next_line()
            if line is None:
                return
            yield line
