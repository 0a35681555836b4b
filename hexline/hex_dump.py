"""
In-memory hex/ASCII dump utility.
"""

import io

from .config import Formatting
from .hex_reader import HexLineReader


class HexDumper:
    """Hex/ASCII dumper for bytes already held in memory."""

    def __init__(self, chunk_width: int = 16, gutter_interval: int = 4):
        """
        Initialize HexDumper.

        Args:
            chunk_width: Number of bytes per line (default 16)
            gutter_interval: Bytes per gutter group (default 4)

        Raises:
            ConfigError: If either value is not a positive integer
        """
        self.fmt = Formatting(chunk_width, gutter_interval)

    def dump(self, data: bytes) -> str:
        """
        Create hex/ASCII dump of data.

        Args:
            data: Binary data to dump

        Returns:
            All rendered lines, ending with the address-only line
        """
        reader = HexLineReader(io.BytesIO(data), self.fmt)
        return ''.join(reader)


def hex_dump(data: bytes, chunk_width: int = 16, gutter_interval: int = 4) -> str:
    """
    Create hex/ASCII dump of data.

    This is a convenience wrapper around HexDumper.dump().
    """
    dumper = HexDumper(chunk_width=chunk_width, gutter_interval=gutter_interval)
    return dumper.dump(data)
