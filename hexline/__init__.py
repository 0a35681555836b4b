"""
hexline Package

Renders byte streams as address / hex / ASCII dump lines.
"""

from .config import Formatting, DumpConfig, create_default_config
from .line_counter import LineCounter
from .text_utilities import is_gutter, is_crlf, pad_spaces, ascii_char, hex_field, ascii_field
from .hex_reader import HexLineReader
from .sink import OutputSink
from .dumper import dump_stream, dump_file, open_source
from .hex_dump import HexDumper, hex_dump
from .exceptions import HexlineError, ConfigError, SourceReadError, SinkWriteError
from .logging_config import LoggingManager, setup_logging, get_logger

__all__ = [
    # Configuration
    'Formatting',
    'DumpConfig',
    'create_default_config',
    # Core components
    'LineCounter',
    'HexLineReader',
    'OutputSink',
    # Field formatters
    'is_gutter',
    'is_crlf',
    'pad_spaces',
    'ascii_char',
    'hex_field',
    'ascii_field',
    # Dumping
    'dump_stream',
    'dump_file',
    'open_source',
    'HexDumper',
    'hex_dump',
    # Exceptions
    'HexlineError',
    'ConfigError',
    'SourceReadError',
    'SinkWriteError',
    # Logging
    'LoggingManager',
    'setup_logging',
    'get_logger',
]

__version__ = '1.0.0'
