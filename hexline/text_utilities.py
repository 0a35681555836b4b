"""
Field formatters for hex dump lines.
"""

from .config import Formatting

ASCII_PERIOD = '.'

# Rendered as a space; CR and LF are checked first and become periods
ASCII_WHITESPACE = frozenset((0x20, 0x09, 0x0A, 0x0C, 0x0D))


def pad_spaces(n: int) -> str:
    """Get a string of n spaces (empty for n <= 0)."""
    return ' ' * max(n, 0)


def is_gutter(index: int, interval: int, max: int) -> bool:
    """
    Check whether a gutter follows the byte at index.

    Args:
        index: 0-based position within the chunk
        interval: Bytes per gutter group
        max: Nominal chunk width (not the actual chunk length)

    Returns:
        True after every interval-th byte, except after the last byte of a full line
    """
    return (index + 1) % interval == 0 and (index + 1) != max


def is_crlf(byte: int) -> bool:
    """Check whether a byte is an ASCII carriage return or line feed."""
    return byte == 0x0A or byte == 0x0D


def ascii_char(byte: int) -> str:
    """
    Map one byte to its ASCII field character.

    CR/LF -> '.', other ASCII whitespace -> ' ', graphic characters
    (0x21-0x7E) unchanged, everything else -> '.'.
    """
    if is_crlf(byte):
        return ASCII_PERIOD
    if byte in ASCII_WHITESPACE:
        return ' '
    if 0x21 <= byte <= 0x7E:
        return chr(byte)
    return ASCII_PERIOD


def hex_field(chunk: bytes, fmt: Formatting) -> str:
    """
    Format the hex representation of a chunk, including gutters.

    Args:
        chunk: Bytes to format (at most fmt.chunk_width)
        fmt: Layout to use

    Returns:
        Unpadded hex field, e.g. "41 42 43 44  45 "
    """
    parts = []
    for index, byte in enumerate(chunk):
        parts.append(f'{byte:02x} ')
        if is_gutter(index, fmt.gutter_interval, fmt.chunk_width):
            parts.append(' ')
    return ''.join(parts)


def ascii_field(chunk: bytes) -> str:
    """Format the ASCII representation of a chunk, one character per byte."""
    return ''.join(ascii_char(b) for b in chunk)
