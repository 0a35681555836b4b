"""
Tests for the line assembler.
"""

import io

import pytest

from hexline.config import Formatting
from hexline.exceptions import SourceReadError
from hexline.hex_reader import HexLineReader

SAMPLE = bytes([0x41, 0x42, 0x43, 0x44, 0x45, 0x46, 0x0A, 0x00,
                0xFF, 0xFE, 0x10, 0x20, 0x30, 0x31, 0x32, 0x33])


class FailingSource:
    """Byte source that serves some data and then raises."""

    def __init__(self, data: bytes):
        self.stream = io.BytesIO(data)
        self.calls = 0

    def readinto(self, buf):
        self.calls += 1
        if self.calls > 1:
            raise OSError("device went away")
        return self.stream.readinto(buf)


def test_single_short_chunk():
    reader = HexLineReader(io.BytesIO(bytes([0x41, 0x42, 0x0A, 0x00])), Formatting(4, 4))
    assert list(reader) == [
        '[0x000000]  41 42 0a 00  |AB..|\n',
        '[0x000004]\n',
    ]


def test_full_line():
    reader = HexLineReader(io.BytesIO(SAMPLE), Formatting(16, 4))
    lines = list(reader)
    assert lines == [
        '[0x000000]  41 42 43 44  45 46 0a 00  ff fe 10 20  30 31 32 33  |ABCDEF..... 0123|\n',
        '[0x000010]\n',
    ]


def test_short_final_line_is_padded():
    """The ASCII column lines up across full and short lines."""
    reader = HexLineReader(io.BytesIO(SAMPLE + b'wxyz'), Formatting(16, 4))
    lines = list(reader)

    assert len(lines) == 3
    assert lines[1] == '[0x000010]  77 78 79 7a  ' + ' ' * 39 + '|wxyz|\n'
    assert lines[0].index('|') == lines[1].index('|') == 10 + 2 + 52
    assert lines[2] == '[0x000020]\n'


def test_empty_source():
    reader = HexLineReader(io.BytesIO(b''), Formatting())
    assert list(reader) == ['[0x000000]\n']


def test_exhausted_reader_yields_nothing():
    reader = HexLineReader(io.BytesIO(b'abc'), Formatting())
    assert len(list(reader)) == 2
    assert reader.get_next_line() is None
    assert list(reader) == []


def test_counter_stops_at_terminal_line():
    reader = HexLineReader(io.BytesIO(b'x' * 32), Formatting())
    list(reader)
    assert reader.counter.count == 32


def test_address_widens_past_six_digits():
    reader = HexLineReader(io.BytesIO(b'a'), Formatting())
    reader.counter.count = 0xFFFFF0
    assert reader.get_next_line().startswith('[0xfffff0]  61 ')
    assert reader.get_next_line() == '[0x1000000]\n'


def test_same_input_same_output():
    data = bytes(range(256)) * 3 + b'tail'
    first = ''.join(HexLineReader(io.BytesIO(data), Formatting(16, 4)))
    second = ''.join(HexLineReader(io.BytesIO(data), Formatting(16, 4)))
    assert first == second


def test_read_error_is_raised_after_emitted_lines():
    reader = HexLineReader(FailingSource(b'0123456789abcdef0123'), Formatting())
    lines = []
    with pytest.raises(SourceReadError, match="device went away"):
        for line in reader:
            lines.append(line)
    assert lines == ['[0x000000]  30 31 32 33  34 35 36 37  38 39 61 62  63 64 65 66  |0123456789abcdef|\n']


def test_uneven_gutter_layout():
    reader = HexLineReader(io.BytesIO(bytes(10)), Formatting(10, 4))
    line = reader.get_next_line()
    assert line == '[0x000000]  00 00 00 00  00 00 00 00  00 00 |..........|\n'
