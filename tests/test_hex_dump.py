"""
Tests for the in-memory dumper.
"""

import pytest

from hexline.exceptions import ConfigError
from hexline.hex_dump import HexDumper, hex_dump


def test_dump_matches_reader_format():
    assert hex_dump(b'AB\n\x00', chunk_width=4, gutter_interval=4) == (
        '[0x000000]  41 42 0a 00  |AB..|\n'
        '[0x000004]\n'
    )


def test_dump_multiple_lines():
    dumper = HexDumper(chunk_width=8, gutter_interval=4)
    lines = dumper.dump(b'0123456789').splitlines()

    assert lines == [
        '[0x000000]  30 31 32 33  34 35 36 37  |01234567|',
        '[0x000008]  38 39' + ' ' * 21 + '|89|',
        '[0x000010]',
    ]


def test_dump_empty():
    assert hex_dump(b'') == '[0x000000]\n'


def test_invalid_layout():
    with pytest.raises(ConfigError):
        HexDumper(gutter_interval=0)
