"""
Tests for logging setup.
"""

import logging

import pytest

from hexline.logging_config import LoggingManager, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger('hexline')
    if LoggingManager._handler is not None:
        root.removeHandler(LoggingManager._handler)
        LoggingManager._handler = None
    root.setLevel(logging.NOTSET)
    logging.getLogger('hexline.hex_reader').setLevel(logging.NOTSET)


def test_get_logger_namespace():
    assert get_logger('hex_reader').name == 'hexline.hex_reader'


def test_setup_sets_level():
    setup_logging('info', use_color=False)
    assert logging.getLogger('hexline').level == logging.INFO


def test_setup_none_disables():
    setup_logging('NONE')
    assert logging.getLogger('hexline').level > logging.CRITICAL


def test_repeated_setup_keeps_one_handler():
    setup_logging('DEBUG')
    setup_logging('DEBUG')
    assert len(logging.getLogger('hexline').handlers) == 1


def test_module_levels():
    setup_logging('WARNING', {'hex_reader': 'DEBUG'}, use_color=False)
    assert logging.getLogger('hexline.hex_reader').level == logging.DEBUG


def test_colored_formatter_restores_levelname():
    formatter = LoggingManager.ColoredFormatter('%(levelname)s %(message)s', use_color=True)
    record = logging.LogRecord('hexline.x', logging.ERROR, __file__, 1, 'bad', None, None)

    assert formatter.format(record) == '\033[31mERROR\033[0m bad'
    assert record.levelname == 'ERROR'
