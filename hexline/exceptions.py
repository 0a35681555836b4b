"""
Custom exceptions for the hexline dumper.
"""


class HexlineError(Exception):
    """Base exception for all hexline errors."""
    pass


class ConfigError(HexlineError):
    """Exception raised for invalid layout or configuration files."""
    pass


class SourceReadError(HexlineError):
    """Exception raised when the byte source cannot be read."""
    pass


class SinkWriteError(HexlineError):
    """Exception raised when a rendered line cannot be written."""
    pass
