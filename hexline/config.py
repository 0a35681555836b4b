"""
Configuration dataclasses for the hexline dumper.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path

from .exceptions import ConfigError
from .logging_config import LOG_LEVELS

DEFAULT_CONFIG_PATH = "hexline_config.json"


@dataclass(frozen=True)
class Formatting:
    """
    Text layout for one dump, computed once from two user parameters.

    Layout of a data line:
    ----------------------
    [0x000000]  41 42 43 44  45 46 47 48  ...  |ABCDEFGH...|

    Every byte takes three columns in the hex field ("41 "), and every
    gutter boundary adds one more. ascii_field_width is the widest the hex
    field can get, so short final lines are padded up to it to keep the
    ASCII column aligned. For 16 bytes with a gutter every 4 bytes that is
    16 * 3 + 16 // 4 = 52.

    Note: the gutter after the last byte of a full line is suppressed, so a
    full hex field is one column short of ascii_field_width and every line
    gets at least one pad space.
    """
    chunk_width: int = 16  # bytes read per line
    gutter_interval: int = 4  # bytes per gutter group
    ascii_field_width: int = field(init=False)
    hex_field_width: int = field(init=False)  # capacity hint only

    def __post_init__(self):
        """Validate parameters and compute derived widths."""
        for name in ('chunk_width', 'gutter_interval'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer. Got: {value!r}")

        object.__setattr__(self, 'ascii_field_width',
                           self.chunk_width * 3 + self.chunk_width // self.gutter_interval)
        object.__setattr__(self, 'hex_field_width', self.chunk_width)


@dataclass
class DumpConfig:
    """User-facing dump configuration."""
    chunk_width: int = 16
    gutter_interval: int = 4
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate and normalize log_level."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}. Got: {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

    def formatting(self) -> Formatting:
        """Build the immutable layout for this configuration."""
        return Formatting(self.chunk_width, self.gutter_interval)

    @classmethod
    def from_json(cls, path: str | Path) -> 'DumpConfig':
        """Load DumpConfig from JSON file, falling back to defaults if missing."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return cls()
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config in {path} must be a JSON object")

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if not k.startswith('_')}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

        return cls(**values)


def create_default_config(path: str | Path = DEFAULT_CONFIG_PATH) -> None:
    """
    Create default configuration file if it doesn't exist.

    Raises:
        ConfigError: If the file cannot be written
    """
    config = {
        "chunk_width": 16,
        "_chunk_width_comment": "Bytes rendered per line",
        "gutter_interval": 4,
        "_gutter_interval_comment": "Insert an extra space after every N bytes",
        "log_level": "WARNING",
        "_log_level_comment": "DEBUG, INFO, WARNING, ERROR, CRITICAL or NONE"
    }

    path_obj = Path(path)
    if not path_obj.exists():
        try:
            with open(path_obj, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Cannot create config file {path}: {e}") from e
        print(f"Created default config: {path}")
