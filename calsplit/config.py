"""
Configuration parser for calendar splitting.

Handles optional TOML configuration. Without a configuration file the
built-in defaults reproduce the plain behavior: one file per class code in
./output_calendars.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigError
from .header import HeaderSettings, DEFAULT_PRODID, DEFAULT_DESCRIPTION


DEFAULT_OUTPUT_DIR = 'output_calendars'


@dataclass
class OutputConfig:
    """Configuration for where class calendars are written."""
    directory: Path = Path(DEFAULT_OUTPUT_DIR)  # Relative paths resolve against the cwd
    extension: str = ""  # Appended to each file name, e.g. ".ics"


@dataclass
class Config:
    """Main configuration container for calendar splitting."""

    output: OutputConfig = field(default_factory=OutputConfig)
    header: HeaderSettings = field(default_factory=HeaderSettings)
    source_path: Optional[Path] = None  # File this was loaded from, if any

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'calendar-split' / 'calendar-split.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        Args:
            config_path: Explicit file to load. If None, the default path is
                used when it exists, and built-in defaults otherwise.

        Raises:
            ConfigError: If an explicit path does not exist, or the file is
                not valid TOML or holds invalid values.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                return cls()
        elif not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'rb') as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid configuration file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

        return cls.from_dict(data, source_path=config_path)

    @classmethod
    def from_dict(cls, data: dict, source_path: Optional[Path] = None) -> 'Config':
        """Build a Config from already-parsed TOML data."""
        # Parse Output section
        output_data = data.get('Output', {})
        directory = output_data.get('directory', DEFAULT_OUTPUT_DIR)
        extension = output_data.get('extension', '')
        if not isinstance(directory, str) or not directory:
            raise ConfigError("[Output] directory must be a non-empty string")
        if not isinstance(extension, str):
            raise ConfigError("[Output] extension must be a string")
        output = OutputConfig(
            directory=Path(os.path.expanduser(directory)),
            extension=extension
        )

        # Parse Header section
        header_data = data.get('Header', {})
        prodid = header_data.get('prodid', DEFAULT_PRODID)
        description = header_data.get('description', DEFAULT_DESCRIPTION)
        if not isinstance(prodid, str) or not isinstance(description, str):
            raise ConfigError("[Header] prodid and description must be strings")
        try:
            description.format('')
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ConfigError(
                f"[Header] description must contain at most one '{{}}' placeholder: {e}"
            ) from e
        header = HeaderSettings(prodid=prodid, description=description)

        return cls(output=output, header=header, source_path=source_path)
