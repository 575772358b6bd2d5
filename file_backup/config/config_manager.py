"""Configuration management for the file backup system."""

import os
import yaml
from typing import Dict, Any, Optional

from .config_validator import ConfigValidator
from ..core.errors import ConfigurationError
from ..core.models import BackupConfig, DEFAULT_DIR_MODE


class ConfigManager:
    """Loads the optional config file and merges command-line overrides."""

    DEFAULT_CONFIG_LOCATIONS = [
        "file-backup.yaml",
        "file-backup.yml",
        os.path.expanduser("~/.file-backup/config.yaml"),
        os.path.expanduser("~/.file-backup/config.yml"),
        "/etc/file-backup/config.yaml",
        "/etc/file-backup/config.yml"
    ]

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        default locations are searched and built-in
                        defaults apply when none exists.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.loaded_from: Optional[str] = None
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults.

        Returns:
            Dictionary containing configuration data.

        Raises:
            ConfigurationError: If an explicit config file is missing or
                any config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ConfigurationError(f"Error reading config file {config_file}: {e}")

            self.config_data = {} if data is None else data
            self.validator.validate(self.config_data)
            self.loaded_from = config_file

        self._set_defaults()
        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file.

        Returns:
            Path to configuration file, or None if no default file exists.

        Raises:
            ConfigurationError: If an explicitly given file does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'backup': {
                'source': None,
                'destination': None,
                'file': None,
                'type': None,
                'interval': 0,
                'dir_mode': DEFAULT_DIR_MODE
            },
            'logging': {
                'level': 'INFO',
                'file': None
            }
        }

        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_backup_settings(self) -> Dict[str, Any]:
        """Get the backup section of the configuration.

        Returns:
            Backup settings dictionary.
        """
        return self.config_data.get('backup', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})

    def build_backup_config(self, **overrides: Any) -> BackupConfig:
        """Merge command-line overrides into the backup settings.

        Overrides whose value is None leave the file value in place.

        Args:
            **overrides: Any of ``source``, ``destination``, ``file``,
                ``type``, ``interval``.

        Returns:
            Validated run configuration.

        Raises:
            ConfigurationError: If the merged settings are invalid.
        """
        settings = dict(self.get_backup_settings())
        settings.update({key: value for key, value in overrides.items() if value is not None})

        self.validator.validate_backup_settings(settings)

        return BackupConfig(
            source_dir=str(settings['source']),
            backup_dir=str(settings['destination']),
            file_filter=settings.get('file') or None,
            type_filter=settings.get('type') or None,
            interval_seconds=settings.get('interval', 0),
            dir_mode=self.validator.parse_dir_mode(settings.get('dir_mode', DEFAULT_DIR_MODE))
        )
