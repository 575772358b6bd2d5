"""Configuration validation for file backup."""

from typing import Dict, Any

from ..core.errors import ConfigurationError
from ..core.models import DEFAULT_DIR_MODE


class ConfigValidator:
    """Validates file backup configuration."""

    MAPPING_SECTIONS = ['backup', 'logging']
    REQUIRED_BACKUP_FIELDS = ['source', 'destination']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration file data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        self._validate_structure(config)

    def validate_backup_settings(self, settings: Dict[str, Any]) -> None:
        """Validate merged backup settings before a run is configured.

        Args:
            settings: The ``backup`` section with command-line overrides applied.

        Raises:
            ConfigurationError: If settings are missing or contradictory.
        """
        missing_fields = [field for field in self.REQUIRED_BACKUP_FIELDS if not settings.get(field)]
        if missing_fields:
            raise ConfigurationError(
                f"Source and Backup directories are required (missing: {', '.join(missing_fields)})"
            )

        for field in ('file', 'type'):
            value = settings.get(field)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"Filter '{field}' must be a string, quote it in YAML: {value!r}"
                )

        if settings.get('file') and settings.get('type'):
            raise ConfigurationError(
                "Cannot specify both file and type filters together. Specify either"
            )

        interval = settings.get('interval', 0)
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise ConfigurationError(f"Interval must be a whole number of seconds: {interval!r}")
        if interval < 0:
            raise ConfigurationError(f"Interval cannot be negative: {interval}")

        self.parse_dir_mode(settings.get('dir_mode', DEFAULT_DIR_MODE))

    def parse_dir_mode(self, value: Any) -> int:
        """Parse a directory mode given as an int or an octal string.

        Raises:
            ConfigurationError: If the mode is not a valid permission value.
        """
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ConfigurationError(f"Invalid directory mode: {value!r}")

        try:
            mode = int(value, 8) if isinstance(value, str) else int(value)
        except (ValueError, TypeError):
            raise ConfigurationError(f"Invalid directory mode: {value!r}")

        # An unquoted YAML 755 arrives as decimal
        if not isinstance(value, str) and mode > 0o777:
            raise ConfigurationError(
                f"Directory mode {value!r} is not an octal mode, quote it in YAML (e.g. '755')"
            )
        if not (0 <= mode <= 0o777):
            raise ConfigurationError(f"Invalid directory mode: {value!r}")
        return mode

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Args:
            config: Configuration dictionary.

        Raises:
            ConfigurationError: If the document or a section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        for section in self.MAPPING_SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
