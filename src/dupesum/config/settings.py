from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]


# Settings key constants
SETTING_MIN_SIZE = 'summary.min_size'
SETTING_SORT_BY = 'summary.sort_by'
SETTING_POLICY = 'summary.policy'
SETTING_LOG_PATH = 'logging.path'
SETTING_LOG_LEVEL = 'logging.level'


class Settings:
    """Read-only key-value access to a TOML settings file.

    This class does not know the meaning of any setting; it loads the TOML document and hands out
    raw values. Consumers interpret and validate them.

    Example:
        settings = Settings(Path('.dupesum.toml'))
        min_size = settings.get(SETTING_MIN_SIZE, '10MiB')
    """

    def __init__(self, settings_file: Path | None = None):
        """Load settings from a TOML file.

        Args:
            settings_file: Path to the TOML file. None gives empty settings, so every get() returns
                           its default.

        Raises:
            FileNotFoundError: settings_file is given but does not exist
            tomllib.TOMLDecodeError: settings_file is not valid TOML
        """
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None:
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @property
    def path(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting value by key with optional default.

        Dot notation reaches into nested tables: 'summary.min_size' reads
        settings['summary']['min_size']. The default is returned if any part of the key path is
        missing or not a table.

        Examples:
            >>> settings.get(SETTING_SORT_BY, 'redundant')
            'size'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        keys = key.split('.')
        value = self._settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
