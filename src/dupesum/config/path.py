"""Path utilities for locating settings files."""

import os
from pathlib import Path

SETTINGS_FILE_NAME = '.dupesum.toml'
SETTINGS_ENVIRONMENT_VARIABLE = 'DUPESUM_CONFIG'


def find_settings_for_path(target_path: Path) -> Path | None:
    """Find the nearest .dupesum.toml in the target directory or one of its ancestors.

    Args:
        target_path: Directory to start searching from

    Returns:
        Path to the settings file if found, None otherwise
    """
    # os.path.normpath() removes . and .. without following symlinks
    target_path = target_path if target_path.is_absolute() else Path.cwd() / target_path
    current = Path(os.path.normpath(str(target_path)))

    while True:
        candidate = current / SETTINGS_FILE_NAME
        if candidate.is_file():
            return candidate

        parent = current.parent
        if parent == current:
            return None
        current = parent


def resolve_settings_path(explicit_path: str | None = None) -> Path | None:
    """Determine which settings file applies.

    The explicit path wins, then the DUPESUM_CONFIG environment variable, then the nearest
    .dupesum.toml above the current working directory.
    """
    if explicit_path:
        return Path(explicit_path)

    environment_path = os.environ.get(SETTINGS_ENVIRONMENT_VARIABLE)
    if environment_path:
        return Path(environment_path)

    return find_settings_for_path(Path.cwd())
