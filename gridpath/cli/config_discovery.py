"""
Config file discovery logic
"""

from pathlib import Path
from typing import Optional
from platformdirs import user_config_dir

LOCAL_CONFIG_NAME = 'gridpath.yaml'


def discover_config(explicit_path: Optional[str] = None) -> Optional[str]:
    """
    Discover configuration file from various locations

    Priority order:
    1. Explicit path provided by user
    2. Current directory (./gridpath.yaml)
    3. OS-native config location (~/.config/gridpath/config.yaml on Linux)

    Args:
        explicit_path: Optional explicit path to config file

    Returns:
        Absolute path to config file as string, or None when no file exists
        and built-in defaults should be used

    Raises:
        FileNotFoundError: If an explicit path was given but does not exist
    """
    if explicit_path:
        path = Path(explicit_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {explicit_path}")
        return str(path)

    local_config = Path(LOCAL_CONFIG_NAME).resolve()
    if local_config.exists():
        return str(local_config)

    os_config = Path(user_config_dir('gridpath', appauthor=False)) / 'config.yaml'
    if os_config.exists():
        return str(os_config)

    return None
