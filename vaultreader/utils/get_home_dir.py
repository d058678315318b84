"""Get vaultreader home directory path or path under it."""

import os
from pathlib import Path

HOME_DIR_NAME = ".vaultreader"


def get_home_dir(*parts: str) -> Path:
    """Get vaultreader home directory path or path under it.

    Checks VAULTREADER_HOME first, defaults to ~/.vaultreader if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.vaultreader")
        >>> get_home_dir("config.json")
        Path("/Users/user/.vaultreader/config.json")
    """
    home_env = os.environ.get("VAULTREADER_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / HOME_DIR_NAME
    return home / Path(*parts) if parts else home
