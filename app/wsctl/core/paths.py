"""XDG-compliant path management for wsctl.

This module provides the locations wsctl reads and writes: its own
configuration, the configuration of the tool managers it drives (mise,
aqua), and the user-scoped install directories.

Defaults:
- Config: ~/.config/wsctl/
- Binaries: ~/.local/bin/
- Bundles and extracted tools: ~/.local/share/<name>/
"""

import os
import tempfile
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "wsctl"


def get_home_dir() -> Path:
    """Get the user's home directory.

    Falls back to $HOME and then /home/$USER when the home directory
    cannot be resolved from the password database.
    """
    try:
        return Path.home()
    except RuntimeError:
        home = os.environ.get("HOME")
        if home:
            return Path(home)
        return Path("/home") / os.environ.get("USER", "")


def get_xdg_config_home() -> Path:
    """Get the XDG config base directory.

    Returns:
        XDG_CONFIG_HOME if set, otherwise ~/.config.
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base)
    return get_home_dir() / ".config"


def get_config_dir() -> Path:
    """Get the wsctl configuration directory.

    Returns:
        Path to ~/.config/wsctl/ (or XDG_CONFIG_HOME/wsctl/).
    """
    return get_xdg_config_home() / APP_NAME


def get_config_path() -> Path:
    """Get the wsctl configuration file path.

    Returns:
        Path to ~/.config/wsctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_local_dir() -> Path:
    """Get the user's local prefix, ~/.local.

    This is also the root directory handed to aqua so that its binaries
    land in ~/.local/bin.
    """
    return get_home_dir() / ".local"


def get_user_bin_dir() -> Path:
    """Get the user's binary directory.

    Returns:
        Path to ~/.local/bin.
    """
    return get_user_local_dir() / "bin"


def get_user_share_dir(name: str | None = None) -> Path:
    """Get the user's share directory, or a named subdirectory of it.

    Args:
        name: Application name. If given, returns ~/.local/share/<name>.

    Returns:
        Path to ~/.local/share or ~/.local/share/<name>.
    """
    share = get_user_local_dir() / "share"
    if name:
        return share / name
    return share


def get_mise_config_dir() -> Path:
    """Get the mise configuration directory.

    Returns:
        Path to ~/.config/mise.
    """
    return get_xdg_config_home() / "mise"


def get_mise_config_path() -> Path:
    """Get the global mise configuration file path.

    Returns:
        Path to ~/.config/mise/config.toml.
    """
    return get_mise_config_dir() / "config.toml"


def get_aqua_config_path() -> Path:
    """Get the aqua configuration file path.

    Returns:
        Path to ~/.config/aqua/aqua.yaml.
    """
    return get_xdg_config_home() / "aqua" / "aqua.yaml"


def get_temp_path(filename: str) -> Path:
    """Get a fixed path in the system temp directory.

    Args:
        filename: File name inside the temp directory.

    Returns:
        Path to <tmp>/<filename>.
    """
    return Path(tempfile.gettempdir()) / filename
