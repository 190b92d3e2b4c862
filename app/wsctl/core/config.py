"""Installer configuration and settings.

This module provides the configuration model and loader for the
installer. Configuration is stored in ~/.config/wsctl/config.toml; a
missing file means defaults.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wsctl import __version__
from wsctl.core.errors import ConfigError
from wsctl.core.paths import get_config_path

DEFAULT_USER_AGENT = f"wsctl/{__version__}"

DEFAULT_FLATHUB_URL = "https://dl.flathub.org/repo/flathub.flatpakrepo"

# aqua standard registry version written into new aqua.yaml files
DEFAULT_AQUA_REGISTRY_REF = "v4.155.1"


class InstallerConfig(BaseModel):
    """Configuration for the package installer.

    Attributes:
        dry_run: Report intended actions without executing them.
        verbose: Log every executed command.
        download_timeout_seconds: Deadline for ordinary downloads.
        deb_download_timeout_seconds: Deadline for DEB downloads, which
            can be several hundred megabytes.
        user_agent: User-Agent header sent with downloads.
        aqua_registry_ref: Registry version pinned in new aqua configs.
        flathub_remote_url: Location of the Flathub repo file.
    """

    model_config = ConfigDict(extra="forbid")

    dry_run: Annotated[bool, Field(description="Report actions without executing them")] = False
    verbose: Annotated[bool, Field(description="Log every executed command")] = False
    download_timeout_seconds: Annotated[
        int,
        Field(ge=5, le=3600, description="Download timeout in seconds (5-3600)"),
    ] = 60
    deb_download_timeout_seconds: Annotated[
        int,
        Field(ge=60, le=7200, description="DEB download timeout in seconds (60-7200)"),
    ] = 900
    user_agent: Annotated[str, Field(min_length=1, description="HTTP User-Agent")] = DEFAULT_USER_AGENT
    aqua_registry_ref: Annotated[
        str,
        Field(min_length=1, description="aqua standard registry ref"),
    ] = DEFAULT_AQUA_REGISTRY_REF
    flathub_remote_url: Annotated[
        str,
        Field(min_length=1, description="Flathub .flatpakrepo URL"),
    ] = DEFAULT_FLATHUB_URL


def load_config(path: Path | None = None) -> InstallerConfig:
    """Load installer configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated InstallerConfig. Defaults if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return InstallerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return InstallerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
