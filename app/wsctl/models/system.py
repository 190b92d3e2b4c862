"""System information models.

Snapshots of the host distribution, desktop environment and package
manager. They are recomputed on each detection call.
"""

from dataclasses import dataclass, field
from typing import Literal

from wsctl.models.package import InstallMethod

DistributionFamily = Literal["debian", "rhel", "arch", "suse", "unknown"]


@dataclass(frozen=True, slots=True)
class Distribution:
    """A Linux distribution as read from os-release or lsb-release."""

    name: str
    id: str
    version: str = ""
    codename: str = ""
    family: DistributionFamily = "unknown"


@dataclass(frozen=True, slots=True)
class DesktopEnvironment:
    """The running desktop environment."""

    name: str
    session: str = ""
    version: str = ""


@dataclass(frozen=True, slots=True)
class PackageManager:
    """The default system package manager.

    Attributes:
        name: Display name (e.g. 'APT').
        method: InstallMethod the manager corresponds to.
        command: Executable used to invoke it (e.g. 'apt').
    """

    name: str
    method: InstallMethod
    command: str


@dataclass(frozen=True, slots=True)
class SystemInfo:
    """Immutable snapshot of the host system."""

    distribution: Distribution
    package_manager: PackageManager
    desktop_environment: DesktopEnvironment | None = field(default=None)
    architecture: str = ""
    kernel: str = "unknown"

    @property
    def is_debian_based(self) -> bool:
        """Check if the distribution is Ubuntu or Debian family."""
        return self.distribution.id == "ubuntu" or self.distribution.family == "debian"

    @property
    def is_fedora(self) -> bool:
        """Check if the distribution is Fedora or RHEL family."""
        return self.distribution.id == "fedora" or self.distribution.family == "rhel"

    @property
    def is_arch(self) -> bool:
        """Check if the distribution is Arch family."""
        return self.distribution.id == "arch" or self.distribution.family == "arch"

    @property
    def is_gnome(self) -> bool:
        """Check if the desktop environment is GNOME."""
        if self.desktop_environment is None:
            return False
        return "GNOME" in self.desktop_environment.name.upper().split(":")
