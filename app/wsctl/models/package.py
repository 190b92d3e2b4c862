"""Package models for installation and detection.

This module defines the closed set of installation methods and the
immutable package record handed to the installer.
"""

from dataclasses import dataclass, field
from enum import Enum

from wsctl.core.errors import UnsupportedMethodError

# Version value that means "let the tool pick the newest release"
LATEST = "latest"


class InstallMethod(Enum):
    """Enumeration of installation methods.

    The first group are methods the installer can execute. DNF, YUM,
    PACMAN, ZYPPER and RPM are recognized for system detection and method
    selection only.
    """

    APT = "apt"
    SNAP = "snap"
    FLATPAK = "flatpak"
    DEB = "deb"
    SCRIPT = "script"
    MISE = "mise"
    AQUA = "aqua"
    BINARY = "binary"
    GITHUB_BINARY = "github-binary"
    GITHUB_BUNDLE = "github-bundle"
    GITHUB_JAVA = "github-java"
    # Legacy alias, installs like GITHUB_BINARY
    GITHUB = "github"

    DNF = "dnf"
    YUM = "yum"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    RPM = "rpm"

    @classmethod
    def parse(cls, value: str) -> "InstallMethod":
        """Convert a string such as ``"github-bundle"`` to an InstallMethod.

        Raises:
            UnsupportedMethodError: If the value is not a known method.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise UnsupportedMethodError(value) from e

    @property
    def is_github(self) -> bool:
        """Check if this method installs from GitHub releases."""
        return self in (
            InstallMethod.GITHUB,
            InstallMethod.GITHUB_BINARY,
            InstallMethod.GITHUB_BUNDLE,
            InstallMethod.GITHUB_JAVA,
        )

    @property
    def is_system_manager(self) -> bool:
        """Check if this method is a distribution package manager."""
        return self in (
            InstallMethod.APT,
            InstallMethod.DNF,
            InstallMethod.YUM,
            InstallMethod.PACMAN,
            InstallMethod.ZYPPER,
        )


@dataclass(frozen=True, slots=True)
class Package:
    """A piece of software to install, detect or remove.

    Packages are value objects: they are created per operation and carry
    no installation state.

    Attributes:
        name: Logical identifier, used for lookups and file placement
            (e.g. 'lazygit', 'com.spotify.Client').
        source: Method-specific locator: an APT package name, an
            'owner/repo' reference, a download URL or a script path.
        method: How the package is installed.
        version: Requested version, 'latest' lets the tool decide.
        group: Catalog classification, informational only.
        description: Human-readable description, informational only.
    """

    name: str
    source: str
    method: InstallMethod
    version: str = field(default=LATEST)
    group: str = field(default="")
    description: str = field(default="")

    @property
    def is_valid(self) -> bool:
        """Check that name, source and method are present."""
        return (
            bool(self.name.strip())
            and bool(self.source.strip())
            and isinstance(self.method, InstallMethod)
        )

    @property
    def pinned_version(self) -> str | None:
        """Return the explicit version, or None for 'latest'/empty."""
        version = self.version.strip()
        if not version or version == LATEST:
            return None
        return version

    @property
    def is_url_source(self) -> bool:
        """Check if the source is a download URL."""
        return self.source.startswith("http")
