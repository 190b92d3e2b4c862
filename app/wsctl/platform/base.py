"""Abstract ports to the host system.

Operators, detectors and services talk to the machine only through these
interfaces: one for running commands, one for the filesystem, one for
HTTP and one for describing the system. Concrete adapters live next to
this module; tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from wsctl.core.context import OperationContext
from wsctl.models.system import DesktopEnvironment, Distribution, PackageManager, SystemInfo


class CommandRunner(ABC):
    """Runs external commands.

    All methods raise CommandError when the command exits non-zero, is
    killed, cannot be found, or its context ends first. ``env`` is an
    overlay merged over the inherited environment for that call only.
    """

    @abstractmethod
    def execute(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> None:
        """Run a command to completion."""

    @abstractmethod
    def execute_with_output(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> str:
        """Run a command and return its standard output."""

    @abstractmethod
    def execute_sudo(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> None:
        """Run a command through sudo."""

    @abstractmethod
    def command_exists(self, name: str) -> bool:
        """Check if an executable of this name is on PATH."""


class FileManager(ABC):
    """Filesystem operations used by installers."""

    @abstractmethod
    def file_exists(self, path: Path) -> bool:
        """Check if a file, directory or symlink exists at path."""

    @abstractmethod
    def ensure_dir(self, path: Path) -> None:
        """Create a directory and its parents if missing."""

    @abstractmethod
    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, preserving its permission bits."""

    @abstractmethod
    def write_file(self, path: Path, content: str, mode: int = 0o644) -> None:
        """Write text to a file and set its permissions."""

    @abstractmethod
    def read_file(self, path: Path) -> str:
        """Read a text file."""

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        """Remove a file or symlink. Missing files are ignored."""

    @abstractmethod
    def remove_tree(self, path: Path) -> None:
        """Remove a directory tree. Missing directories are ignored."""

    @abstractmethod
    def make_executable(self, path: Path) -> None:
        """Set permissions 0755 on a file."""

    @abstractmethod
    def move_file(self, src: Path, dst: Path) -> None:
        """Move a file, replacing any existing destination."""

    @abstractmethod
    def symlink(self, target: Path, link: Path) -> None:
        """Point ``link`` at ``target``, replacing any existing entry."""

    @abstractmethod
    def extract_archive(
        self,
        ctx: OperationContext,
        archive: Path,
        dest: Path,
        strip_components: int | None = 0,
    ) -> list[Path]:
        """Extract a zip or tar archive and return the extracted files.

        A strip_components of None strips the top-level directory only
        when every entry shares one.
        """

    @abstractmethod
    def list_executables(self, directory: Path) -> list[Path]:
        """Return executable regular files directly inside directory."""


class NetworkClient(ABC):
    """HTTP access."""

    @abstractmethod
    def download_file(self, ctx: OperationContext, url: str, dest: Path) -> None:
        """Download url to dest.

        Raises:
            DownloadError: If the request fails, returns a non-200 status
                or the context ends. A partial dest is removed first.
        """

    @abstractmethod
    def fetch_text(self, ctx: OperationContext, url: str) -> str:
        """GET url and return the decoded body."""


class SystemDetector(ABC):
    """Describes the host system."""

    @abstractmethod
    def detect_system(self, ctx: OperationContext) -> SystemInfo:
        """Detect the full system snapshot.

        A missing desktop environment is tolerated; a missing package
        manager is not.
        """

    @abstractmethod
    def detect_distribution(self) -> Distribution:
        """Detect the Linux distribution."""

    @abstractmethod
    def detect_desktop_environment(self) -> DesktopEnvironment:
        """Detect the desktop environment.

        Raises:
            NoDesktopEnvironmentError: If none is running.
        """

    @abstractmethod
    def detect_package_manager(self) -> PackageManager:
        """Detect the default package manager.

        Raises:
            NoPackageManagerError: If no supported manager is found.
        """
