"""Linux system detection.

Reads the distribution from /etc/os-release (falling back to
/etc/lsb-release), the desktop from the session environment and the
package manager by probing PATH.
"""

import logging
import os
import platform
from pathlib import Path

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, NoDesktopEnvironmentError, NoPackageManagerError
from wsctl.models.package import InstallMethod
from wsctl.models.system import (
    DesktopEnvironment,
    Distribution,
    DistributionFamily,
    PackageManager,
    SystemInfo,
)
from wsctl.platform.base import CommandRunner, FileManager, SystemDetector

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = Path("/etc/os-release")
LSB_RELEASE_PATH = Path("/etc/lsb-release")

# Substring of the distribution id -> family, checked in order
_FAMILIES: tuple[tuple[str, DistributionFamily], ...] = (
    ("ubuntu", "debian"),
    ("debian", "debian"),
    ("mint", "debian"),
    ("fedora", "rhel"),
    ("rhel", "rhel"),
    ("centos", "rhel"),
    ("rocky", "rhel"),
    ("arch", "arch"),
    ("manjaro", "arch"),
    ("opensuse", "suse"),
    ("suse", "suse"),
)

# Checked in order; the first one on PATH wins
_PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager(name="APT", method=InstallMethod.APT, command="apt"),
    PackageManager(name="DNF", method=InstallMethod.DNF, command="dnf"),
    PackageManager(name="YUM", method=InstallMethod.YUM, command="yum"),
    PackageManager(name="Pacman", method=InstallMethod.PACMAN, command="pacman"),
    PackageManager(name="Zypper", method=InstallMethod.ZYPPER, command="zypper"),
)


def determine_family(distribution_id: str) -> DistributionFamily:
    """Map a distribution id such as 'ubuntu' or 'opensuse-leap' to its family."""
    distribution_id = distribution_id.lower()
    for fragment, family in _FAMILIES:
        if fragment in distribution_id:
            return family
    return "unknown"


def _parse_key_values(content: str, strip_quotes: bool = True) -> dict[str, str]:
    fields: dict[str, str] = {}
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if strip_quotes:
            value = value.strip('"')
        fields[key.strip()] = value
    return fields


def parse_os_release(content: str) -> Distribution:
    """Parse the contents of /etc/os-release."""
    fields = _parse_key_values(content)
    distribution_id = fields.get("ID", "")
    return Distribution(
        name=fields.get("NAME", ""),
        id=distribution_id,
        version=fields.get("VERSION", ""),
        codename=fields.get("VERSION_CODENAME", ""),
        family=determine_family(distribution_id),
    )


def parse_lsb_release(content: str) -> Distribution:
    """Parse the contents of /etc/lsb-release."""
    fields = _parse_key_values(content, strip_quotes=False)
    distribution_id = fields.get("DISTRIB_ID", "").lower()
    return Distribution(
        name=fields.get("DISTRIB_DESCRIPTION", ""),
        id=distribution_id,
        version=fields.get("DISTRIB_RELEASE", ""),
        codename=fields.get("DISTRIB_CODENAME", ""),
        family=determine_family(distribution_id),
    )


class LinuxSystemDetector(SystemDetector):
    """SystemDetector for Linux hosts.

    Args:
        runner: Used to look for package managers and read the kernel version.
        files: Used to read the release files.
        os_release_path: Location of os-release, overridable for tests.
        lsb_release_path: Location of lsb-release, overridable for tests.
    """

    def __init__(
        self,
        runner: CommandRunner,
        files: FileManager,
        os_release_path: Path = OS_RELEASE_PATH,
        lsb_release_path: Path = LSB_RELEASE_PATH,
    ) -> None:
        self._runner = runner
        self._files = files
        self._os_release_path = os_release_path
        self._lsb_release_path = lsb_release_path

    def detect_system(self, ctx: OperationContext) -> SystemInfo:
        distribution = self.detect_distribution()

        try:
            desktop: DesktopEnvironment | None = self.detect_desktop_environment()
        except NoDesktopEnvironmentError:
            logger.debug("No desktop environment detected")
            desktop = None

        package_manager = self.detect_package_manager()

        return SystemInfo(
            distribution=distribution,
            package_manager=package_manager,
            desktop_environment=desktop,
            architecture=platform.machine(),
            kernel=self._kernel_version(ctx),
        )

    def detect_distribution(self) -> Distribution:
        for path, parser in (
            (self._os_release_path, parse_os_release),
            (self._lsb_release_path, parse_lsb_release),
        ):
            if not self._files.file_exists(path):
                continue
            try:
                return parser(self._files.read_file(path))
            except OSError as e:
                logger.debug("Cannot read %s: %s", path, e)

        return Distribution(name="Unknown", id="unknown", family="unknown")

    def detect_desktop_environment(self) -> DesktopEnvironment:
        current = os.environ.get("XDG_CURRENT_DESKTOP", "")
        if current:
            return DesktopEnvironment(
                name=current,
                session=os.environ.get("XDG_SESSION_DESKTOP", ""),
            )

        session = os.environ.get("DESKTOP_SESSION", "")
        if session:
            return DesktopEnvironment(name=session, session=session)

        raise NoDesktopEnvironmentError()

    def detect_package_manager(self) -> PackageManager:
        for manager in _PACKAGE_MANAGERS:
            if self._runner.command_exists(manager.command):
                return manager
        raise NoPackageManagerError()

    def _kernel_version(self, ctx: OperationContext) -> str:
        try:
            output = self._runner.execute_with_output(ctx, "uname", "-r")
        except CommandError as e:
            logger.debug("Cannot read kernel version: %s", e)
            return "unknown"
        return output.strip() or "unknown"
