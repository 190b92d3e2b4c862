"""Install orchestration services.

PackageService validates packages before handing them to the installer.
InstallService adds system awareness: it picks the installation method
for the detected distribution and installs batches one after another,
isolating failures so a batch always yields one result per entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from wsctl.core.context import OperationContext
from wsctl.core.errors import InvalidPackageError, SystemDetectionError, WsctlError
from wsctl.core.installer import PackageInstaller
from wsctl.models.package import InstallMethod, Package
from wsctl.models.result import InstallationResult
from wsctl.models.system import SystemInfo
from wsctl.platform.base import SystemDetector

logger = logging.getLogger(__name__)


def select_method(info: SystemInfo) -> InstallMethod:
    """Choose the installation method for a detected system.

    Debian-family systems with APT use APT; RHEL-family systems use DNF
    or YUM, whichever was detected; Arch-family systems use pacman.
    Anything else falls back to the detected package manager.
    """
    manager_method = info.package_manager.method

    if info.is_debian_based and manager_method is InstallMethod.APT:
        return InstallMethod.APT

    if info.is_fedora and manager_method in (InstallMethod.DNF, InstallMethod.YUM):
        return manager_method

    if info.is_arch:
        return InstallMethod.PACMAN

    return manager_method


class PackageService:
    """Validating front for PackageInstaller."""

    def __init__(self, installer: PackageInstaller) -> None:
        self._installer = installer

    @property
    def installer(self) -> PackageInstaller:
        """The wrapped installer."""
        return self._installer

    @staticmethod
    def validate(pkg: Package) -> None:
        """Ensure a package has a name, a source and a known method.

        Raises:
            InvalidPackageError: If any of them is missing.
        """
        if not pkg.name.strip():
            msg = "package name cannot be empty"
            raise InvalidPackageError(msg)
        if not pkg.source.strip():
            msg = f"package source cannot be empty for {pkg.name}"
            raise InvalidPackageError(msg)
        if not isinstance(pkg.method, InstallMethod):
            msg = f"invalid installation method for {pkg.name}: {pkg.method!r}"
            raise InvalidPackageError(msg)

    def install(self, ctx: OperationContext, pkg: Package) -> InstallationResult:
        """Validate and install a package.

        Raises:
            InvalidPackageError: If the package is invalid.
        """
        self.validate(pkg)
        return self._installer.install(ctx, pkg)

    def remove(self, ctx: OperationContext, pkg: Package) -> InstallationResult:
        """Validate and remove a package.

        Raises:
            InvalidPackageError: If the package is invalid.
        """
        self.validate(pkg)
        return self._installer.remove(ctx, pkg)

    def list(self, ctx: OperationContext) -> list[Package]:
        """List installed APT packages."""
        return self._installer.list(ctx)

    def is_installed(self, ctx: OperationContext, name: str) -> bool:
        """Check if name is installed by any method.

        Raises:
            InvalidPackageError: If name is empty.
        """
        if not name.strip():
            msg = "package name cannot be empty"
            raise InvalidPackageError(msg)
        return self._installer.is_installed(ctx, name)


class InstallService:
    """System-aware installation of applications.

    Args:
        package_service: Validating installer front.
        detector: Source of SystemInfo.
    """

    def __init__(self, package_service: PackageService, detector: SystemDetector) -> None:
        self._packages = package_service
        self._detector = detector

    def get_system_info(self, ctx: OperationContext) -> SystemInfo:
        """Detect the current system.

        Raises:
            SystemDetectionError: If detection fails.
        """
        try:
            return self._detector.detect_system(ctx)
        except WsctlError as e:
            msg = f"failed to detect system: {e}"
            raise SystemDetectionError(msg) from e

    def install_application(self, ctx: OperationContext, name: str, source: str) -> InstallationResult:
        """Install one application with the method that suits this system.

        Raises:
            SystemDetectionError: If the system cannot be detected.
            InvalidPackageError: If name or source is empty.
        """
        info = self.get_system_info(ctx)
        pkg = Package(name=name, source=source, method=select_method(info))
        logger.debug("Installing %s from %s via %s", name, source, pkg.method.value)
        return self._packages.install(ctx, pkg)

    def install_multiple_applications(
        self,
        ctx: OperationContext,
        apps: Mapping[str, str],
    ) -> list[InstallationResult]:
        """Install applications one after another.

        Args:
            ctx: Shared context for the whole batch.
            apps: Application name to source, installed in mapping order.

        Returns:
            One result per application, in the same order. Errors that
            prevent an install, of any type, are reported as failed results.
        """
        results: list[InstallationResult] = []
        for name, source in apps.items():
            try:
                result = self.install_application(ctx, name, source)
            except Exception as e:
                logger.debug("Install of %s failed before dispatch: %s", name, e)
                result = InstallationResult(
                    package=Package(name=name, source=source, method=InstallMethod.APT),
                    success=False,
                    error=e,
                    output=str(e),
                )
            results.append(result)
        return results

    def install_packages(
        self,
        ctx: OperationContext,
        packages: Iterable[Package],
    ) -> list[InstallationResult]:
        """Install pre-built packages one after another.

        Returns:
            One result per package, in order. Invalid packages are
            reported as failed results.
        """
        results: list[InstallationResult] = []
        for pkg in packages:
            try:
                result = self._packages.install(ctx, pkg)
            except Exception as e:
                logger.debug("Install of %s failed: %s", pkg.name, e)
                result = InstallationResult(package=pkg, success=False, error=e, output=str(e))
            results.append(result)
        return results

    def list_installed_packages(self, ctx: OperationContext) -> list[Package]:
        """List installed APT packages."""
        return self._packages.list(ctx)
