"""APT package operator implementation.

Executes package installation and removal using apt-get, and lists
installed packages with dpkg-query.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, InstallStepError
from wsctl.core.proxy import apt_proxy_args
from wsctl.detectors.cascade import DetectionCascade
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)

_LIST_FORMAT = "--showformat=${Package} ${Version}\\n"


class AptOperator(Operator):
    """Operator for APT packages.

    Refreshes package lists before every install. Proxy settings are
    passed to apt-get as ``-o Acquire::...`` options because sudo does
    not forward the proxy environment.
    """

    @property
    def method(self) -> InstallMethod:
        """Return APT as the installation method."""
        return InstallMethod.APT

    def is_available(self) -> bool:
        """Check if apt-get is available."""
        return self._runner.command_exists("apt-get")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install a package with ``apt-get install -y``.

        The package is skipped when any detector already finds it.

        Raises:
            InstallStepError: If ``apt-get update`` fails.
            CommandError: If ``apt-get install`` fails.
        """
        proxy_args = apt_proxy_args()
        update_cmd = ["apt-get", *proxy_args, "update"]
        install_cmd = ["apt-get", *proxy_args, "install", "-y", pkg.source]

        if self.dry_run:
            return self._planned(
                f"sudo {' '.join(update_cmd)} && sudo {' '.join(install_cmd)}"
            )

        if DetectionCascade(self._runner).is_installed(ctx, pkg.source):
            return self._skipped(f"package {pkg.source} already installed")

        logger.info("Installing %s via APT", pkg.source)

        try:
            self._runner.execute_sudo(ctx, *update_cmd)
        except CommandError as e:
            msg = f"failed to update package lists: {e}"
            raise InstallStepError(msg) from e

        self._runner.execute_sudo(ctx, *install_cmd)
        return self._done(f"installed {pkg.source} via apt-get")

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Remove a package with ``apt-get remove -y``."""
        if self.dry_run:
            return self._planned(f"sudo apt-get remove -y {pkg.source}")

        logger.info("Uninstalling %s", pkg.source)
        self._runner.execute_sudo(ctx, "apt-get", "remove", "-y", pkg.source)
        return self._done(f"removed {pkg.source} via apt-get")

    def list_packages(self, ctx: OperationContext) -> list[Package]:
        """List installed packages as reported by dpkg-query.

        Returns:
            APT packages with name, source and version set.

        Raises:
            CommandError: If dpkg-query fails.
        """
        output = self._runner.execute_with_output(ctx, "dpkg-query", "-W", _LIST_FORMAT)

        packages: list[Package] = []
        for line in output.splitlines():
            parts = line.split()
            if len(parts) < 2:
                continue
            packages.append(
                Package(
                    name=parts[0],
                    source=parts[0],
                    method=InstallMethod.APT,
                    version=parts[1],
                )
            )
        return packages
