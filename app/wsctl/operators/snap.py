"""Snap package operator implementation.

Executes snap installation and removal using the snap CLI.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.detectors.snap import SnapDetector
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)


def snap_install_args(source: str) -> list[str]:
    """Build ``snap install`` arguments from a source such as "code --classic".

    The first word is the snap name; any further words are options and
    are placed before it.
    """
    parts = source.split()
    if len(parts) <= 1:
        return ["install", source.strip()]
    return ["install", *parts[1:], parts[0]]


class SnapOperator(Operator):
    """Operator for Snap packages. Requires sudo for install and remove."""

    @property
    def method(self) -> InstallMethod:
        """Return SNAP as the installation method."""
        return InstallMethod.SNAP

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return self._runner.command_exists("snap")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install a snap, honouring options embedded in the source.

        Raises:
            CommandError: If snap install fails.
        """
        args = snap_install_args(pkg.source)

        if self.dry_run:
            return self._planned(f"sudo snap {' '.join(args)}")

        snap_name = args[-1]
        if SnapDetector(self._runner).detect(ctx, snap_name):
            return self._skipped(f"snap {snap_name} already installed")

        logger.info("Installing %s via Snap", snap_name)
        self._runner.execute_sudo(ctx, "snap", *args)
        return self._done(f"installed snap {snap_name}")

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Remove a snap with ``snap remove``, ignoring install options in the source."""
        snap_name = snap_install_args(pkg.source)[-1]
        if self.dry_run:
            return self._planned(f"sudo snap remove {snap_name}")

        logger.info("Removing snap %s", snap_name)
        self._runner.execute_sudo(ctx, "snap", "remove", snap_name)
        return self._done(f"removed snap {snap_name}")
