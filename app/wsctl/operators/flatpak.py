"""Flatpak package operator implementation.

Installs applications from Flathub into the user installation, so no
sudo is needed.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.detectors.flatpak import FlatpakDetector
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)

FLATHUB_REMOTE = "flathub"


class FlatpakOperator(Operator):
    """Operator for Flatpak applications (user scope)."""

    @property
    def method(self) -> InstallMethod:
        """Return FLATPAK as the installation method."""
        return InstallMethod.FLATPAK

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return self._runner.command_exists("flatpak")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Add the Flathub remote if needed, then install the application.

        Raises:
            CommandError: If adding the remote or installing fails.
        """
        if self.dry_run:
            return self._planned(f"flatpak install -y --user {FLATHUB_REMOTE} {pkg.source}")

        if FlatpakDetector(self._runner).detect(ctx, pkg.source):
            return self._skipped(f"flatpak {pkg.source} already installed")

        self._ensure_flathub_remote(ctx)

        logger.info("Installing %s via Flatpak from Flathub", pkg.source)
        self._runner.execute(ctx, "flatpak", "install", "-y", "--user", FLATHUB_REMOTE, pkg.source)
        return self._done(f"installed flatpak {pkg.source}")

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Uninstall an application from the user installation."""
        if self.dry_run:
            return self._planned(f"flatpak uninstall -y --user {pkg.source}")

        logger.info("Removing flatpak %s", pkg.source)
        self._runner.execute(ctx, "flatpak", "uninstall", "-y", "--user", pkg.source)
        return self._done(f"removed flatpak {pkg.source}")

    def _ensure_flathub_remote(self, ctx: OperationContext) -> None:
        logger.debug("Ensuring Flathub remote is configured")
        self._runner.execute(
            ctx,
            "flatpak",
            "remote-add",
            "--if-not-exists",
            "--user",
            FLATHUB_REMOTE,
            self._config.flathub_remote_url,
        )
