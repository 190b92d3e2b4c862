"""DEB package operator implementation.

Installs a local or downloaded .deb file with dpkg. Dependency problems
are reported, not repaired.
"""

import logging
from pathlib import Path

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, InstallStepError
from wsctl.core.paths import get_temp_path
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)

DEB_TEMP_NAME = "package.deb"


class DebOperator(Operator):
    """Operator for .deb files given by path or URL."""

    @property
    def method(self) -> InstallMethod:
        """Return DEB as the installation method."""
        return InstallMethod.DEB

    def is_available(self) -> bool:
        """Check if dpkg is available."""
        return self._runner.command_exists("dpkg")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Download the .deb if the source is a URL, then ``sudo dpkg -i`` it.

        Raises:
            DownloadError: If the download fails or exceeds its deadline.
            InstallStepError: If dpkg fails.
        """
        if self.dry_run:
            if pkg.is_url_source:
                return self._planned(
                    f"download {pkg.source} to {get_temp_path(DEB_TEMP_NAME)} and sudo dpkg -i it"
                )
            return self._planned(f"sudo dpkg -i {pkg.source}")

        deb_path = pkg.source
        if pkg.is_url_source:
            deb_path = str(self._download(ctx, pkg.source))

        logger.info("Installing DEB package %s", deb_path)
        try:
            self._runner.execute_sudo(ctx, "dpkg", "-i", deb_path)
        except CommandError as e:
            msg = f"dpkg installation failed: {e}"
            raise InstallStepError(msg) from e

        return self._done(f"installed {deb_path} with dpkg")

    def _download(self, ctx: OperationContext, url: str) -> Path:
        target = get_temp_path(DEB_TEMP_NAME)
        logger.info("Downloading DEB package from %s", url)
        download_ctx = ctx.with_timeout(self._config.deb_download_timeout_seconds)
        self._network.download_file(download_ctx, url, target)
        return target
