"""Install-script operator implementation.

Runs a shell installer with bash. URL sources are downloaded first.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.core.paths import get_temp_path
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)

SCRIPT_TEMP_NAME = "install.sh"


class ScriptOperator(Operator):
    """Operator for install scripts given by path or URL."""

    @property
    def method(self) -> InstallMethod:
        """Return SCRIPT as the installation method."""
        return InstallMethod.SCRIPT

    def is_available(self) -> bool:
        """Check if bash is available."""
        return self._runner.command_exists("bash")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Run the install script with bash.

        Raises:
            DownloadError: If a URL script cannot be downloaded.
            CommandError: If the script fails.
        """
        if self.dry_run:
            return self._planned(f"run install script {pkg.source}")

        script_path = pkg.source
        if pkg.is_url_source:
            logger.warning(
                "Install script for %s will be downloaded and executed from %s. "
                "Only run scripts from trusted sources.",
                pkg.name,
                pkg.source,
            )
            target = get_temp_path(SCRIPT_TEMP_NAME)
            download_ctx = ctx.with_timeout(self._config.download_timeout_seconds)
            self._network.download_file(download_ctx, pkg.source, target)
            script_path = str(target)

        logger.info("Running install script %s", script_path)
        self._runner.execute(ctx, "bash", script_path)
        return self._done(f"ran install script {script_path}")
