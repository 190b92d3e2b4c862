"""Single-binary operator implementation.

Downloads one executable into ~/.local/bin.
"""

import logging
from pathlib import Path

from wsctl.core.context import OperationContext
from wsctl.core.errors import InvalidPackageError
from wsctl.core.paths import get_temp_path, get_user_bin_dir
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)


class BinaryOperator(Operator):
    """Operator for pre-compiled binaries downloaded from a URL."""

    @property
    def method(self) -> InstallMethod:
        """Return BINARY as the installation method."""
        return InstallMethod.BINARY

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Download the binary and place it in ~/.local/bin.

        Skipped when an executable named after the package is on PATH.

        Raises:
            InvalidPackageError: If the source is not a download URL.
            DownloadError: If the download fails.
        """
        if self.dry_run:
            return self._planned(f"download and install binary {pkg.source}")

        if self._runner.command_exists(pkg.name):
            return self._skipped(f"binary {pkg.name} already available")

        if not pkg.is_url_source:
            msg = f"binary source for {pkg.name} must be a download URL: {pkg.source}"
            raise InvalidPackageError(msg)

        target = self._install_binary(ctx, pkg)
        return self._done(f"installed {target}")

    def _install_binary(self, ctx: OperationContext, pkg: Package) -> Path:
        """Download to a temp file, mark it executable and move it into place."""
        logger.info("Installing %s binary from %s", pkg.name, pkg.source)

        temp_file = get_temp_path(pkg.name)
        download_ctx = ctx.with_timeout(self._config.download_timeout_seconds)
        self._network.download_file(download_ctx, pkg.source, temp_file)
        self._files.make_executable(temp_file)

        bin_dir = get_user_bin_dir()
        self._files.ensure_dir(bin_dir)
        target = bin_dir / pkg.name
        self._files.move_file(temp_file, target)

        logger.info("%s installed to %s", pkg.name, target)
        return target
