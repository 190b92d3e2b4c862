"""Mise tool operator implementation.

Registers tools globally with ``mise use -g``; mise itself downloads and
activates them.
"""

import logging

import tomli_w

from wsctl.core.context import OperationContext
from wsctl.core.errors import ToolNotInstalledError
from wsctl.core.paths import get_mise_config_dir, get_mise_config_path
from wsctl.detectors.mise import MiseDetector
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)

# Seeded into ~/.config/mise/config.toml when it does not exist yet
MISE_CONFIG_TEMPLATE: dict[str, dict[str, object]] = {
    "settings": {"experimental": True},
    "tools": {},
}


def mise_tool_spec(pkg: Package) -> str:
    """Return 'tool' or 'tool@version' for ``mise use``."""
    tool = pkg.source.strip() or pkg.name
    version = pkg.pinned_version
    if version is None:
        return tool
    return f"{tool}@{version}"


class MiseOperator(Operator):
    """Operator for development tools managed by mise."""

    @property
    def method(self) -> InstallMethod:
        """Return MISE as the installation method."""
        return InstallMethod.MISE

    def is_available(self) -> bool:
        """Check if mise is available."""
        return self._runner.command_exists("mise")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install a tool with ``mise use -g``.

        Raises:
            ToolNotInstalledError: If mise is not on PATH.
            CommandError: If mise fails.
        """
        spec = mise_tool_spec(pkg)
        if self.dry_run:
            return self._planned(f"mise use -g {spec}")

        if not self.is_available():
            raise ToolNotInstalledError("mise")

        if MiseDetector(self._runner).check(ctx, pkg.name):
            return self._skipped(f"{pkg.name} already installed via mise")

        self._ensure_config()

        logger.info("Installing %s via mise", spec)
        self._runner.execute(ctx, "mise", "use", "-g", spec)
        return self._done(f"installed {spec} via mise")

    def _ensure_config(self) -> None:
        self._files.ensure_dir(get_mise_config_dir())
        config_path = get_mise_config_path()
        if self._files.file_exists(config_path):
            return
        logger.debug("Seeding mise config at %s", config_path)
        self._files.write_file(config_path, tomli_w.dumps(MISE_CONFIG_TEMPLATE))
