"""Aqua tool operator implementation.

Keeps a user-level aqua.yaml listing every installed package and runs
``aqua i`` against it, with aqua's root directory set to ~/.local for
that call only so binaries land in ~/.local/bin.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from wsctl.core.context import OperationContext
from wsctl.core.errors import ConfigError, ToolNotInstalledError
from wsctl.core.paths import get_aqua_config_path
from wsctl.detectors.aqua import AquaDetector, aqua_env
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome

logger = logging.getLogger(__name__)


def aqua_package_name(pkg: Package) -> str:
    """Return the aqua registry name, e.g. 'cli/cli' or 'junegunn/fzf'."""
    return pkg.source.strip() or pkg.name


def build_aqua_config(registry_ref: str) -> dict[str, Any]:
    """Build a fresh aqua configuration using the standard registry."""
    return {
        "registries": [{"type": "standard", "ref": registry_ref}],
        "packages": [],
    }


def add_aqua_package(config: dict[str, Any], name: str) -> bool:
    """Append ``{name: ...}`` to the packages list unless already present.

    Returns:
        True if the config was changed.
    """
    packages = config.get("packages") or []
    if any(isinstance(entry, dict) and entry.get("name") == name for entry in packages):
        return False
    packages.append({"name": name})
    config["packages"] = packages
    return True


class AquaOperator(Operator):
    """Operator for CLI tools installed through aqua."""

    @property
    def method(self) -> InstallMethod:
        """Return AQUA as the installation method."""
        return InstallMethod.AQUA

    def is_available(self) -> bool:
        """Check if aqua is available."""
        return self._runner.command_exists("aqua")

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Record the package in aqua.yaml and install it.

        Raises:
            ToolNotInstalledError: If aqua is not on PATH.
            ConfigError: If aqua.yaml cannot be parsed.
            CommandError: If aqua fails.
        """
        package_name = aqua_package_name(pkg)
        config_path = get_aqua_config_path()

        if self.dry_run:
            return self._planned(f"aqua i -c {config_path} {package_name}")

        if not self.is_available():
            raise ToolNotInstalledError("aqua")

        if AquaDetector(self._runner).check(ctx, pkg.name):
            return self._skipped(f"{pkg.name} already installed via aqua")

        self._register_package(config_path, package_name)

        logger.info("Installing %s via aqua", package_name)
        self._runner.execute(
            ctx, "aqua", "i", "-c", str(config_path), package_name, env=aqua_env()
        )
        return self._done(f"installed {package_name} via aqua")

    def _register_package(self, config_path: Path, package_name: str) -> None:
        if self._files.file_exists(config_path):
            text = self._files.read_file(config_path)
            try:
                config = yaml.safe_load(text) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid YAML in {config_path}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(config, dict):
                msg = f"Invalid aqua config {config_path}: expected a mapping"
                raise ConfigError(msg)
        else:
            logger.debug("Creating aqua config at %s", config_path)
            self._files.ensure_dir(config_path.parent)
            config = build_aqua_config(self._config.aqua_registry_ref)

        if add_aqua_package(config, package_name):
            self._files.write_file(config_path, yaml.safe_dump(config, sort_keys=False))
