"""Package installation dispatcher.

PackageInstaller routes each package to the operator registered for its
installation method, times the attempt and reports the outcome as an
InstallationResult. Operator failures never escape install() or
remove(); the original exception is carried in the result instead.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping

from wsctl.core.config import InstallerConfig
from wsctl.core.context import OperationContext
from wsctl.core.errors import UnsupportedMethodError, WsctlError
from wsctl.detectors.cascade import DetectionCascade
from wsctl.models.package import InstallMethod, Package
from wsctl.models.result import InstallationResult
from wsctl.operators.apt import AptOperator
from wsctl.operators.aqua import AquaOperator
from wsctl.operators.base import Operator, Outcome, OutcomeKind
from wsctl.operators.binary import BinaryOperator
from wsctl.operators.deb import DebOperator
from wsctl.operators.flatpak import FlatpakOperator
from wsctl.operators.github import (
    GitHubBinaryOperator,
    GitHubBundleOperator,
    GitHubJavaOperator,
    LegacyGitHubOperator,
)
from wsctl.operators.mise import MiseOperator
from wsctl.operators.script import ScriptOperator
from wsctl.operators.snap import SnapOperator
from wsctl.platform.base import CommandRunner, FileManager, NetworkClient

logger = logging.getLogger(__name__)

_OPERATOR_CLASSES: tuple[type[Operator], ...] = (
    AptOperator,
    SnapOperator,
    FlatpakOperator,
    DebOperator,
    ScriptOperator,
    MiseOperator,
    AquaOperator,
    BinaryOperator,
    GitHubBinaryOperator,
    GitHubBundleOperator,
    GitHubJavaOperator,
    LegacyGitHubOperator,
)


def get_best_method(source: str) -> InstallMethod:
    """Guess an installation method from a source string.

    GitHub URLs map to GITHUB, .deb files to DEB, anything mentioning
    flatpak or flathub to FLATPAK and snap to SNAP. Everything else is
    assumed to be an APT package name.
    """
    if "github.com" in source:
        return InstallMethod.GITHUB
    if source.endswith(".deb"):
        return InstallMethod.DEB
    if "flatpak" in source or "flathub" in source:
        return InstallMethod.FLATPAK
    if "snap" in source:
        return InstallMethod.SNAP
    return InstallMethod.APT


class PackageInstaller:
    """Installs, removes and detects packages across all methods.

    Args:
        runner: Executes commands.
        files: Filesystem access.
        network: HTTP access.
        config: Installer settings; defaults if None.
        dry_run: Overrides ``config.dry_run`` when given.
        operators: Operators by method. Defaults to one operator for
            every executable InstallMethod.

    Example:
        >>> installer = PackageInstaller(runner, files, network, dry_run=True)
        >>> installer.install(ctx, Package("vim", "vim", InstallMethod.APT)).dry_run
        True
    """

    def __init__(
        self,
        runner: CommandRunner,
        files: FileManager,
        network: NetworkClient,
        *,
        config: InstallerConfig | None = None,
        dry_run: bool | None = None,
        operators: Mapping[InstallMethod, Operator] | None = None,
    ) -> None:
        self._config = config or InstallerConfig()
        self._dry_run = self._config.dry_run if dry_run is None else dry_run
        self._runner = runner
        self._cascade = DetectionCascade(runner)

        if operators is None:
            operators = {
                op.method: op
                for op in (
                    cls(runner, files, network, config=self._config, dry_run=self._dry_run)
                    for cls in _OPERATOR_CLASSES
                )
            }
        self._operators: dict[InstallMethod, Operator] = dict(operators)

    @property
    def dry_run(self) -> bool:
        """Check if the installer is in dry-run mode."""
        return self._dry_run

    def operator_for(self, method: InstallMethod) -> Operator:
        """Return the operator registered for method.

        Raises:
            UnsupportedMethodError: If no operator handles method.
        """
        operator = self._operators.get(method)
        if operator is None:
            raise UnsupportedMethodError(method.value)
        return operator

    def install(self, ctx: OperationContext, pkg: Package) -> InstallationResult:
        """Install a package and report the outcome.

        Returns:
            InstallationResult; failures carry the raised error.
        """
        return self._run(ctx, pkg, "install")

    def remove(self, ctx: OperationContext, pkg: Package) -> InstallationResult:
        """Remove a package and report the outcome.

        Returns:
            InstallationResult; failures carry the raised error.
        """
        return self._run(ctx, pkg, "remove")

    def _run(self, ctx: OperationContext, pkg: Package, action: str) -> InstallationResult:
        start = time.monotonic()
        outcome: Outcome | None = None
        error: Exception | None = None

        try:
            operator = self._operators.get(pkg.method)
            if operator is None:
                raise UnsupportedMethodError(
                    pkg.method.value,
                    "installation" if action == "install" else "removal",
                )
            outcome = operator.install(ctx, pkg) if action == "install" else operator.remove(ctx, pkg)
        except (WsctlError, OSError) as e:
            logger.debug("%s of %s failed: %s", action, pkg.name, e)
            error = e

        duration_ms = int((time.monotonic() - start) * 1000)

        if outcome is None:
            return InstallationResult(
                package=pkg,
                success=False,
                error=error,
                output=str(error),
                duration_ms=duration_ms,
                dry_run=self._dry_run,
            )

        return InstallationResult(
            package=pkg,
            success=True,
            output=outcome.detail,
            duration_ms=duration_ms,
            dry_run=outcome.kind is OutcomeKind.DRY_RUN,
            skipped=outcome.kind is OutcomeKind.SKIPPED,
        )

    def list(self, ctx: OperationContext) -> list[Package]:
        """List packages installed through APT.

        Raises:
            CommandError: If dpkg-query fails.
        """
        operator = self.operator_for(InstallMethod.APT)
        if not isinstance(operator, AptOperator):
            raise UnsupportedMethodError(InstallMethod.APT.value, "listing")
        return operator.list_packages(ctx)

    def is_installed(self, ctx: OperationContext, name: str) -> bool:
        """Check if name is installed by any method."""
        return self._cascade.is_installed(ctx, name)

    def is_installed_by_method(self, ctx: OperationContext, name: str, method: InstallMethod) -> bool:
        """Check if name is installed by one specific method.

        Raises:
            CommandError: If the detector's query fails.
        """
        return self._cascade.is_installed_by_method(ctx, name, method)

    def get_best_method(self, source: str) -> InstallMethod:
        """Guess an installation method from a source string."""
        return get_best_method(source)
