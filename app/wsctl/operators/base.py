"""Abstract base class for installation operators.

This module defines the Operator interface that every installation
method implements, and the Outcome an operator reports back to the
installer.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from wsctl.core.config import InstallerConfig
from wsctl.core.context import OperationContext
from wsctl.core.paths import get_user_bin_dir
from wsctl.models.package import InstallMethod, Package
from wsctl.platform.base import CommandRunner, FileManager, NetworkClient

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """How an operation concluded without error."""

    DONE = "done"
    SKIPPED = "skipped"
    DRY_RUN = "dry-run"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Successful conclusion of an install or remove.

    Attributes:
        kind: Whether the work was done, unnecessary, or only planned.
        detail: Human-readable description, e.g. the planned command.
    """

    kind: OutcomeKind
    detail: str = ""


class Operator(ABC):
    """Abstract base class for all installation operators.

    Operators install and remove packages for one installation method.
    They raise on failure; the installer turns exceptions into results.

    Attributes:
        dry_run: If True, report planned commands without executing
            anything, including already-installed checks.

    Example:
        >>> operator = AptOperator(runner, files, network, dry_run=True)
        >>> operator.install(ctx, Package("vim", "vim", InstallMethod.APT))
        Outcome(kind=<OutcomeKind.DRY_RUN: 'dry-run'>, detail='...')
    """

    def __init__(
        self,
        runner: CommandRunner,
        files: FileManager,
        network: NetworkClient,
        *,
        config: InstallerConfig | None = None,
        dry_run: bool = False,
    ) -> None:
        """Initialize the operator.

        Args:
            runner: Executes commands.
            files: Filesystem access.
            network: HTTP access.
            config: Installer settings; defaults if None.
            dry_run: If True, only report what would be done.
        """
        self._runner = runner
        self._files = files
        self._network = network
        self._config = config or InstallerConfig()
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    @property
    @abstractmethod
    def method(self) -> InstallMethod:
        """Return the installation method this operator handles."""

    def is_available(self) -> bool:
        """Check if the tooling this operator needs is installed."""
        return True

    @abstractmethod
    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install a package.

        Args:
            ctx: Cancellation and deadline for the whole install.
            pkg: Package to install.

        Returns:
            Outcome describing what happened.

        Raises:
            WsctlError: If any step fails.
        """

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Remove a package by deleting ~/.local/bin/<name>.

        A missing file counts as removed. Operators backed by a package
        manager override this.
        """
        target = get_user_bin_dir() / pkg.name
        if self.dry_run:
            return self._planned(f"remove {target}")

        if not self._files.file_exists(target):
            logger.debug("%s not present, nothing to remove", target)
            return self._skipped(f"{target} not present")

        self._files.remove_file(target)
        logger.info("Removed %s", target)
        return self._done(f"removed {target}")

    def _planned(self, detail: str) -> Outcome:
        logger.info("DRY RUN: %s", detail)
        return Outcome(OutcomeKind.DRY_RUN, detail)

    def _skipped(self, detail: str) -> Outcome:
        logger.debug("Skipped: %s", detail)
        return Outcome(OutcomeKind.SKIPPED, detail)

    def _done(self, detail: str) -> Outcome:
        return Outcome(OutcomeKind.DONE, detail)
