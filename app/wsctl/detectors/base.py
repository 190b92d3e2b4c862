"""Abstract base class for installation detectors.

This module defines the Detector interface. Each detector answers "is
this package installed?" for exactly one installation method.
"""

from abc import ABC, abstractmethod

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError
from wsctl.models.package import InstallMethod
from wsctl.platform.base import CommandRunner


class Detector(ABC):
    """Abstract base class for all detectors.

    A detector is consulted only when its tool is available and the
    package name is one it applies to. ``check`` returns False for an
    absent package and raises CommandError for unexpected failures such
    as a canceled context.

    Example:
        >>> detector = SnapDetector(runner)
        >>> detector.detect(ctx, "code")
        True
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize the detector.

        Args:
            runner: Command runner used for probing.
        """
        self._runner = runner

    @property
    @abstractmethod
    def method(self) -> InstallMethod:
        """Return the installation method this detector covers."""

    def is_available(self) -> bool:
        """Check if the tool this detector queries is installed."""
        return True

    def applies_to(self, name: str) -> bool:
        """Check if the name is something this detector can look up."""
        return True

    @abstractmethod
    def check(self, ctx: OperationContext, name: str) -> bool:
        """Query whether name is installed.

        Raises:
            CommandError: If the query fails for a reason other than the
                package being absent.
        """

    def detect(self, ctx: OperationContext, name: str) -> bool:
        """Run check() if the detector is available and applies to name."""
        if not self.is_available() or not self.applies_to(name):
            return False
        return self.check(ctx, name)

    def _succeeds(
        self,
        ctx: OperationContext,
        name: str,
        *args: str,
        env: dict[str, str] | None = None,
    ) -> bool:
        """Run a lookup command; a non-zero exit means absent."""
        try:
            self._runner.execute_with_output(ctx, name, *args, env=env)
        except CommandError as e:
            if e.reason in ("exit", "not_found"):
                return False
            raise
        return True
