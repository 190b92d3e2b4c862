"""PATH lookup detector, the last step of the cascade."""

from wsctl.core.context import OperationContext
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod


class BinaryDetector(Detector):
    """Reports a package as installed when an executable of that name is on PATH."""

    @property
    def method(self) -> InstallMethod:
        """Return BINARY as the detected method."""
        return InstallMethod.BINARY

    def check(self, ctx: OperationContext, name: str) -> bool:
        return self._runner.command_exists(name)
