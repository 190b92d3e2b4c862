"""Snap installation detector."""

from wsctl.core.context import OperationContext
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod


class SnapDetector(Detector):
    """Detector for snaps; ``snap list <name>`` exits 0 when installed."""

    @property
    def method(self) -> InstallMethod:
        """Return SNAP as the detected method."""
        return InstallMethod.SNAP

    def is_available(self) -> bool:
        """Check if snap CLI is available."""
        return self._runner.command_exists("snap")

    def check(self, ctx: OperationContext, name: str) -> bool:
        return self._succeeds(ctx, "snap", "list", name)
