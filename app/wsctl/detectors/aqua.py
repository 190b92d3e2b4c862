"""Aqua installation detector."""

from wsctl.core.context import OperationContext
from wsctl.core.paths import get_user_local_dir
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod


def aqua_env() -> dict[str, str]:
    """Environment overlay pointing aqua at ~/.local."""
    return {"AQUA_ROOT_DIR": str(get_user_local_dir())}


class AquaDetector(Detector):
    """Detector for tools installed by aqua under ~/.local."""

    @property
    def method(self) -> InstallMethod:
        """Return AQUA as the detected method."""
        return InstallMethod.AQUA

    def is_available(self) -> bool:
        """Check if aqua is available."""
        return self._runner.command_exists("aqua")

    def check(self, ctx: OperationContext, name: str) -> bool:
        return self._succeeds(ctx, "aqua", "which", name, env=aqua_env())
