"""APT/dpkg installation detector."""

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod

# dpkg status string of a fully installed package
INSTALLED_STATUS = "install ok installed"


class AptDetector(Detector):
    """Detector for packages known to dpkg.

    Uses ``dpkg-query -W -f=${Status}``. dpkg-query exits non-zero for
    unknown packages, which counts as absent. Half-installed or removed
    packages have a different status string and also count as absent.
    """

    @property
    def method(self) -> InstallMethod:
        """Return APT as the detected method."""
        return InstallMethod.APT

    def check(self, ctx: OperationContext, name: str) -> bool:
        try:
            output = self._runner.execute_with_output(
                ctx, "dpkg-query", "-W", "-f=${Status}", name
            )
        except CommandError as e:
            if e.reason in ("exit", "not_found"):
                return False
            raise
        return INSTALLED_STATUS in output
