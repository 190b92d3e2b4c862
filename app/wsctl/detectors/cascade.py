"""Ordered installation detection across all methods.

The cascade asks each detector in turn and stops at the first positive
answer. The order follows preference for how a tool would have been
installed: Flatpak for GUI apps, mise for developer tools, then dpkg,
snap, aqua and finally a plain PATH lookup.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.core.errors import WsctlError
from wsctl.detectors.apt import AptDetector
from wsctl.detectors.aqua import AquaDetector
from wsctl.detectors.base import Detector
from wsctl.detectors.binary import BinaryDetector
from wsctl.detectors.flatpak import FlatpakDetector
from wsctl.detectors.mise import MiseDetector
from wsctl.detectors.snap import SnapDetector
from wsctl.models.package import InstallMethod
from wsctl.platform.base import CommandRunner

logger = logging.getLogger(__name__)

# Methods answered by the PATH lookup
_PATH_METHODS: frozenset[InstallMethod] = frozenset(
    {
        InstallMethod.SCRIPT,
        InstallMethod.BINARY,
        InstallMethod.GITHUB,
        InstallMethod.GITHUB_BINARY,
        InstallMethod.GITHUB_BUNDLE,
        InstallMethod.GITHUB_JAVA,
    }
)


class DetectionCascade:
    """Determines whether a package is installed, by any method.

    Args:
        runner: Command runner shared by the default detectors.
        detectors: Detectors in the order they are consulted. Defaults
            to Flatpak, mise, APT, Snap, aqua, PATH.
    """

    def __init__(self, runner: CommandRunner, detectors: list[Detector] | None = None) -> None:
        if detectors is None:
            detectors = [
                FlatpakDetector(runner),
                MiseDetector(runner),
                AptDetector(runner),
                SnapDetector(runner),
                AquaDetector(runner),
                BinaryDetector(runner),
            ]
        self._detectors = detectors
        self._by_method = {detector.method: detector for detector in detectors}

    @property
    def detectors(self) -> list[Detector]:
        """Detectors in consultation order."""
        return list(self._detectors)

    def is_installed(self, ctx: OperationContext, name: str) -> bool:
        """Check every detector in order and stop at the first hit.

        Errors from individual detectors are logged and treated as "not
        installed by that method".
        """
        for detector in self._detectors:
            try:
                if detector.detect(ctx, name):
                    logger.debug("%s is installed (%s)", name, detector.method.value)
                    return True
            except WsctlError as e:
                logger.debug("%s detection failed for %s: %s", detector.method.value, name, e)
        return False

    def is_installed_by_method(self, ctx: OperationContext, name: str, method: InstallMethod) -> bool:
        """Run only the detector that matches method.

        DEB packages are looked up in dpkg; script, binary and GitHub
        installs by PATH. Methods with no dedicated detector use the
        full cascade.

        Raises:
            CommandError: If the matching detector's query fails.
        """
        if method is InstallMethod.DEB:
            method = InstallMethod.APT
        elif method in _PATH_METHODS:
            method = InstallMethod.BINARY

        detector = self._by_method.get(method)
        if detector is None:
            return self.is_installed(ctx, name)
        return detector.detect(ctx, name)
