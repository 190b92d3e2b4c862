"""Mise installation detector."""

import logging

from wsctl.core.context import OperationContext
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod

logger = logging.getLogger(__name__)

# Package names whose executable is named differently (or needs retrying
# under the same name)
MISE_BINARY_NAMES: dict[str, tuple[str, ...]] = {
    "neovim": ("nvim",),
    "maven": ("mvn",),
    "lazygit": ("lazygit",),
    "lazydocker": ("lazydocker",),
    "starship": ("starship",),
    "ripgrep": ("rg",),
    "fd-find": ("fd",),
    "bat": ("bat",),
    "eza": ("eza",),
    "zoxide": ("zoxide",),
    "delta": ("delta",),
    "hyperfine": ("hyperfine",),
    "bottom": ("btm",),
    "fzf": ("fzf",),
    "yq": ("yq",),
}


class MiseDetector(Detector):
    """Detector for tools managed by mise.

    Asks ``mise which`` for the name itself, then for each mapped
    binary name.
    """

    @property
    def method(self) -> InstallMethod:
        """Return MISE as the detected method."""
        return InstallMethod.MISE

    def is_available(self) -> bool:
        """Check if mise is available."""
        return self._runner.command_exists("mise")

    def check(self, ctx: OperationContext, name: str) -> bool:
        if self._succeeds(ctx, "mise", "which", name):
            return True

        for binary in MISE_BINARY_NAMES.get(name, ()):
            if self._succeeds(ctx, "mise", "which", binary):
                logger.debug("mise provides %s as %s", name, binary)
                return True
        return False
