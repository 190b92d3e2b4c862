"""Flatpak installation detector.

Only reverse-domain application ids (com.spotify.Client,
org.gnome.Calculator, ...) are looked up.
"""

import logging

from wsctl.core.context import OperationContext
from wsctl.detectors.base import Detector
from wsctl.models.package import InstallMethod

logger = logging.getLogger(__name__)

# Leading labels that mark a name as a Flatpak application id
_APP_ID_PREFIXES: tuple[str, ...] = ("com.", "org.", "io.", "net.", "de.", "fr.", "app.")


def is_flatpak_app_id(name: str) -> bool:
    """Check if name looks like a Flatpak application id."""
    return "." in name and name.startswith(_APP_ID_PREFIXES)


class FlatpakDetector(Detector):
    """Detector for Flatpak applications in the user installation."""

    @property
    def method(self) -> InstallMethod:
        """Return FLATPAK as the detected method."""
        return InstallMethod.FLATPAK

    def is_available(self) -> bool:
        """Check if flatpak CLI is available."""
        return self._runner.command_exists("flatpak")

    def applies_to(self, name: str) -> bool:
        """Only application ids can be matched against flatpak list."""
        return is_flatpak_app_id(name)

    def check(self, ctx: OperationContext, name: str) -> bool:
        """Look for an exact line match in ``flatpak list``.

        Raises:
            CommandError: If flatpak list fails.
        """
        output = self._runner.execute_with_output(
            ctx, "flatpak", "list", "--app", "--columns=application"
        )
        installed = {line.strip() for line in output.splitlines() if line.strip()}
        return name in installed
