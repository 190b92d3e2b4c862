"""wsctl - Provisioning for Linux development workstations.

Installs, detects and removes software through the package manager
that fits the detected distribution, plus Flatpak, Snap, mise, aqua,
GitHub releases and plain download/script methods.
"""

__version__ = "0.1.0"
