"""Data models for wsctl.

This module exports the core data structures used throughout the application.
"""

from wsctl.models.catalog import Catalog, CatalogEntry, CatalogError, load_catalog
from wsctl.models.package import LATEST, InstallMethod, Package
from wsctl.models.result import InstallationResult
from wsctl.models.system import (
    DesktopEnvironment,
    Distribution,
    PackageManager,
    SystemInfo,
)

__all__ = [
    "LATEST",
    "Catalog",
    "CatalogEntry",
    "CatalogError",
    "DesktopEnvironment",
    "Distribution",
    "InstallMethod",
    "InstallationResult",
    "Package",
    "PackageManager",
    "SystemInfo",
    "load_catalog",
]
