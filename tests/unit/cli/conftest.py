"""Fixtures for CLI command tests."""

from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner
from wsctl.cli.types import Services
from wsctl.core.config import InstallerConfig
from wsctl.core.installer import PackageInstaller
from wsctl.core.service import InstallService, PackageService


@pytest.fixture
def cli() -> CliRunner:
    """Typer test runner."""
    return CliRunner()


@pytest.fixture
def services() -> Services:
    """Services whose installer and service layers are mocks."""
    installer = MagicMock(spec=PackageInstaller)
    installer.dry_run = False
    return Services(
        config=InstallerConfig(),
        installer=installer,
        packages=MagicMock(spec=PackageService),
        install=MagicMock(spec=InstallService),
    )
