"""Unit tests for the list command."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner
from wsctl.cli.main import app
from wsctl.cli.types import Services
from wsctl.core.errors import CommandError
from wsctl.models.package import InstallMethod, Package

TARGET = "wsctl.cli.commands.listing.build_services"


@pytest.fixture
def installed() -> list[Package]:
    """Three installed APT packages."""
    return [
        Package(name=name, source=name, method=InstallMethod.APT, version=version)
        for name, version in (("curl", "8.5.0"), ("git", "2.43.0"), ("vim", "9.1"))
    ]


class TestListCommand:
    """Tests for wsctl list."""

    def test_table(self, cli: CliRunner, services: Services, installed: list[Package]) -> None:
        """Packages are shown in a table."""
        services.install.list_installed_packages.return_value = installed

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "git" in result.stdout
        assert "2.43.0" in result.stdout

    def test_count(self, cli: CliRunner, services: Services, installed: list[Package]) -> None:
        """--count prints the number only."""
        services.install.list_installed_packages.return_value = installed

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["list", "--count"])

        assert "3 installed packages" in result.stdout

    def test_limit(self, cli: CliRunner, services: Services, installed: list[Package]) -> None:
        """--limit truncates the table."""
        services.install.list_installed_packages.return_value = installed

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["list", "-l", "2"])

        assert "vim" not in result.stdout
        assert "Showing 2 of 3 packages" in result.stdout

    def test_empty(self, cli: CliRunner, services: Services) -> None:
        """An empty system says so."""
        services.install.list_installed_packages.return_value = []

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["list"])

        assert "No packages found" in result.stdout

    def test_error(self, cli: CliRunner, services: Services) -> None:
        """Listing failures exit 1."""
        services.install.list_installed_packages.side_effect = CommandError(["dpkg-query", "-W"], returncode=2)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "Could not list packages" in result.output
