"""Unit tests for the system command."""

from unittest.mock import patch

from typer.testing import CliRunner
from wsctl.cli.main import app
from wsctl.cli.types import Services
from wsctl.core.errors import SystemDetectionError
from wsctl.models.package import InstallMethod
from wsctl.models.system import Distribution, PackageManager, SystemInfo

TARGET = "wsctl.cli.commands.system.build_services"


class TestSystemCommand:
    """Tests for wsctl system."""

    def test_shows_table(self, cli: CliRunner, services: Services) -> None:
        """The detected system and install method are shown."""
        services.install.get_system_info.return_value = SystemInfo(
            distribution=Distribution(name="Fedora Linux", id="fedora", version="40", family="rhel"),
            package_manager=PackageManager(name="DNF", method=InstallMethod.DNF, command="dnf"),
            kernel="6.9.1",
        )

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["system"])

        assert result.exit_code == 0
        assert "Fedora Linux 40" in result.stdout
        assert "Install method" in result.stdout
        assert "dnf" in result.stdout

    def test_detection_failure(self, cli: CliRunner, services: Services) -> None:
        """Detection errors exit 1."""
        services.install.get_system_info.side_effect = SystemDetectionError("os-release unreadable")

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["system"])

        assert result.exit_code == 1
        assert "os-release unreadable" in result.output
