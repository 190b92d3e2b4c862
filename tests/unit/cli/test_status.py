"""Unit tests for the status command."""

from unittest.mock import patch

from typer.testing import CliRunner
from wsctl.cli.main import app
from wsctl.cli.types import Services
from wsctl.core.errors import CommandError
from wsctl.models.package import InstallMethod

TARGET = "wsctl.cli.commands.status.build_services"


class TestStatusCommand:
    """Tests for wsctl status."""

    def test_installed(self, cli: CliRunner, services: Services) -> None:
        """Installed packages exit 0."""
        services.packages.is_installed.return_value = True

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["status", "git"])

        assert result.exit_code == 0
        assert "git is installed" in result.stdout

    def test_not_installed(self, cli: CliRunner, services: Services) -> None:
        """Missing packages exit 1."""
        services.packages.is_installed.return_value = False

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["status", "nope"])

        assert result.exit_code == 1
        assert "nope is not installed" in result.stdout

    def test_by_method(self, cli: CliRunner, services: Services) -> None:
        """--method checks only that detector."""
        services.installer.is_installed_by_method.return_value = True

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["status", "node", "-m", "mise"])

        assert result.exit_code == 0
        assert "via mise" in result.stdout
        args = services.installer.is_installed_by_method.call_args.args
        assert args[1:] == ("node", InstallMethod.MISE)
        services.packages.is_installed.assert_not_called()

    def test_error(self, cli: CliRunner, services: Services) -> None:
        """Detector errors exit 1."""
        services.packages.is_installed.side_effect = CommandError(["mise", "list"], returncode=1)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["status", "node"])

        assert result.exit_code == 1
        assert "Could not check node" in result.output
