"""Unit tests for the remove command."""

from unittest.mock import patch

from typer.testing import CliRunner
from wsctl.cli.main import app
from wsctl.cli.types import Services
from wsctl.core.errors import CommandError
from wsctl.models.package import InstallMethod, Package
from wsctl.models.result import InstallationResult

TARGET = "wsctl.cli.commands.remove.build_services"
SNAP_CODE = Package(name="code", source="code", method=InstallMethod.SNAP)


class TestRemoveCommand:
    """Tests for wsctl remove."""

    def test_method_required(self, cli: CliRunner) -> None:
        """Removal needs an explicit method."""
        result = cli.invoke(app, ["remove", "code"])
        assert result.exit_code == 2

    def test_success(self, cli: CliRunner, services: Services) -> None:
        """Successful removal is reported."""
        services.packages.remove.return_value = InstallationResult(package=SNAP_CODE, success=True)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["remove", "code", "-m", "snap"])

        assert result.exit_code == 0
        assert "Removed code" in result.stdout
        assert services.packages.remove.call_args.args[1] == SNAP_CODE

    def test_not_installed(self, cli: CliRunner, services: Services) -> None:
        """Removing an absent package is not an error."""
        services.packages.remove.return_value = InstallationResult(package=SNAP_CODE, success=True, skipped=True)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["remove", "code", "-m", "snap"])

        assert result.exit_code == 0
        assert "not installed" in result.stdout

    def test_dry_run(self, cli: CliRunner, services: Services) -> None:
        """Dry-run removal names the method."""
        services.packages.remove.return_value = InstallationResult(package=SNAP_CODE, success=True, dry_run=True)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["remove", "code", "-m", "snap", "-n"])

        assert result.exit_code == 0
        assert "would remove code via snap" in result.stdout

    def test_failure(self, cli: CliRunner, services: Services) -> None:
        """Failed removal exits 1."""
        error = CommandError(["snap", "remove", "code"], returncode=1, stderr="permission denied")
        services.packages.remove.return_value = InstallationResult(package=SNAP_CODE, success=False, error=error)

        with patch(TARGET, return_value=services):
            result = cli.invoke(app, ["remove", "code", "-m", "snap"])

        assert result.exit_code == 1
        assert "Failed to remove code" in result.output
        assert "Permission denied" in result.output
