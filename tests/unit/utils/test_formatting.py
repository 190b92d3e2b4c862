"""Unit tests for Rich formatting helpers."""

from rich.console import RenderableType
from wsctl.models.package import InstallMethod, Package
from wsctl.models.result import InstallationResult
from wsctl.models.system import DesktopEnvironment, Distribution, PackageManager, SystemInfo
from wsctl.utils.formatting import (
    console,
    create_package_table,
    create_system_table,
    format_package_row,
    format_result,
)

VIM = Package(name="vim", source="vim", method=InstallMethod.APT, version="9.1")


def _render(renderable: RenderableType) -> str:
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


class TestPackageTable:
    """Tests for package table helpers."""

    def test_row(self) -> None:
        """Rows hold name, version and method."""
        assert format_package_row(VIM) == ("vim", "9.1", "apt")

    def test_table_columns(self) -> None:
        """The table has three columns."""
        table = create_package_table()
        assert [c.header for c in table.columns] == ["Package", "Version", "Method"]


class TestSystemTable:
    """Tests for create_system_table."""

    def test_rows(self) -> None:
        """The table shows distribution, manager and kernel."""
        info = SystemInfo(
            distribution=Distribution(name="Ubuntu", id="ubuntu", version="24.04", codename="noble", family="debian"),
            package_manager=PackageManager(name="APT", method=InstallMethod.APT, command="apt"),
            desktop_environment=DesktopEnvironment(name="GNOME", session="ubuntu"),
            architecture="x86_64",
            kernel="6.8.0",
        )

        text = _render(create_system_table(info))

        assert "Ubuntu 24.04 noble" in text
        assert "APT (apt)" in text
        assert "GNOME (ubuntu)" in text
        assert "6.8.0" in text

    def test_headless(self) -> None:
        """A missing desktop shows 'none'."""
        info = SystemInfo(
            distribution=Distribution(name="Debian", id="debian", family="debian"),
            package_manager=PackageManager(name="APT", method=InstallMethod.APT, command="apt"),
        )
        assert "none" in _render(create_system_table(info))


class TestFormatResult:
    """Tests for format_result."""

    def test_dry_run(self) -> None:
        """Dry-run results say what would happen."""
        text = format_result(InstallationResult(package=VIM, success=True, dry_run=True))
        assert "would install vim via apt" in text

    def test_skipped(self) -> None:
        """Skipped results say already installed."""
        assert "already installed" in format_result(InstallationResult(package=VIM, success=True, skipped=True))

    def test_success(self) -> None:
        """Successful results show the duration."""
        text = format_result(InstallationResult(package=VIM, success=True, duration_ms=42))
        assert "42 ms" in text

    def test_failure(self) -> None:
        """Failed results show the error."""
        text = format_result(InstallationResult(package=VIM, success=False, error=RuntimeError("boom")))
        assert "failed" in text
        assert "boom" in text
