"""Unit tests for the error hierarchy and user-facing messages."""

import pytest
from wsctl.core.errors import (
    BundleExtractError,
    CommandError,
    ContextCanceledError,
    DownloadError,
    GenericJavaAppNotImplementedError,
    GitHubBinaryNotImplementedError,
    GitHubReleaseNotImplementedError,
    InstallStepError,
    NotYetImplementedError,
    OperationAbortedError,
    PreconditionError,
    ToolNotInstalledError,
    UnsupportedMethodError,
    WsctlError,
    format_error_message,
    get_error_info,
)


class TestHierarchy:
    """Tests for error families."""

    @pytest.mark.parametrize(
        ("error", "family"),
        [
            (ToolNotInstalledError("mise"), PreconditionError),
            (UnsupportedMethodError("brew"), PreconditionError),
            (ContextCanceledError(), OperationAbortedError),
            (GitHubBinaryNotImplementedError("x"), NotYetImplementedError),
            (GitHubReleaseNotImplementedError("x"), NotYetImplementedError),
            (GenericJavaAppNotImplementedError("x"), NotYetImplementedError),
            (BundleExtractError("x", OSError("disk full")), InstallStepError),
        ],
    )
    def test_family(self, error: WsctlError, family: type[WsctlError]) -> None:
        """Each concrete error belongs to its family and to WsctlError."""
        assert isinstance(error, family)
        assert isinstance(error, WsctlError)

    def test_tool_not_installed_message(self) -> None:
        """The message tells the user to install the tool."""
        assert str(ToolNotInstalledError("aqua")) == "aqua is not installed - install aqua first"

    def test_unsupported_method_action(self) -> None:
        """The action is part of the message."""
        assert str(UnsupportedMethodError("dnf", "removal")) == "unsupported removal method: dnf"


class TestDownloadError:
    """Tests for DownloadError."""

    def test_carries_url(self) -> None:
        """The URL is kept on the error and in the message."""
        error = DownloadError("https://example.com/x", "connection refused")

        assert error.url == "https://example.com/x"
        assert error.status is None
        assert "https://example.com/x" in str(error)

    def test_status_message(self) -> None:
        """HTTP status errors mention the status."""
        error = DownloadError("https://example.com/x", "Not Found", status=404)
        assert str(error) == "download failed with status 404: https://example.com/x"


class TestCommandError:
    """Tests for CommandError messages."""

    def test_exit(self) -> None:
        """Exit failures include code, command and stderr."""
        error = CommandError(["apt-get", "install", "x"], returncode=100, stderr="E: nope\n")

        assert error.reason == "exit"
        assert str(error) == "command failed with exit code 100: apt-get install x (stderr: E: nope)"

    def test_signal(self) -> None:
        """Signal failures show the signal number."""
        error = CommandError(["sleep", "10"], returncode=-9, reason="signal")
        assert "killed by signal 9" in str(error)

    def test_canceled_and_deadline(self) -> None:
        """Cancellation and deadline failures are distinguishable."""
        assert "canceled" in str(CommandError(["x"], reason="canceled"))
        assert "timed out" in str(CommandError(["x"], reason="deadline"))

    def test_not_found(self) -> None:
        """Missing executables name the executable."""
        assert str(CommandError(["flatpak", "list"], reason="not_found")) == "command not found: flatpak"


class TestErrorInfo:
    """Tests for get_error_info and format_error_message."""

    def test_none(self) -> None:
        """No error yields an empty message."""
        assert get_error_info(None).message == ""

    def test_permission(self) -> None:
        """Permission problems suggest sudo."""
        info = get_error_info(RuntimeError("Permission denied"))

        assert info.message == "Permission denied"
        assert "Try running with sudo" in info.suggestions

    def test_not_found_names_package(self) -> None:
        """Package-not-found messages include the package name."""
        info = get_error_info(RuntimeError("E: Unable to locate package foo"), "foo")
        assert info.message == "Package 'foo' not found"

    def test_network(self) -> None:
        """Download failures map to network errors."""
        info = get_error_info(DownloadError("https://x", "connection refused"))
        assert info.message == "Network connection failed"

    def test_unknown(self) -> None:
        """Unmatched errors get a generic message."""
        info = get_error_info(RuntimeError("weird"))
        assert info.message == "Operation failed"

    def test_format_short(self) -> None:
        """Non-verbose output shows the first suggestion inline."""
        text = format_error_message(RuntimeError("Permission denied"), "vim")
        assert text == "Failed to install vim: Permission denied (Try running with sudo)"

    def test_format_verbose(self) -> None:
        """Verbose output adds technical details and all suggestions."""
        text = format_error_message(RuntimeError("Permission denied"), "vim", verbose=True)

        assert "Technical details: Permission denied" in text
        assert "- Check that your user has admin privileges" in text
