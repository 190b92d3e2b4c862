"""Exception hierarchy and user-facing error descriptions.

Errors fall into four families:
- precondition errors: a required tool or input is missing or invalid
- transport errors: downloads that fail or are aborted
- execution errors: subprocesses exiting non-zero or being killed
- not-yet-implemented errors: install paths that are known gaps

Each family can be caught on its base class, and the concrete classes
stay distinguishable so callers and tests can assert on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# Why a subprocess did not complete successfully
CommandFailureReason = Literal["exit", "signal", "canceled", "deadline", "not_found"]


class WsctlError(Exception):
    """Base exception for all wsctl errors."""


# =============================================================================
# Precondition errors
# =============================================================================


class PreconditionError(WsctlError):
    """A required tool, input or system property is missing."""


class ToolNotInstalledError(PreconditionError):
    """A tool manager (mise, aqua) needed for an install is absent."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} is not installed - install {tool} first")


class UnsupportedMethodError(PreconditionError):
    """The requested install or remove method is not recognized."""

    def __init__(self, method: str, action: str = "installation") -> None:
        self.method = method
        super().__init__(f"unsupported {action} method: {method}")


class InvalidPackageError(PreconditionError):
    """A package record is incomplete or its source does not suit its method."""


class NoPackageManagerError(PreconditionError):
    """No supported system package manager was found."""

    def __init__(self) -> None:
        super().__init__("no supported package manager found")


class NoDesktopEnvironmentError(PreconditionError):
    """No desktop environment could be detected."""

    def __init__(self) -> None:
        super().__init__("no desktop environment detected")


class SystemDetectionError(PreconditionError):
    """System detection failed before an install could be planned."""


class ConfigError(WsctlError):
    """The wsctl configuration file could not be read or written."""


# =============================================================================
# Context errors
# =============================================================================


class OperationAbortedError(WsctlError):
    """An operation stopped because its context ended."""


class ContextCanceledError(OperationAbortedError):
    """The caller canceled the operation."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceededError(OperationAbortedError):
    """The operation ran past its deadline."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")


# =============================================================================
# Transport and execution errors
# =============================================================================


class DownloadError(WsctlError):
    """A download failed; always carries the originating URL."""

    def __init__(self, url: str, message: str, status: int | None = None) -> None:
        self.url = url
        self.status = status
        if status is not None:
            text = f"download failed with status {status}: {url}"
        else:
            text = f"failed to download {url}: {message}"
        super().__init__(text)


class CommandError(WsctlError):
    """A subprocess failed.

    Attributes:
        command: Full argument list that was executed.
        returncode: Exit code (negative when killed by a signal, None if
            the process never started).
        stderr: Captured standard error, if any.
        reason: Why the command failed.
    """

    def __init__(
        self,
        command: list[str],
        *,
        returncode: int | None = None,
        stderr: str = "",
        reason: CommandFailureReason = "exit",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        cmd = " ".join(self.command)
        if self.reason == "canceled":
            text = f"command canceled by caller: {cmd}"
        elif self.reason == "deadline":
            text = f"command timed out: {cmd}"
        elif self.reason == "signal":
            signum = -self.returncode if self.returncode is not None else 0
            text = f"command killed by signal {signum}: {cmd}"
        elif self.reason == "not_found":
            text = f"command not found: {self.command[0] if self.command else cmd}"
        else:
            text = f"command failed with exit code {self.returncode}: {cmd}"

        if self.stderr:
            text += f" (stderr: {self.stderr})"
        return text


class InstallStepError(WsctlError):
    """One step of a multi-step install failed."""


class ArchiveError(WsctlError):
    """An archive could not be opened or contains unsafe entries."""


class BundleExtractError(InstallStepError):
    """A GitHub bundle archive could not be extracted."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f"failed to extract bundle {name}: {cause}")


class BundleSymlinkError(InstallStepError):
    """Executables of a GitHub bundle could not be linked into the bin dir."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f"failed to link executables of bundle {name}: {cause}")


class PMDURLNotFoundError(WsctlError):
    """The latest PMD release had no binary distribution asset."""

    def __init__(self) -> None:
        super().__init__("could not determine latest PMD download URL")


# =============================================================================
# Not-yet-implemented install paths
# =============================================================================


class NotYetImplementedError(WsctlError):
    """An install path exists in the method set but has no implementation."""


class GitHubBinaryNotImplementedError(NotYetImplementedError):
    """Release asset resolution for owner/repo binaries is not implemented."""

    def __init__(self, name: str) -> None:
        super().__init__(f"GitHub binary download from owner/repo not yet implemented for {name}")


class GitHubReleaseNotImplementedError(NotYetImplementedError):
    """Release archive resolution for owner/repo bundles is not implemented."""

    def __init__(self, name: str) -> None:
        super().__init__(f"GitHub release download from owner/repo not yet implemented for {name}")


class GenericJavaAppNotImplementedError(NotYetImplementedError):
    """Only PMD is supported by the GitHub Java method."""

    def __init__(self, name: str) -> None:
        super().__init__(f"generic Java application install not yet implemented for {name}")


# =============================================================================
# User-facing descriptions
# =============================================================================


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """User-friendly description of an error.

    Attributes:
        message: Short human-readable summary.
        suggestions: Actionable next steps.
        show_details: Whether technical details should be displayed.
    """

    message: str
    suggestions: tuple[str, ...] = field(default=())
    show_details: bool = False


# (patterns, message, suggestions); first matching entry wins
_ERROR_MATCHERS: tuple[tuple[tuple[str, ...], str, tuple[str, ...]], ...] = (
    (
        ("permission", "denied", "not in the sudoers", "must be root"),
        "Permission denied",
        ("Try running with sudo", "Check that your user has admin privileges"),
    ),
    (
        ("network", "connection", "timeout", "timed out", "no such host", "download"),
        "Network connection failed",
        ("Check your internet connection", "Try again in a few moments"),
    ),
    (
        ("not installed", "is not installed"),
        "Not installed",
        ("Package is not on your system", "Use 'wsctl status' to check a package"),
    ),
    (
        ("not found", "no such", "unable to locate"),
        "Package not found",
        ("Check the package name spelling", "Update package lists: sudo apt update"),
    ),
    (
        ("already installed", "is installed"),
        "Already installed",
        ("Package is already on your system",),
    ),
    (
        ("dependency", "depends", "requires"),
        "Missing dependencies",
        ("Install required dependencies first", "Try: sudo apt --fix-broken install"),
    ),
)


def get_error_info(error: BaseException | None, package_name: str = "", verbose: bool = False) -> ErrorInfo:
    """Map an error to a user-friendly message with suggestions.

    Args:
        error: The error to describe. None yields an empty ErrorInfo.
        package_name: Package the error relates to, if any.
        verbose: Whether technical details should be shown.

    Returns:
        ErrorInfo describing the error.
    """
    if error is None:
        return ErrorInfo(message="")

    text = str(error).lower()
    for patterns, message, suggestions in _ERROR_MATCHERS:
        if any(pattern in text for pattern in patterns):
            if message == "Package not found" and package_name:
                message = f"Package '{package_name}' not found"
            return ErrorInfo(message=message, suggestions=suggestions, show_details=verbose)

    return ErrorInfo(
        message="Operation failed",
        suggestions=("Run with --verbose for more details",),
        show_details=verbose,
    )


def format_error_message(error: BaseException | None, package_name: str = "", verbose: bool = False) -> str:
    """Format an error for terminal display.

    In non-verbose mode only the first suggestion is shown inline; in
    verbose mode technical details and all suggestions follow on their
    own lines.
    """
    info = get_error_info(error, package_name, verbose)

    if package_name:
        text = f"Failed to install {package_name}"
        if info.message:
            text += f": {info.message}"
    else:
        text = info.message

    if info.show_details and error is not None:
        text += f"\n  Technical details: {error}"

    if info.suggestions and not verbose:
        text += f" ({info.suggestions[0]})"
    elif info.suggestions:
        text += "\n  Suggestions:"
        for suggestion in info.suggestions:
            text += f"\n    - {suggestion}"

    return text
