"""Result model for install and remove attempts."""

from dataclasses import dataclass

from wsctl.models.package import Package


@dataclass(frozen=True, slots=True)
class InstallationResult:
    """Outcome of a single install or remove attempt.

    A result is built once, when the attempt concludes.

    Attributes:
        package: The package the attempt refers to.
        success: Whether the attempt succeeded.
        error: The error raised by the attempt, None on success.
        output: Free-form diagnostic text.
        duration_ms: Wall-clock duration in milliseconds.
        dry_run: True if nothing was executed.
        skipped: True if the package was already present.
    """

    package: Package
    success: bool
    error: Exception | None = None
    output: str = ""
    duration_ms: int = 0
    dry_run: bool = False
    skipped: bool = False

    @property
    def failed(self) -> bool:
        """Check if the attempt failed."""
        return not self.success
