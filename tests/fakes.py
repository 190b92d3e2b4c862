"""In-memory fakes for the platform ports.

Operators, detectors and services take these in place of the real
adapters, so tests never touch the host system.
"""

from dataclasses import dataclass
from pathlib import Path

from wsctl.core.context import OperationContext
from wsctl.core.errors import CommandError, DownloadError
from wsctl.platform.base import CommandRunner, FileManager, NetworkClient


@dataclass(frozen=True)
class Call:
    """A command recorded by FakeRunner."""

    kind: str
    command: tuple[str, ...]
    env: dict[str, str] | None

    @property
    def line(self) -> str:
        return " ".join(self.command)


class FakeRunner(CommandRunner):
    """CommandRunner that records calls instead of running them.

    Attributes:
        available: Executables reported by command_exists().
        outputs: Command line -> stdout returned by execute_with_output().
        failures: Command line -> CommandError reason to raise.
    """

    def __init__(self) -> None:
        self.available: set[str] = set()
        self.outputs: dict[str, str] = {}
        self.failures: dict[str, str] = {}
        self.calls: list[Call] = []

    def _record(self, kind: str, command: list[str], env: dict[str, str] | None) -> str:
        self.calls.append(Call(kind, tuple(command), env))
        line = " ".join(command)
        reason = self.failures.get(line)
        if reason is not None:
            returncode = {"exit": 1, "signal": -9}.get(reason)
            raise CommandError(command, returncode=returncode, stderr="boom", reason=reason)
        return self.outputs.get(line, "")

    def execute(
        self, ctx: OperationContext, name: str, *args: str, env: dict[str, str] | None = None
    ) -> None:
        self._record("execute", [name, *args], env)

    def execute_with_output(
        self, ctx: OperationContext, name: str, *args: str, env: dict[str, str] | None = None
    ) -> str:
        return self._record("output", [name, *args], env)

    def execute_sudo(
        self, ctx: OperationContext, name: str, *args: str, env: dict[str, str] | None = None
    ) -> None:
        self._record("sudo", ["sudo", name, *args], env)

    def command_exists(self, name: str) -> bool:
        return name in self.available

    @property
    def lines(self) -> list[str]:
        """Every recorded command line, in order."""
        return [call.line for call in self.calls]

    def lines_of(self, kind: str) -> list[str]:
        """Recorded command lines of one kind ('execute', 'output', 'sudo')."""
        return [call.line for call in self.calls if call.kind == kind]


class FakeFiles(FileManager):
    """In-memory FileManager."""

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.modes: dict[Path, int] = {}
        self.dirs: set[Path] = set()
        self.links: dict[Path, Path] = {}
        self.executables: dict[Path, list[Path]] = {}
        self.extracted: list[tuple[Path, Path, int | None]] = []
        self.removed: list[Path] = []
        self.extract_error: Exception | None = None
        self.symlink_error: Exception | None = None

    def file_exists(self, path: Path) -> bool:
        return path in self.files or path in self.dirs or path in self.links

    def ensure_dir(self, path: Path) -> None:
        self.dirs.add(path)

    def copy_file(self, src: Path, dst: Path) -> None:
        self.files[dst] = self.files[src]

    def write_file(self, path: Path, content: str, mode: int = 0o644) -> None:
        self.files[path] = content
        self.modes[path] = mode

    def read_file(self, path: Path) -> str:
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def remove_file(self, path: Path) -> None:
        self.files.pop(path, None)
        self.links.pop(path, None)
        self.removed.append(path)

    def remove_tree(self, path: Path) -> None:
        self.dirs.discard(path)
        self.removed.append(path)

    def make_executable(self, path: Path) -> None:
        self.modes[path] = 0o755

    def move_file(self, src: Path, dst: Path) -> None:
        self.files[dst] = self.files.pop(src, "")
        if src in self.modes:
            self.modes[dst] = self.modes.pop(src)

    def symlink(self, target: Path, link: Path) -> None:
        if self.symlink_error is not None:
            raise self.symlink_error
        self.links[link] = target

    def extract_archive(
        self, ctx: OperationContext, archive: Path, dest: Path, strip_components: int | None = 0
    ) -> list[Path]:
        if self.extract_error is not None:
            raise self.extract_error
        self.extracted.append((archive, dest, strip_components))
        return []

    def list_executables(self, directory: Path) -> list[Path]:
        return list(self.executables.get(directory, []))


class FakeNetwork(NetworkClient):
    """NetworkClient that writes placeholder content into a FakeFiles.

    Attributes:
        texts: URL -> body returned by fetch_text().
        failures: URLs that raise DownloadError.
        downloads: (url, dest) pairs, in order.
        deadlines: Context deadline seen by each download.
    """

    def __init__(self, files: FakeFiles) -> None:
        self._files = files
        self.texts: dict[str, str] = {}
        self.failures: set[str] = set()
        self.downloads: list[tuple[str, Path]] = []
        self.fetched: list[str] = []
        self.deadlines: list[float | None] = []

    def download_file(self, ctx: OperationContext, url: str, dest: Path) -> None:
        self.downloads.append((url, dest))
        self.deadlines.append(ctx.deadline)
        if url in self.failures:
            raise DownloadError(url, "connection refused")
        self._files.files[dest] = f"content of {url}"

    def fetch_text(self, ctx: OperationContext, url: str) -> str:
        self.fetched.append(url)
        if url in self.failures:
            raise DownloadError(url, "connection refused")
        return self.texts.get(url, "")
