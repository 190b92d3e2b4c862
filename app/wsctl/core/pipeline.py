"""Archive extraction and file placement for downloaded tools.

These helpers work on the real filesystem and back LocalFileManager.
Extraction strips leading path segments (or a shared top-level
directory when asked to detect one), refuses entries that would
escape the destination, and sets permissions by location: files under a
``bin`` directory become executable, everything else is 0644.
"""

import logging
import os
import shutil
import tarfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import IO

from wsctl.core.context import OperationContext
from wsctl.core.errors import ArchiveError

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755
REGULAR_MODE = 0o644

_COPY_CHUNK_SIZE = 32 * 1024


def shared_root_depth(names: list[str]) -> int:
    """Return 1 if every entry sits under the same top-level directory, else 0.

    Examples:
        >>> shared_root_depth(["tool-1.0/bin/tool", "tool-1.0/README"])
        1
        >>> shared_root_depth(["bin/tool", "README"])
        0
    """
    split = [[part for part in PurePosixPath(name).parts if part != "/"] for name in names]
    if not split or any(len(parts) < 2 for parts in split):
        return 0
    return 1 if len({parts[0] for parts in split}) == 1 else 0


def extract_archive(
    archive: Path,
    dest: Path,
    strip_components: int | None = 0,
    ctx: OperationContext | None = None,
) -> list[Path]:
    """Extract a zip or tar archive into dest.

    Args:
        archive: Path to a .zip, .tar, .tar.gz, .tgz, .tar.xz or .tar.bz2 file.
        dest: Destination directory, created if missing.
        strip_components: Number of leading path segments to drop from
            every entry. Entries with no segments left are skipped. None
            strips the top-level directory only when all entries share one.
        ctx: Checked before each entry.

    Returns:
        Paths of the extracted files.

    Raises:
        ArchiveError: If the archive cannot be read or an entry would be
            written outside dest.
        OperationAbortedError: If ctx ends during extraction.
    """
    dest.mkdir(parents=True, exist_ok=True)
    root = dest.resolve()
    extracted: list[Path] = []

    try:
        if zipfile.is_zipfile(archive):
            with zipfile.ZipFile(archive) as zf:
                entries = [info for info in zf.infolist() if not info.is_dir()]
                strip = _resolve_strip(strip_components, [info.filename for info in entries])
                for info in entries:
                    target = _prepare_target(root, info.filename, strip, ctx)
                    if target is None:
                        continue
                    with zf.open(info) as src:
                        _write_entry(src, target, root)
                    extracted.append(target)
        elif tarfile.is_tarfile(archive):
            with tarfile.open(archive) as tf:
                members = [member for member in tf.getmembers() if member.isfile()]
                strip = _resolve_strip(strip_components, [member.name for member in members])
                for member in members:
                    target = _prepare_target(root, member.name, strip, ctx)
                    if target is None:
                        continue
                    src = tf.extractfile(member)
                    if src is None:
                        continue
                    with src:
                        _write_entry(src, target, root)
                    extracted.append(target)
        else:
            msg = f"unsupported archive format: {archive}"
            raise ArchiveError(msg)
    except (zipfile.BadZipFile, tarfile.TarError, OSError) as e:
        msg = f"failed to extract {archive}: {e}"
        raise ArchiveError(msg) from e

    logger.debug("Extracted %d files from %s into %s", len(extracted), archive, dest)
    return extracted


def _resolve_strip(strip_components: int | None, names: list[str]) -> int:
    if strip_components is None:
        return shared_root_depth(names)
    return strip_components


def _prepare_target(
    root: Path,
    name: str,
    strip_components: int,
    ctx: OperationContext | None,
) -> Path | None:
    """Map an archive entry name to its destination, or None to skip it."""
    if ctx is not None:
        ctx.raise_if_done()

    parts = [part for part in PurePosixPath(name).parts if part != "/"]
    if len(parts) <= strip_components:
        return None
    relative = PurePosixPath(*parts[strip_components:])

    target = (root / relative).resolve()
    if not target.is_relative_to(root):
        msg = f"illegal file path in archive: {name}"
        raise ArchiveError(msg)
    return target


def _write_entry(src: IO[bytes], target: Path, root: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "wb") as out:
        shutil.copyfileobj(src, out, _COPY_CHUNK_SIZE)
    os.chmod(target, _entry_mode(target.relative_to(root)))


def _entry_mode(relative: Path) -> int:
    if "bin" in relative.parent.parts and relative.suffix != ".bat":
        return EXECUTABLE_MODE
    return REGULAR_MODE


def make_executable(path: Path) -> None:
    """Set permissions 0755 on path."""
    os.chmod(path, EXECUTABLE_MODE)


def move_into(src: Path, dest_dir: Path, name: str) -> Path:
    """Move src to dest_dir/name, creating dest_dir and replacing any file there.

    Returns:
        The final path.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)
    target = dest_dir / name
    try:
        os.replace(src, target)
    except OSError:
        # Cross-device moves (tmpfs to home) need a copy
        shutil.move(str(src), str(target))
    return target


def place_symlink(target: Path, link: Path) -> None:
    """Create link pointing at target, replacing whatever is at link."""
    link.parent.mkdir(parents=True, exist_ok=True)
    if link.is_symlink() or link.exists():
        link.unlink()
    link.symlink_to(target)


def list_executables(directory: Path) -> list[Path]:
    """Return executable regular files directly inside directory, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and os.access(entry, os.X_OK)
    )
