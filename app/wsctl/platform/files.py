"""Local filesystem adapter."""

import shutil
from pathlib import Path

from wsctl.core import pipeline
from wsctl.core.context import OperationContext
from wsctl.platform.base import FileManager


class LocalFileManager(FileManager):
    """FileManager backed by the local filesystem."""

    def file_exists(self, path: Path) -> bool:
        return path.exists() or path.is_symlink()

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)

    def write_file(self, path: Path, content: str, mode: int = 0o644) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        path.chmod(mode)

    def read_file(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def remove_file(self, path: Path) -> None:
        path.unlink(missing_ok=True)

    def remove_tree(self, path: Path) -> None:
        if path.is_symlink():
            path.unlink()
        elif path.exists():
            shutil.rmtree(path)

    def make_executable(self, path: Path) -> None:
        pipeline.make_executable(path)

    def move_file(self, src: Path, dst: Path) -> None:
        pipeline.move_into(src, dst.parent, dst.name)

    def symlink(self, target: Path, link: Path) -> None:
        pipeline.place_symlink(target, link)

    def extract_archive(
        self,
        ctx: OperationContext,
        archive: Path,
        dest: Path,
        strip_components: int | None = 0,
    ) -> list[Path]:
        return pipeline.extract_archive(archive, dest, strip_components, ctx)

    def list_executables(self, directory: Path) -> list[Path]:
        return pipeline.list_executables(directory)
