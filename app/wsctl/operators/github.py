"""GitHub release operators.

Four flavours install software published on GitHub:

- github-binary: a single executable, placed in ~/.local/bin
- github-bundle: an archive with a directory tree, extracted to
  ~/.local/share/<name> with its bin/ executables linked into ~/.local/bin
- github-java: a Java distribution; only PMD is supported
- github: legacy alias that behaves like github-binary

Sources are either direct download URLs or ``owner/repo`` references.
Resolving release assets from ``owner/repo`` is not implemented and
raises a dedicated NotYetImplementedError subclass.
"""

import logging
import re
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from wsctl.core.context import OperationContext
from wsctl.core.errors import (
    ArchiveError,
    BundleExtractError,
    BundleSymlinkError,
    GenericJavaAppNotImplementedError,
    GitHubBinaryNotImplementedError,
    GitHubReleaseNotImplementedError,
    PMDURLNotFoundError,
)
from wsctl.core.paths import get_temp_path, get_user_bin_dir, get_user_share_dir
from wsctl.models.package import InstallMethod, Package
from wsctl.operators.base import Operator, Outcome
from wsctl.operators.binary import BinaryOperator
from wsctl.platform.base import FileManager

logger = logging.getLogger(__name__)

PMD_RELEASE_API = "https://api.github.com/repos/pmd/pmd/releases/latest"
PMD_TEMP_NAME = "pmd-bin.zip"
# Covers the whole PMD install: release lookup, download and extraction
PMD_INSTALL_TIMEOUT_SECONDS = 300

_DOWNLOAD_URL_RE = re.compile(r'"browser_download_url"\s*:\s*"([^"]+)"')


def extract_repo_name(source: str) -> str:
    """Return the repository part of 'owner/repo'.

    Examples:
        >>> extract_repo_name("jesseduffield/lazygit")
        'lazygit'
        >>> extract_repo_name("lazygit")
        'lazygit'
    """
    parts = source.split("/")
    if len(parts) >= 2:
        return parts[1]
    return source


def find_pmd_download_url(release_json: str) -> str:
    """Pick the PMD binary distribution URL out of a release API response.

    Raises:
        PMDURLNotFoundError: If no ``pmd-dist-*-bin.zip`` asset is listed.
    """
    for url in _DOWNLOAD_URL_RE.findall(release_json):
        if "pmd-dist-" in url and "-bin.zip" in url and ".asc" not in url:
            return url
    raise PMDURLNotFoundError()


def remove_github_install(files: FileManager, pkg: Package) -> None:
    """Delete ~/.local/bin/<name> and ~/.local/share/<name>.

    Failures are logged, never raised.
    """
    for path, remover in (
        (get_user_bin_dir() / pkg.name, files.remove_file),
        (get_user_share_dir(pkg.name), files.remove_tree),
    ):
        if not files.file_exists(path):
            continue
        try:
            remover(path)
        except OSError as e:
            logger.warning("Failed to remove %s: %s", path, e)
        else:
            logger.info("Removed %s", path)


class GitHubBinaryOperator(BinaryOperator):
    """Operator for single executables released on GitHub."""

    @property
    def method(self) -> InstallMethod:
        """Return GITHUB_BINARY as the installation method."""
        return InstallMethod.GITHUB_BINARY

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install the binary from a direct URL.

        Raises:
            GitHubBinaryNotImplementedError: If the source is 'owner/repo'.
            DownloadError: If the download fails.
        """
        if self.dry_run:
            return self._planned(f"install GitHub binary from {pkg.source}")

        if self._runner.command_exists(pkg.name):
            return self._skipped(f"binary {pkg.name} already available")

        if not pkg.is_url_source:
            raise GitHubBinaryNotImplementedError(pkg.name)

        target = self._install_binary(ctx, pkg)
        return self._done(f"installed {target}")

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        if self.dry_run:
            return self._planned(f"remove GitHub package {pkg.name}")
        remove_github_install(self._files, pkg)
        return self._done(f"removed {pkg.name}")


class LegacyGitHubOperator(GitHubBinaryOperator):
    """Operator for the legacy 'github' method, installed as a GitHub binary."""

    @property
    def method(self) -> InstallMethod:
        """Return GITHUB as the installation method."""
        return InstallMethod.GITHUB

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        logger.warning(
            "Using legacy GitHub installation method for %s; "
            "consider github-binary, github-bundle or github-java",
            pkg.name,
        )
        return super().install(ctx, pkg)


class GitHubBundleOperator(Operator):
    """Operator for archives that unpack into an application directory."""

    @property
    def method(self) -> InstallMethod:
        """Return GITHUB_BUNDLE as the installation method."""
        return InstallMethod.GITHUB_BUNDLE

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Download and extract the bundle, then link its executables.

        Raises:
            GitHubReleaseNotImplementedError: If the source is 'owner/repo'.
            DownloadError: If the download fails.
            BundleExtractError: If the archive cannot be extracted.
            BundleSymlinkError: If executables cannot be linked.
        """
        share_dir = get_user_share_dir(pkg.name)
        if self.dry_run:
            return self._planned(f"install GitHub bundle from {pkg.source} into {share_dir}")

        if not pkg.is_url_source:
            raise GitHubReleaseNotImplementedError(pkg.name)

        logger.info("Installing %s bundle from GitHub", pkg.name)
        self._files.ensure_dir(share_dir)

        archive = get_temp_path(f"{pkg.name}-{_archive_filename(pkg.source)}")
        download_ctx = ctx.with_timeout(self._config.download_timeout_seconds)
        self._network.download_file(download_ctx, pkg.source, archive)

        try:
            self._files.extract_archive(ctx, archive, share_dir, strip_components=None)
        except (ArchiveError, OSError) as e:
            raise BundleExtractError(pkg.name, e) from e
        finally:
            self._files.remove_file(archive)

        linked = self._link_executables(share_dir, pkg)
        return self._done(f"installed {pkg.name} into {share_dir} ({len(linked)} executables linked)")

    def _link_executables(self, share_dir: Path, pkg: Package) -> list[Path]:
        bin_dir = get_user_bin_dir()
        links: list[Path] = []
        try:
            self._files.ensure_dir(bin_dir)
            for executable in self._files.list_executables(share_dir / "bin"):
                link = bin_dir / executable.name
                self._files.symlink(executable, link)
                links.append(link)
        except OSError as e:
            raise BundleSymlinkError(pkg.name, e) from e

        if not links:
            logger.warning("Bundle %s has no executables in %s", pkg.name, share_dir / "bin")
        return links

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        if self.dry_run:
            return self._planned(f"remove GitHub package {pkg.name}")
        remove_github_install(self._files, pkg)
        return self._done(f"removed {pkg.name}")


class GitHubJavaOperator(Operator):
    """Operator for Java applications distributed on GitHub."""

    @property
    def method(self) -> InstallMethod:
        """Return GITHUB_JAVA as the installation method."""
        return InstallMethod.GITHUB_JAVA

    def install(self, ctx: OperationContext, pkg: Package) -> Outcome:
        """Install PMD from its latest release.

        Raises:
            GenericJavaAppNotImplementedError: For anything other than pmd.
            PMDURLNotFoundError: If the release lists no binary distribution.
            DownloadError: If the lookup or download fails.
            ArchiveError: If the archive cannot be extracted.
        """
        if self.dry_run:
            return self._planned(f"install GitHub Java app from {pkg.source}")

        if pkg.name != "pmd":
            raise GenericJavaAppNotImplementedError(pkg.name)

        return self._install_pmd(ctx.with_timeout(PMD_INSTALL_TIMEOUT_SECONDS))

    def _install_pmd(self, ctx: OperationContext) -> Outcome:
        logger.info("Installing PMD from GitHub releases")
        url = find_pmd_download_url(self._network.fetch_text(ctx, PMD_RELEASE_API))

        archive = get_temp_path(PMD_TEMP_NAME)
        logger.info("Downloading PMD from %s", url)
        self._network.download_file(ctx, url, archive)

        pmd_dir = get_user_share_dir("pmd")
        try:
            self._files.ensure_dir(pmd_dir)
            self._files.extract_archive(ctx, archive, pmd_dir, strip_components=1)
        finally:
            self._files.remove_file(archive)

        bin_dir = get_user_bin_dir()
        self._files.ensure_dir(bin_dir)
        link = bin_dir / "pmd"
        self._files.symlink(pmd_dir / "bin" / "pmd", link)

        logger.info("Linked %s -> %s", link, pmd_dir / "bin" / "pmd")
        return self._done(f"installed PMD into {pmd_dir}")

    def remove(self, ctx: OperationContext, pkg: Package) -> Outcome:
        if self.dry_run:
            return self._planned(f"remove GitHub package {pkg.name}")
        remove_github_install(self._files, pkg)
        return self._done(f"removed {pkg.name}")


def _archive_filename(url: str) -> str:
    name = PurePosixPath(urlparse(url).path).name
    return name or "bundle.tar.gz"
