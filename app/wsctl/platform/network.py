"""HTTP adapter built on urllib.

Proxies are taken from the environment by urllib's default handlers.
Downloads stream to disk in fixed-size chunks and check the operation
context between chunks, so cancellation takes effect mid-transfer.
"""

import logging
import urllib.error
import urllib.request
from pathlib import Path

from wsctl.core.config import DEFAULT_USER_AGENT
from wsctl.core.context import OperationContext
from wsctl.core.errors import DownloadError, OperationAbortedError
from wsctl.platform.base import NetworkClient

logger = logging.getLogger(__name__)

CHUNK_SIZE = 32 * 1024


class HttpNetworkClient(NetworkClient):
    """NetworkClient using urllib.request.

    Attributes:
        user_agent: Value of the User-Agent header.
        timeout: Socket timeout in seconds for connecting and for each
            read. The overall deadline comes from the context.
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float = 60.0) -> None:
        self.user_agent = user_agent
        self.timeout = timeout

    def _socket_timeout(self, ctx: OperationContext) -> float:
        remaining = ctx.remaining()
        if remaining is None:
            return self.timeout
        return max(0.1, min(self.timeout, remaining))

    def _open(self, ctx: OperationContext, url: str):
        ctx.raise_if_done()
        try:
            request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
            response = urllib.request.urlopen(request, timeout=self._socket_timeout(ctx))  # nosec: B310
        except ValueError as e:
            raise DownloadError(url, str(e)) from e
        except urllib.error.HTTPError as e:
            e.close()
            raise DownloadError(url, str(e), status=e.code) from e
        except (urllib.error.URLError, OSError) as e:
            raise DownloadError(url, str(e)) from e

        if response.status != 200:
            response.close()
            raise DownloadError(url, f"unexpected status {response.status}", status=response.status)
        return response

    def download_file(self, ctx: OperationContext, url: str, dest: Path) -> None:
        """Download url to dest, removing dest if anything goes wrong.

        Raises:
            DownloadError: On HTTP errors, non-200 responses, I/O failures
                and context cancellation or expiry.
        """
        logger.info("Downloading %s", url)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with self._open(ctx, url) as response, open(dest, "wb") as out:
                while True:
                    ctx.raise_if_done()
                    chunk = response.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    out.write(chunk)
        except OperationAbortedError as e:
            dest.unlink(missing_ok=True)
            raise DownloadError(url, str(e)) from e
        except DownloadError:
            dest.unlink(missing_ok=True)
            raise
        except OSError as e:
            dest.unlink(missing_ok=True)
            raise DownloadError(url, str(e)) from e

        logger.debug("Downloaded %s to %s", url, dest)

    def fetch_text(self, ctx: OperationContext, url: str) -> str:
        """GET url and return the body decoded as UTF-8.

        Raises:
            DownloadError: On HTTP errors, non-200 responses or cancellation.
        """
        chunks: list[bytes] = []
        try:
            with self._open(ctx, url) as response:
                while True:
                    ctx.raise_if_done()
                    chunk = response.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    chunks.append(chunk)
        except OperationAbortedError as e:
            raise DownloadError(url, str(e)) from e
        except OSError as e:
            raise DownloadError(url, str(e)) from e
        return b"".join(chunks).decode("utf-8", errors="replace")
