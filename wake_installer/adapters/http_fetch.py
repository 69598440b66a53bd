"""
HTTP transport for release downloads.

Redirects are followed by hand instead of by requests so the hop count is
bounded by the release config and every hop is logged. GitHub release URLs
answer with a 302 to a signed object-storage URL, which in turn may redirect
again.
"""
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Tuple
from urllib.parse import urljoin

import requests

from wake_installer import __version__
from wake_installer.internal.config import ReleaseConfig
from wake_installer.internal.constants import REDIRECT_STATUSES
from wake_installer.internal.logging import get_logger
from wake_installer.kernel.artifacts import ProgressCallback
from wake_installer.kernel.errors import DownloadError, NetworkError, TooManyRedirects

logger = get_logger(__name__)

USER_AGENT = f"wake-installer/{__version__}"


def _content_length(response: requests.Response) -> Optional[int]:
    raw = response.headers.get("Content-Length")
    if raw is None:
        return None
    try:
        total = int(raw)
    except ValueError:
        return None
    return total if total > 0 else None


class ReleaseDownloader:
    """
    Streams a release asset from a URL, following a bounded redirect chain.
    """
    def __init__(self, config: ReleaseConfig, session: Optional[requests.Session] = None):
        self.config = config
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = USER_AGENT
        self._session = session

    def close(self):
        self._session.close()

    @contextmanager
    def open(self, url: str) -> Iterator[requests.Response]:
        """
        Yield the streaming 200 response at the end of the redirect chain
        starting at ``url``. Intermediate responses are closed unread.

        Raises:
            NetworkError: transport failure on any hop.
            TooManyRedirects: more than ``config.max_redirects`` hops.
            DownloadError: any other non-200 status, or a redirect with no
                Location header.
        """
        current = url
        hops = 0
        while True:
            try:
                response = self._session.get(
                    current,
                    stream=True,
                    allow_redirects=False,
                    timeout=self.config.timeout,
                )
            except requests.RequestException as exc:
                logger.error("Request failed", url=current, error=str(exc))
                raise NetworkError(current, exc) from exc

            status = response.status_code
            if status in REDIRECT_STATUSES:
                location = response.headers.get("Location")
                response.close()
                if not location:
                    raise DownloadError(status, current, f"Redirect {status} without a Location header ({current})")
                if hops >= self.config.max_redirects:
                    raise TooManyRedirects(status, current, self.config.max_redirects)
                hops += 1
                next_url = urljoin(current, location)
                logger.debug("Following redirect", status=status, hop=hops, url=next_url)
                current = next_url
                continue

            if status != 200:
                response.close()
                logger.error("Download rejected", status=status, url=current)
                raise DownloadError(status, current)
            break

        try:
            yield response
        finally:
            response.close()

    def download_to(
        self,
        url: str,
        fh: BinaryIO,
        progress: Optional[ProgressCallback] = None,
    ) -> Tuple[str, int]:
        """
        Write the body found at ``url`` into ``fh``. Returns the final URL
        after redirects and the number of bytes written.
        """
        with self.open(url) as response:
            final_url = response.url or url
            total = _content_length(response)
            written = 0
            if progress:
                progress(0, total)
            try:
                for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                    if not chunk:
                        continue
                    fh.write(chunk)
                    written += len(chunk)
                    if progress:
                        progress(written, total)
            except requests.RequestException as exc:
                logger.error("Download interrupted", url=final_url, written=written, error=str(exc))
                raise NetworkError(final_url, exc) from exc

        logger.info("Download complete", url=final_url, size=written, redirects_from=url if final_url != url else None)
        return final_url, written
