"""
A concrete implementation of the ArtifactInstaller that downloads a release
asset and publishes it on the local filesystem.

The artifact is streamed into a temporary file next to the destination,
verified there, and moved into place with a single os.replace, so the
destination only ever holds a complete executable (or whatever was there
before the run).
"""
import os
import stat
from pathlib import Path
from typing import BinaryIO, Optional

from wake_installer.adapters.http_fetch import ReleaseDownloader
from wake_installer.internal.config import ReleaseConfig
from wake_installer.internal.constants import EXECUTABLE_MODE
from wake_installer.internal.logging import get_logger
from wake_installer.kernel.artifacts import ArtifactInstaller, InstalledInfo, InstallTarget, ProgressCallback
from wake_installer.kernel.errors import EmptyArtifact, PermissionUnsupported, VerificationFailed

logger = get_logger(__name__)


class FileSystemArtifactInstaller(ArtifactInstaller):
    """
    Installs a single release artifact at a destination path.
    This is an 'adapter' in the hexagonal architecture.
    """
    def __init__(
        self,
        config: ReleaseConfig,
        downloader: Optional[ReleaseDownloader] = None,
        progress: Optional[ProgressCallback] = None,
        windows: Optional[bool] = None,
    ):
        self.config = config
        self._downloader = downloader or ReleaseDownloader(config)
        self._progress = progress
        self._windows = (os.name == "nt") if windows is None else windows

    def close(self):
        self._downloader.close()

    # -----------------------------------------------------------------
    # Filesystem helpers
    # -----------------------------------------------------------------

    def _existing_size(self, path: Path) -> Optional[int]:
        try:
            st = path.stat()
        except FileNotFoundError:
            return None
        if not stat.S_ISREG(st.st_mode):
            return None
        return st.st_size

    def _temp_path(self, destination: Path) -> Path:
        return destination.with_name(f".{destination.name}.download")

    def _open_temp(self, temp_path: Path) -> BinaryIO:
        # Mode applies at creation; a stale temp file from an interrupted run is truncated.
        flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
        fd = os.open(temp_path, flags, EXECUTABLE_MODE)
        return os.fdopen(fd, "wb")

    def finalize_permissions(self, path: Path):
        """
        Re-assert the executable bit. On Windows a failure raises
        PermissionUnsupported; anywhere else the OSError propagates.
        """
        try:
            os.chmod(path, EXECUTABLE_MODE)
        except OSError as exc:
            if self._windows:
                raise PermissionUnsupported(path, exc) from exc
            raise

    # -----------------------------------------------------------------
    # ArtifactInstaller
    # -----------------------------------------------------------------

    def install(self, artifact_id: str, destination_path: Path, force: bool = False) -> InstalledInfo:
        target = InstallTarget.build(artifact_id, destination_path, self.config)
        destination = target.destination_path

        existing_size = self._existing_size(destination)
        if existing_size is not None:
            if existing_size >= target.expected_min_size and not force:
                logger.info("Artifact already installed", path=str(destination), size=existing_size)
                return InstalledInfo(path=destination, size=existing_size, downloaded=False)
            if existing_size < target.expected_min_size:
                logger.warning(
                    "Existing artifact is too small, treating it as corrupt",
                    path=str(destination),
                    size=existing_size,
                    min_size=target.expected_min_size,
                )
                destination.unlink()

        destination.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._temp_path(destination)

        logger.info("Downloading artifact", artifact_id=artifact_id, url=target.download_url, path=str(destination))
        permissions_applied = True
        try:
            with self._open_temp(temp_path) as fh:
                final_url, _ = self._downloader.download_to(target.download_url, fh, self._progress)

            size = temp_path.stat().st_size
            if size == 0:
                logger.error("Downloaded artifact is empty", url=final_url)
                raise EmptyArtifact(destination, target.download_url)
            if size < target.expected_min_size:
                # Would be treated as corrupt by the next run's fast path.
                logger.error(
                    "Downloaded artifact is smaller than expected",
                    url=final_url,
                    size=size,
                    min_size=target.expected_min_size,
                )
                raise VerificationFailed(
                    destination,
                    f"Downloaded artifact is smaller than expected: {size} bytes, "
                    f"need at least {target.expected_min_size} ({target.download_url})",
                )

            try:
                self.finalize_permissions(temp_path)
            except PermissionUnsupported as exc:
                logger.warning("Executable bit not applied", path=str(temp_path), error=str(exc.cause))
                permissions_applied = False

            os.replace(temp_path, destination)
        finally:
            if temp_path.exists():
                temp_path.unlink()

        try:
            final_size = destination.stat().st_size
        except FileNotFoundError as exc:
            raise VerificationFailed(destination) from exc
        if final_size == 0:
            raise VerificationFailed(destination, f"Installed artifact is empty: {destination}")

        logger.info("Artifact installed", path=str(destination), size=final_size, url=final_url)
        return InstalledInfo(
            path=destination,
            size=final_size,
            downloaded=True,
            url=target.download_url,
            permissions_applied=permissions_applied,
        )
