"""
Failure taxonomy for an installation run.

Every error below is terminal for the current invocation except
PermissionUnsupported, which the installer raises and catches internally to
mark the one failure it tolerates.
"""
from pathlib import Path
from typing import Optional


class InstallError(Exception):
    """Base class for everything an installation run can fail with."""


class UnsupportedPlatform(InstallError):
    def __init__(self, resolution):
        self.resolution = resolution
        super().__init__(resolution.reason)

    @property
    def reason(self) -> str:
        return self.resolution.reason

    @property
    def hint_artifact_id(self) -> Optional[str]:
        return self.resolution.hint_artifact_id


class NetworkError(InstallError):
    """Transport-level failure (DNS, refused or reset connection, timeout)."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Network error while fetching {url}{detail}")


class DownloadError(InstallError):
    def __init__(self, status: Optional[int], url: str, message: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(message or f"Failed to download: {status} ({url})")


class TooManyRedirects(DownloadError):
    def __init__(self, status: int, url: str, max_redirects: int):
        self.max_redirects = max_redirects
        super().__init__(status, url, f"Gave up after {max_redirects} redirects (last: {status} {url})")


class EmptyArtifact(InstallError):
    def __init__(self, path: Path, url: Optional[str] = None):
        self.path = path
        self.url = url
        super().__init__(f"Downloaded artifact is empty: {url or path}")


class VerificationFailed(InstallError):
    def __init__(self, path: Path, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Installed artifact missing after install: {path}")


class PermissionUnsupported(InstallError):
    """
    Setting the executable bit failed on a target where permission bits are
    not meaningful (Windows). Never surfaces to callers.
    """

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot set executable permissions on {path}: {cause}")
