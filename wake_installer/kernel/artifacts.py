"""
Defines the contracts for fetching and installing a release artifact.

This is a core part of the Kernel. It defines the 'port' the filesystem
installer adapter implements; the kernel itself never touches sockets or
files.
"""
from abc import abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from wake_installer.internal.config import ReleaseConfig

# (bytes written so far, declared total or None)
ProgressCallback = Callable[[int, Optional[int]], None]


@dataclass(frozen=True)
class InstallTarget:
    """
    Where an artifact comes from and where it goes. Built fresh for every
    run from the artifact id and the release config.
    """
    download_url: str
    destination_path: Path
    expected_min_size: int

    @classmethod
    def build(cls, artifact_id: str, destination_path: Path, config: ReleaseConfig) -> "InstallTarget":
        return cls(
            download_url=config.download_url(artifact_id),
            destination_path=Path(destination_path),
            expected_min_size=config.min_artifact_size,
        )


@dataclass(frozen=True)
class InstalledInfo:
    """
    Result of a successful install. ``downloaded`` is False when the fast
    path reused an existing artifact, in which case ``url`` is None.
    """
    path: Path
    size: int
    downloaded: bool
    url: Optional[str] = None
    permissions_applied: bool = True


class ArtifactInstaller(Protocol):
    """
    The interface (port) for anything that can put an artifact on disk.
    """

    @abstractmethod
    def install(self, artifact_id: str, destination_path: Path, force: bool = False) -> InstalledInfo:
        """
        Ensure the artifact is installed at destination_path, downloading it
        unless a valid copy is already there (or ``force`` is set).

        Args:
            artifact_id: Opaque release asset name, e.g. "wake-linux-x64".
            destination_path: Final location of the executable.
            force: Skip the already-installed check.

        Returns:
            InstalledInfo describing the file now at destination_path.

        Raises:
            InstallError: on any failure; the destination is never left
            half-written.
        """
        ...
