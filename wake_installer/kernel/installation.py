"""
This module defines the installation service of the kernel. It composes
platform resolution and an ArtifactInstaller: resolve first, then hand the
installer an opaque artifact id.
"""
from pathlib import Path

from wake_installer.internal.config import ReleaseConfig
from wake_installer.internal.logging import get_logger
from wake_installer.kernel.artifacts import ArtifactInstaller, InstalledInfo
from wake_installer.kernel.errors import UnsupportedPlatform
from wake_installer.kernel.platform import PlatformKey, ResolutionResult, Unsupported, resolve_key

logger = get_logger(__name__)


class InstallationService:
    """
    Orchestrates one installation run, from platform resolution to a
    verified executable on disk.
    """
    def __init__(self, installer: ArtifactInstaller, config: ReleaseConfig):
        self.installer = installer
        self.config = config

    def resolve(self, platform_key: PlatformKey) -> ResolutionResult:
        return resolve_key(platform_key)

    def install(self, platform_key: PlatformKey, destination_path: Path, force: bool = False) -> InstalledInfo:
        resolution = self.resolve(platform_key)
        if isinstance(resolution, Unsupported):
            logger.warning(
                "Platform not supported",
                platform=str(platform_key),
                reason=resolution.reason,
                hint_artifact_id=resolution.hint_artifact_id,
            )
            raise UnsupportedPlatform(resolution)

        logger.info(
            "Resolved release artifact",
            platform=str(platform_key),
            artifact_id=resolution.artifact_id,
            version=self.config.version,
        )
        return self.installer.install(resolution.artifact_id, destination_path, force=force)
