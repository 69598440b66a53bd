"""
Core, reusable logic for CLI commands, decoupled from Typer.
"""
from pathlib import Path
from typing import Optional

from wake_installer.adapters.storage_fs import FileSystemArtifactInstaller
from wake_installer.internal import paths
from wake_installer.internal.config import ReleaseConfig
from wake_installer.internal.logging import get_logger
from wake_installer.kernel.artifacts import InstalledInfo, ProgressCallback
from wake_installer.kernel.installation import InstallationService
from wake_installer.kernel.platform import PlatformKey, detect_platform_key

logger = get_logger(__name__)


def load_config() -> ReleaseConfig:
    return ReleaseConfig.from_env()


def current_platform(os_name: Optional[str] = None, arch: Optional[str] = None) -> PlatformKey:
    """Detected platform key, with either half optionally overridden."""
    detected = detect_platform_key()
    key = detect_platform_key(
        system=os_name if os_name else detected.os,
        machine=arch if arch else detected.arch,
    )
    logger.debug("Platform detected", platform=str(key))
    return key


def default_destination(key: PlatformKey, config: ReleaseConfig) -> Path:
    return paths.get_binary_path(key.os, config.executable_name)


def run_install(
    key: PlatformKey,
    config: ReleaseConfig,
    destination: Optional[Path] = None,
    force: bool = False,
    progress: Optional[ProgressCallback] = None,
) -> InstalledInfo:
    """
    Resolve ``key`` and install its artifact. Raises InstallError (including
    UnsupportedPlatform) or OSError; never exits the process.
    """
    destination = destination or default_destination(key, config)
    installer = FileSystemArtifactInstaller(config, progress=progress)
    try:
        service = InstallationService(installer, config)
        return service.install(key, destination, force=force)
    finally:
        installer.close()
