from wake_installer.kernel.artifacts import ArtifactInstaller, InstalledInfo, InstallTarget, ProgressCallback
from wake_installer.kernel.errors import (
    DownloadError,
    EmptyArtifact,
    InstallError,
    NetworkError,
    PermissionUnsupported,
    TooManyRedirects,
    UnsupportedPlatform,
    VerificationFailed,
)
from wake_installer.kernel.installation import InstallationService
from wake_installer.kernel.platform import (
    PlatformKey,
    ResolutionResult,
    Supported,
    Unsupported,
    detect_platform_key,
    resolve,
)

__all__ = [
    "ArtifactInstaller",
    "DownloadError",
    "EmptyArtifact",
    "InstallError",
    "InstallTarget",
    "InstallationService",
    "InstalledInfo",
    "NetworkError",
    "PermissionUnsupported",
    "PlatformKey",
    "ProgressCallback",
    "ResolutionResult",
    "Supported",
    "TooManyRedirects",
    "Unsupported",
    "UnsupportedPlatform",
    "VerificationFailed",
    "detect_platform_key",
    "resolve",
]
