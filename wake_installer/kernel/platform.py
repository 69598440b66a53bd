"""
Platform resolution: maps an (operating-system, architecture) pair onto the
release artifact built for it.

Identifiers follow the vocabulary the release pipeline uses for artifact
names (``linux``/``win32``/``darwin``, ``x64``/``arm64``), not Python's
``platform`` module spelling; ``detect_platform_key`` does the translation.
"""
import platform
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class PlatformKey:
    os: str
    arch: str

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


@dataclass(frozen=True)
class Supported:
    artifact_id: str

    @property
    def supported(self) -> bool:
        return True


@dataclass(frozen=True)
class Unsupported:
    reason: str
    hint_artifact_id: Optional[str] = None

    @property
    def supported(self) -> bool:
        return False


ResolutionResult = Union[Supported, Unsupported]


# ---------------------------------------------------------------------
# Release artifact tables
# ---------------------------------------------------------------------

SUPPORTED_ARTIFACTS = {
    PlatformKey("linux", "x64"): "wake-linux-x64",
    PlatformKey("win32", "x64"): "wake-windows-x64.exe",
}

# Platforms with an artifact name reserved but no published binary yet.
PENDING_ARTIFACTS = {
    PlatformKey("darwin", "x64"): ("wake-macos-x64", "macOS x64 binary not yet available"),
    PlatformKey("darwin", "arm64"): ("wake-macos-arm64", "macOS ARM64 binary not yet available"),
}


def resolve(os_name: str, arch: str) -> ResolutionResult:
    """
    Resolve a platform to its artifact. Total: every input maps to either
    Supported or Unsupported, nothing raises.
    """
    key = PlatformKey(str(os_name), str(arch))

    artifact_id = SUPPORTED_ARTIFACTS.get(key)
    if artifact_id is not None:
        return Supported(artifact_id)

    pending = PENDING_ARTIFACTS.get(key)
    if pending is not None:
        hint, reason = pending
        return Unsupported(reason=reason, hint_artifact_id=hint)

    return Unsupported(reason=f"Unsupported platform: {key.os} {key.arch}. Please build from source.")


def resolve_key(key: PlatformKey) -> ResolutionResult:
    return resolve(key.os, key.arch)


# ---------------------------------------------------------------------
# Environment detection
# ---------------------------------------------------------------------

_OS_ALIASES = {
    "windows": "win32",
    "win32": "win32",
    "cygwin": "win32",
    "darwin": "darwin",
    "macos": "darwin",
    "linux": "linux",
}

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}


def normalize_os(system: str) -> str:
    s = (system or "").strip().lower()
    if s.startswith("cygwin") or s.startswith("msys") or s.startswith("mingw"):
        return "win32"
    return _OS_ALIASES.get(s, s or "unknown")


def normalize_arch(machine: str) -> str:
    m = (machine or "").strip().lower()
    return _ARCH_ALIASES.get(m, m or "unknown")


def detect_platform_key(system: Optional[str] = None, machine: Optional[str] = None) -> PlatformKey:
    """
    Build a PlatformKey for the running interpreter. Explicit values are
    normalized the same way, so ``detect_platform_key("Windows", "AMD64")``
    gives ``win32/x64``.
    """
    if system is None:
        system = platform.system()
    if machine is None:
        machine = platform.machine()
    return PlatformKey(os=normalize_os(system), arch=normalize_arch(machine))
