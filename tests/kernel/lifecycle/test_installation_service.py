from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wake_installer.kernel.artifacts import InstalledInfo
from wake_installer.kernel.errors import InstallError, UnsupportedPlatform
from wake_installer.kernel.installation import InstallationService
from wake_installer.kernel.platform import PlatformKey

# --- Fixtures ---

@pytest.fixture
def mock_installer():
    installer = MagicMock()
    installer.install.return_value = InstalledInfo(
        path=Path("/opt/wake/bin/wake"), size=2_000_000, downloaded=True, url="https://example/wake"
    )
    return installer


@pytest.fixture
def service(mock_installer, release_config):
    return InstallationService(mock_installer, release_config)

# --- Tests ---

def test_supported_platform_delegates_with_artifact_id(service, mock_installer, tmp_path):
    destination = tmp_path / "bin" / "wake"
    info = service.install(PlatformKey("linux", "x64"), destination)

    mock_installer.install.assert_called_once_with("wake-linux-x64", destination, force=False)
    assert info.size == 2_000_000


def test_force_is_forwarded(service, mock_installer, tmp_path):
    destination = tmp_path / "wake.exe"
    service.install(PlatformKey("win32", "x64"), destination, force=True)
    mock_installer.install.assert_called_once_with("wake-windows-x64.exe", destination, force=True)


def test_unsupported_platform_never_reaches_installer(service, mock_installer, tmp_path):
    with pytest.raises(UnsupportedPlatform) as exc_info:
        service.install(PlatformKey("darwin", "arm64"), tmp_path / "wake")

    assert not mock_installer.install.called
    assert exc_info.value.reason == "macOS ARM64 binary not yet available"
    assert exc_info.value.hint_artifact_id == "wake-macos-arm64"
    assert isinstance(exc_info.value, InstallError)


def test_generic_unsupported_platform(service, mock_installer, tmp_path):
    with pytest.raises(UnsupportedPlatform, match="Unsupported platform: linux riscv64"):
        service.install(PlatformKey("linux", "riscv64"), tmp_path / "wake")
    assert not mock_installer.install.called


def test_installer_errors_propagate(service, mock_installer, tmp_path):
    mock_installer.install.side_effect = InstallError("boom")
    with pytest.raises(InstallError, match="boom"):
        service.install(PlatformKey("linux", "x64"), tmp_path / "wake")
