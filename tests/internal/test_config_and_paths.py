from pathlib import Path

from wake_installer.internal import constants, paths
from wake_installer.internal.config import ReleaseConfig
from wake_installer.kernel.artifacts import InstallTarget

# --- ReleaseConfig ---

def test_default_download_url():
    config = ReleaseConfig()
    assert config.download_url("wake-linux-x64") == (
        "https://github.com/Try-Wind/Wake/releases/download/v0.1.5/wake-linux-x64"
    )


def test_release_urls():
    config = ReleaseConfig()
    assert config.release_page_url == "https://github.com/Try-Wind/Wake/releases/tag/v0.1.5"
    assert config.releases_url == "https://github.com/Try-Wind/Wake/releases"
    assert config.source_clone_url == "https://github.com/Try-Wind/Wake.git"


def test_from_env_overrides():
    config = ReleaseConfig.from_env({
        constants.ENV_RELEASE_HOST: "mirror.internal",
        constants.ENV_RELEASE_REPO: "acme/wake-fork",
        constants.ENV_RELEASE_VERSION: "v0.2.0",
    })
    assert config.download_url("wake-linux-x64") == (
        "https://mirror.internal/acme/wake-fork/releases/download/v0.2.0/wake-linux-x64"
    )


def test_from_env_ignores_blank_values():
    config = ReleaseConfig.from_env({constants.ENV_RELEASE_VERSION: "   "})
    assert config.version == constants.RELEASE_VERSION


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv(constants.ENV_RELEASE_VERSION, "v9.9.9")
    assert ReleaseConfig.from_env().version == "v9.9.9"


def test_install_target_build(release_config, tmp_path):
    target = InstallTarget.build("wake-linux-x64", tmp_path / "wake", release_config)
    assert target.download_url == "https://releases.example.com/Try-Wind/Wake/releases/download/v0.1.5/wake-linux-x64"
    assert target.destination_path == tmp_path / "wake"
    assert target.expected_min_size == 1024

# --- Paths ---

def test_binary_path_uses_install_dir_override(install_dir):
    assert paths.get_binary_path("linux") == install_dir / "wake"
    assert paths.get_binary_path("win32") == install_dir / "wake.exe"


def test_default_bin_dir_is_inside_package(monkeypatch):
    monkeypatch.delenv(constants.ENV_INSTALL_DIR)
    bin_dir = paths.get_bin_dir()
    assert bin_dir.name == "bin"
    assert bin_dir.parent == paths.get_package_root()
    assert (paths.get_package_root() / "internal" / "paths.py").exists()


def test_is_installed(install_dir):
    assert paths.is_installed("linux") is False
    install_dir.mkdir(parents=True)
    (install_dir / "wake").write_bytes(b"binary")
    assert paths.is_installed("linux") is True
    assert paths.is_installed("win32") is False


def test_app_data_dir_honours_wake_home(tmp_path):
    app_dir = paths.get_app_data_dir()
    assert app_dir == tmp_path / "wake-home"
    assert app_dir.is_dir()
    assert paths.get_log_file() == app_dir / "logs" / constants.LOG_FILE_NAME
    assert isinstance(paths.get_log_file(), Path)
