import pytest

from wake_installer.internal import constants
from wake_installer.internal.config import ReleaseConfig


# --- Environment Isolation ---

@pytest.fixture(autouse=True)
def isolated_wake_env(monkeypatch, tmp_path):
    """
    Keep every test away from the real home directory and package bin dir,
    and drop any release overrides from the developer's shell.
    """
    monkeypatch.setenv(constants.ENV_HOME, str(tmp_path / "wake-home"))
    monkeypatch.setenv(constants.ENV_INSTALL_DIR, str(tmp_path / "bin"))
    for name in (
        constants.ENV_RELEASE_HOST,
        constants.ENV_RELEASE_REPO,
        constants.ENV_RELEASE_VERSION,
        constants.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(name, raising=False)
    yield


# --- Release Fixtures ---

@pytest.fixture
def release_config():
    """A release config pointing at a fake host, with a small size threshold."""
    return ReleaseConfig(
        host="releases.example.com",
        min_artifact_size=1024,
        chunk_size=512,
    )


@pytest.fixture
def payload():
    """Fake executable bytes, comfortably above the test threshold."""
    return b"\x7fELF" + bytes(range(256)) * 16


@pytest.fixture
def large_payload():
    """Fake executable bytes above the real 1 MB threshold."""
    return b"\x7fELF" + b"\x90" * (constants.MIN_ARTIFACT_SIZE + 200_000)


@pytest.fixture
def install_dir(tmp_path):
    return tmp_path / "bin"
