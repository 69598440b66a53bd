import os
from pathlib import Path

from wake_installer.internal import constants


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - $WAKE_HOME when set
    - Windows: %APPDATA%\\wake
    - Linux/macOS: ~/.wake
    """
    override = os.environ.get(constants.ENV_HOME, "").strip()
    if override:
        path = Path(override)
    elif os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        path = Path(base) / "wake"
    else:  # Linux / macOS
        path = Path.home() / ".wake"

    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_file() -> Path:
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / constants.LOG_FILE_NAME


# ---------------------------------------------------------------------
# Installed binary
# ---------------------------------------------------------------------

def get_package_root() -> Path:
    return Path(__file__).resolve().parent.parent


def get_bin_dir() -> Path:
    """
    Directory the executable is installed into. Not created here; the
    installer prepares it right before writing.
    """
    override = os.environ.get(constants.ENV_INSTALL_DIR, "").strip()
    if override:
        return Path(override)
    return get_package_root() / "bin"


def get_binary_path(os_name: str, executable_name: str = constants.EXECUTABLE_NAME) -> Path:
    """
    Full path to the wake executable for the given platform identifier.
    """
    file_name = f"{executable_name}.exe" if os_name == "win32" else executable_name
    return get_bin_dir() / file_name


def is_installed(os_name: str, executable_name: str = constants.EXECUTABLE_NAME) -> bool:
    try:
        return get_binary_path(os_name, executable_name).is_file()
    except OSError:
        return False
