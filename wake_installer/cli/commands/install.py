import os
from pathlib import Path
from typing import Optional

import typer

from wake_installer.cli import core, guidance
from wake_installer.cli.progress import DownloadProgress
from wake_installer.internal.logging import get_logger
from wake_installer.kernel.errors import InstallError, UnsupportedPlatform

logger = get_logger(__name__)


def _install(force: bool, dest: Optional[Path], os_name: Optional[str], arch: Optional[str]):
    config = core.load_config()
    key = core.current_platform(os_name, arch)
    progress = DownloadProgress()

    typer.echo(f"Installing Wake CLI {config.version} for {key}...\n")
    try:
        info = core.run_install(key, config, destination=dest, force=force, progress=progress)
    except UnsupportedPlatform as exc:
        guidance.print_unsupported(exc, config)
        raise typer.Exit(1)
    except (InstallError, OSError) as exc:
        progress.end_line()
        logger.error("Installation failed", platform=str(key), error=str(exc), error_type=type(exc).__name__)
        guidance.print_failure(exc, config)
        raise typer.Exit(1)

    if info.downloaded:
        progress.finish()
    guidance.print_success(info, windows=os.name == "nt")


def install(
    force: bool = typer.Option(False, "--force", "-f", help="Download even if a valid binary is already installed."),
    dest: Optional[Path] = typer.Option(None, "--dest", help="Install to this path instead of the package bin directory."),
    os_name: Optional[str] = typer.Option(None, "--os", help="Override the detected operating system (linux, win32, darwin)."),
    arch: Optional[str] = typer.Option(None, "--arch", help="Override the detected CPU architecture (x64, arm64)."),
):
    """
    Download and install the Wake binary for this platform.
    """
    _install(force, dest, os_name, arch)


def download(
    dest: Optional[Path] = typer.Option(None, "--dest", help="Install to this path instead of the package bin directory."),
):
    """
    Re-download the Wake binary, replacing any installed copy.
    """
    typer.echo("Downloading Wake binary...\n")
    _install(True, dest, None, None)
