import importlib.metadata

import typer

from wake_installer import __version__
from wake_installer.cli import core
from wake_installer.internal.logging import get_logger

logger = get_logger(__name__)


def version():
    """
    Show the installer version and the Wake release it installs.
    """
    try:
        package_version = importlib.metadata.version("wake-installer")
    except importlib.metadata.PackageNotFoundError:
        # Running from a source checkout
        logger.warning("wake-installer package metadata not found")
        package_version = __version__

    config = core.load_config()
    typer.echo(f"wake-installer version: {package_version}")
    typer.echo(f"Wake release: {config.version} ({config.repo})")
