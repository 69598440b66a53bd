import typer

from wake_installer.cli import core
from wake_installer.internal import paths


def path():
    """
    Show where the Wake binary lives and whether it is installed.
    """
    config = core.load_config()
    key = core.current_platform()
    binary_path = paths.get_binary_path(key.os, config.executable_name)

    typer.echo(str(binary_path))
    if paths.is_installed(key.os, config.executable_name):
        typer.echo(f"Installed: {typer.style('yes', fg=typer.colors.GREEN)}")
    else:
        typer.echo(f"Installed: {typer.style('no', fg=typer.colors.YELLOW)} (run `wake-installer install`)")
        raise typer.Exit(1)
