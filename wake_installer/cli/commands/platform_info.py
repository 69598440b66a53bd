from typing import Optional

import typer

from wake_installer.cli import core
from wake_installer.kernel.platform import Supported, resolve_key


def platform_info(
    os_name: Optional[str] = typer.Option(None, "--os", help="Operating system to resolve instead of the detected one."),
    arch: Optional[str] = typer.Option(None, "--arch", help="CPU architecture to resolve instead of the detected one."),
):
    """
    Show the detected platform and the release artifact it resolves to.
    """
    config = core.load_config()
    key = core.current_platform(os_name, arch)
    resolution = resolve_key(key)

    typer.echo(f"Platform: {key}")
    if isinstance(resolution, Supported):
        typer.echo(f"Artifact: {resolution.artifact_id}")
        typer.echo(f"URL: {config.download_url(resolution.artifact_id)}")
        return

    typer.echo(f"Unsupported: {resolution.reason}")
    raise typer.Exit(1)
