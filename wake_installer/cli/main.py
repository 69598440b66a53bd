import typer

from wake_installer.cli.commands import (
    install,
    path,
    platform_info,
    version,
)
from wake_installer.internal import paths
from wake_installer.internal.logging import setup_logging

cli_app = typer.Typer(
    name="wake-installer",
    help="Fetch, verify and install the Wake binary for this platform.",
    no_args_is_help=True,
)


@cli_app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also write logs to stderr."),
    log_level: str = typer.Option("INFO", "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
):
    setup_logging(log_level_name=log_level, log_file_path=paths.get_log_file(), console_output=verbose)


cli_app.command("install")(install.install)
cli_app.command("download")(install.download)
cli_app.command("platform")(platform_info.platform_info)
cli_app.command("path")(path.path)
cli_app.command("version")(version.version)

if __name__ == "__main__":
    cli_app()
