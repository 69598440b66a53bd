"""
Operator-facing text printed around an installation run: remediation after
a failure and usage hints after a success.
"""
from rich.console import Console
from rich.markup import escape

from wake_installer.internal.config import ReleaseConfig
from wake_installer.kernel.artifacts import InstalledInfo
from wake_installer.kernel.errors import UnsupportedPlatform

err_console = Console(stderr=True, soft_wrap=True)
console = Console(soft_wrap=True)


def format_size(size: int) -> str:
    return f"{size / (1024 * 1024):.1f} MB"


def _build_from_source(config: ReleaseConfig):
    err_console.print(f"   git clone {config.source_clone_url}")
    err_console.print(f"   cd {config.repo.split('/')[-1]} && cargo install --path wake-cli")


def print_unsupported(exc: UnsupportedPlatform, config: ReleaseConfig):
    err_console.print(f"\n[red]Error:[/red] {escape(exc.reason)}")
    err_console.print("\n[bold]Alternative installation methods:[/bold]")
    err_console.print("1. Build from source:")
    _build_from_source(config)
    err_console.print("\n2. Download manually from:")
    err_console.print(f"   {config.release_page_url}")

    if exc.hint_artifact_id and "macos" in exc.hint_artifact_id:
        err_console.print("\nNote: macOS binaries will be available in future releases.")
        err_console.print("   You can help by contributing to the release workflow!")


def print_failure(exc: BaseException, config: ReleaseConfig):
    err_console.print(f"\n[red]Installation failed:[/red] {escape(str(exc))}")
    err_console.print("\n[bold]Troubleshooting:[/bold]")
    err_console.print("1. Check your internet connection")
    err_console.print("2. Try installing from source instead:")
    _build_from_source(config)
    err_console.print(f"3. Download manually from: {config.releases_url}")


def print_success(info: InstalledInfo, windows: bool):
    if not info.downloaded:
        console.print(f"Wake is already installed at {info.path} ({format_size(info.size)})")
        return

    if not windows and info.permissions_applied:
        console.print("Made binary executable")
    console.print("\n[green]Wake has been successfully installed![/green]")
    console.print(f"   Path: {info.path}")
    console.print(f"   Size: {format_size(info.size)}")
    console.print("\n[bold]Usage:[/bold]")
    console.print("   wake --help     Show help")
    console.print("   wake auth       Configure authentication")
    console.print("   wake            Start Wake CLI\n")
