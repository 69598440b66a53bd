from wake_installer.cli.main import cli_app

if __name__ == "__main__":
    cli_app(prog_name="wake-installer")
