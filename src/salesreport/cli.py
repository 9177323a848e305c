"""salesreport CLI - fluent sales report builder."""

from datetime import date

from salesreport.cli_commands import build_command, config_command, demo_command  # noqa: F401
from salesreport.cli_commands.shared import app, console
from salesreport.config import get_global_config_path, get_lookback_days, is_verbose

__all__ = [
    "app",
    "console",
    "get_global_config_path",
    "get_lookback_days",
    "is_verbose",
    "main",
    "today",
]


def today() -> date:
    """Return the current local date."""
    return date.today()


@app.command()
def version() -> None:
    """Show the installed salesreport version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("salesreport")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"salesreport {current_version}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
