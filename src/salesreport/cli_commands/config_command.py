"""Configuration inspection command."""

from .deps import cli_module
from .shared import app, console


@app.command()
def config() -> None:
    """Show the effective salesreport configuration."""
    cli = cli_module()
    config_path = cli.get_global_config_path()
    state = "found" if config_path.exists() else "not found"

    console.print(
        f"[bold]Global config:[/bold] {config_path} [dim]({state})[/dim]", soft_wrap=True
    )
    console.print(f"  SALESREPORT_VERBOSE={cli.is_verbose()}")
    console.print(f"  SALESREPORT_LOOKBACK_DAYS={cli.get_lookback_days()}")
