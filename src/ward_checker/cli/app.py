"""Typer CLI root application with serve command."""

import typer

from ward_checker.cli.console import load_settings_or_exit
from ward_checker.core.logging import setup_logging

app = typer.Typer(name="ward-checker", help="By-election ward eligibility checker")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = load_settings_or_exit()
    setup_logging(settings.log_level, log_dir=settings.log_dir, ward_id=settings.target_ward)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),  # noqa: FBT001
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "ward_checker.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from ward_checker.cli.check_cmd import check
    from ward_checker.cli.lookup_cmd import lookup_app
    from ward_checker.cli.probe_cmd import probe
    from ward_checker.cli.ward_cmd import ward

    app.add_typer(lookup_app, name="lookup", help="Postal code and province lookups")
    app.command("check")(check)
    app.command("probe")(probe)
    app.command("ward")(ward)


_register_subcommands()
