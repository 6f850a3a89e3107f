"""Mini README: Entry point CLI for launching the Maintenance Maker web form.

This script exposes a Typer CLI that starts the FastAPI application with a
configurable host, port and production flag. Defaults come from
``MAINTENANCE_MAKER_*`` environment variables when they are set.
"""

from __future__ import annotations

import typer
import uvicorn

from maintenance_maker.configuration import get_settings
from maintenance_maker.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Monthly Maintenance Maker web form.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
    log_level: str = typer.Option(None, help="Logging level, e.g. DEBUG or INFO."),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(log_level or settings.log_level)

    # Browsers cannot navigate to the wildcard bind address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Maintenance Maker on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "maintenance_maker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
