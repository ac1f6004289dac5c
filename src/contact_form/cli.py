"""Command-line interface for running and inspecting the contact form service."""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.contact_form.core.errors import StorageError
from src.contact_form.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="contact-form",
    help="Contact form service - run the server and manage stored contacts",
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind; defaults to app.host"),
    port: int | None = typer.Option(None, help="Port to bind; defaults to app.port"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Serving contact form on http://{bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.contact_form.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=log_level,
    )


@app.command("init-db")
def init_db() -> None:
    """Create the contacts table if it does not exist."""
    from src.contact_form.runtime.init_db import init_db as run_init_db

    run_init_db()
    console.print("[green]Database tables created[/green]")


@app.command("list-contacts")
def list_contacts() -> None:
    """Print every stored contact."""
    from src.contact_form.core.services import ContactStore, DbSessionService

    database_service = DbSessionService()
    try:
        contacts = asyncio.run(ContactStore(database_service).find_all())
    except StorageError as e:
        console.print(f"[red]Failed to load contacts: {e}[/red]")
        raise typer.Exit(1) from e
    finally:
        database_service.dispose()

    table = Table(title=f"Contacts ({len(contacts)})")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Phone")
    table.add_column("Created", style="dim")
    for contact in contacts:
        table.add_row(contact.name, contact.email, contact.phone, contact.created_at.isoformat())
    console.print(table)


if __name__ == "__main__":
    app()
