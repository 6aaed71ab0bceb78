"""Command-line client for the vehicle service backend."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vehicle_service.application.app_context import AppContext, create_app_context
from vehicle_service.domain.entities.service_request import ServiceStatus
from vehicle_service.domain.services.form_schemas import LOGIN_FORM, VEHICLE_FORM
from vehicle_service.domain.services.form_state import FormSchema, FormStateController
from vehicle_service.domain.value_objects.theme import ColorScheme
from vehicle_service.infrastructure.api.errors import (
    ApiError,
    AuthenticationFailed,
    NetworkUnavailableError,
)
from vehicle_service.shared.config.settings import get_settings
from vehicle_service.shared.logging import configure_logging
from vehicle_service.shared.utils.formatters import (
    DateFormat,
    format_date,
    format_status_label,
)

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

app = typer.Typer(
    name="vehicle-service",
    help="Vehicle service management client",
    add_completion=False,
)
theme_app = typer.Typer(help="Theme preference commands.")
app.add_typer(theme_app, name="theme")
console = Console()

T = TypeVar("T")

MAX_FORM_ATTEMPTS = 3


@app.callback()
def main(
    ctx: typer.Context,
    system_scheme: ColorScheme = typer.Option(
        ColorScheme.LIGHT, "--system-scheme", help="Color scheme reported by the platform"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Vehicle service client."""
    settings = get_settings()
    if verbose:
        settings.logging.level = "DEBUG"
    else:
        settings.logging.console_enabled = False
    configure_logging(settings.logging)
    ctx.obj = {"system_scheme": system_scheme}


def _run(ctx: typer.Context, action: Callable[[AppContext], Awaitable[T]]) -> T:
    """Build the app context, run ``action`` and map API errors to exit codes."""
    async def runner() -> T:
        app_ctx = create_app_context(system_scheme=ctx.obj["system_scheme"])
        try:
            await app_ctx.start()
            return await action(app_ctx)
        finally:
            await app_ctx.close()

    try:
        return asyncio.run(runner())
    except AuthenticationFailed as e:
        console.print(f"[red]Authentication failed:[/red] {e.message}. Run `vehicle-service login`.")
    except NetworkUnavailableError as e:
        console.print(f"[red]Offline:[/red] {e.message}")
    except ApiError as e:
        console.print(f"[red]Error:[/red] {e.message}")
    raise typer.Exit(code=1)


def _prompt(options: dict[str, Any], default: str = "") -> str:
    hide = options.get("hide", False)
    return typer.prompt(options["label"], default=default, hide_input=hide,
                        show_default=bool(default) and not hide)


def _fill_form(form: FormStateController, schema: FormSchema,
               prompts: dict[str, dict[str, Any]]) -> bool:
    """Prompt for every field, then re-prompt only the fields that fail validation.

    Failing fields are re-prompted up to ``MAX_FORM_ATTEMPTS`` times; the
    last answers are validated too.
    """
    for key, options in prompts.items():
        form.set_field(key, _prompt(options, form.value(key) or ""))

    for attempt in range(MAX_FORM_ATTEMPTS + 1):
        result = form.validate_and_submit(schema.validator, lambda values: None)
        if result.is_valid:
            return True
        if attempt == MAX_FORM_ATTEMPTS:
            break
        for key, message in result.errors.items():
            console.print(f"[yellow]{prompts[key]['label']}:[/yellow] {message}")
            form.set_field(key, _prompt(prompts[key]))
    return False


@app.command()
def version():
    """Show version information."""
    settings = get_settings()
    console.print(Panel(
        Text(f"{settings.app_name} v{settings.app_version}\nVehicle service management client",
             justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command()
def config():
    """Show the active configuration."""
    settings = get_settings()
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("App", f"{settings.app_name} {settings.app_version}")
    table.add_row("API base URL", settings.api.base_url)
    table.add_row("API timeout", f"{settings.api.timeout}s")
    table.add_row("Preference file", str(settings.theme.preference_file))
    table.add_row("Log level", settings.logging.level)
    console.print(table)


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Option(None, "--email", "-e", help="Account email"),
):
    """Sign in and remember the session token."""
    form = FormStateController.from_schema(LOGIN_FORM, {"email": email} if email else None)
    prompts = {
        "email": {"label": "Email"},
        "password": {"label": "Password", "hide": True},
    }
    if not _fill_form(form, LOGIN_FORM, prompts):
        console.print("[red]Too many invalid attempts[/red]")
        raise typer.Exit(code=1)

    async def action(app_ctx: AppContext) -> None:
        session = await app_ctx.auth.login(form.value("email"), form.value("password"))
        name = session.user.display_name if session.user else form.value("email")
        console.print(f"[bold green]Signed in as[/bold green] {name}")
        if not await app_ctx.remember_session():
            console.print("[yellow]Could not save the session; you will need to sign in again[/yellow]")

    _run(ctx, action)


@app.command()
def logout(ctx: typer.Context):
    """Forget the saved session token."""
    async def action(app_ctx: AppContext) -> None:
        await app_ctx.logout()
        console.print("[green]Signed out[/green]")

    _run(ctx, action)


@app.command()
def vehicles(ctx: typer.Context):
    """List your vehicles."""
    async def action(app_ctx: AppContext) -> None:
        items = await app_ctx.vehicles.list_vehicles()
        if not items:
            console.print("[yellow]No vehicles yet[/yellow]")
            return
        table = Table(title="Vehicles")
        for column in ("ID", "Vehicle", "Plate", "VIN", "Mileage"):
            table.add_column(column)
        for vehicle in items:
            table.add_row(
                vehicle.id,
                vehicle.display_name,
                vehicle.license_plate or "-",
                vehicle.vin or "-",
                f"{vehicle.mileage:,} km" if vehicle.mileage is not None else "-",
            )
        console.print(table)

    _run(ctx, action)


VEHICLE_PROMPTS = {
    "make": {"label": "Make"},
    "model": {"label": "Model"},
    "year": {"label": "Year"},
    "color": {"label": "Color"},
    "license_plate": {"label": "License plate"},
    "vin": {"label": "VIN (optional)"},
    "mileage": {"label": "Mileage (optional)"},
}


@app.command("add-vehicle")
def add_vehicle(ctx: typer.Context):
    """Register a vehicle."""
    form = FormStateController.from_schema(VEHICLE_FORM)
    if not _fill_form(form, VEHICLE_FORM, VEHICLE_PROMPTS):
        console.print("[red]Too many invalid attempts[/red]")
        raise typer.Exit(code=1)

    async def action(app_ctx: AppContext) -> None:
        vehicle = await app_ctx.vehicles.create_vehicle(form.values)
        console.print(f"[bold green]Added[/bold green] {vehicle.display_name}")

    _run(ctx, action)


@app.command("edit-vehicle")
def edit_vehicle(ctx: typer.Context, vehicle_id: str = typer.Argument(..., help="Vehicle ID")):
    """Update a vehicle; press Enter to keep a current value."""
    async def action(app_ctx: AppContext) -> None:
        vehicle = await app_ctx.vehicles.get_vehicle(vehicle_id)
        form = app_ctx.create_form(VEHICLE_FORM, vehicle.to_form_data())
        if not _fill_form(form, VEHICLE_FORM, VEHICLE_PROMPTS):
            console.print("[red]Too many invalid attempts[/red]")
            raise typer.Exit(code=1)
        if not form.is_dirty:
            console.print("[yellow]Nothing changed[/yellow]")
            return
        updated = await app_ctx.vehicles.update_vehicle(vehicle_id, form.values)
        console.print(f"[bold green]Updated[/bold green] {updated.display_name}")

    _run(ctx, action)


@app.command()
def requests(
    ctx: typer.Context,
    status: ServiceStatus = typer.Option(None, "--status", "-s", help="Filter by status"),
):
    """List service requests."""
    async def action(app_ctx: AppContext) -> None:
        items = await app_ctx.service_requests.list_requests(status)
        if not items:
            console.print("[yellow]No service requests[/yellow]")
            return
        table = Table(title="Service Requests")
        for column in ("ID", "Service", "Vehicle", "Status", "Created"):
            table.add_column(column)
        for item in items:
            table.add_row(
                item.id,
                item.service_type,
                item.vehicle_id or "-",
                format_status_label(item.status),
                format_date(item.created_at, DateFormat.DISPLAY_DATE),
            )
        console.print(table)

    _run(ctx, action)


@app.command()
def dashboard(ctx: typer.Context):
    """Show dashboard metrics."""
    async def action(app_ctx: AppContext) -> None:
        metrics = await app_ctx.metrics.dashboard()
        table = Table(title="Dashboard")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        for label, value in metrics.as_rows():
            table.add_row(label, str(value))
        console.print(table)

    _run(ctx, action)


def _print_theme(app_ctx: AppContext) -> None:
    theme = app_ctx.current_theme
    source = "system" if app_ctx.theme.follows_system else "saved preference"
    console.print(f"[bold]Theme:[/bold] {theme.scheme.value} ({source})")
    table = Table(show_header=False)
    for token, color in theme.colors.as_dict().items():
        table.add_row(token, color)
    console.print(table)


@theme_app.command("show")
def theme_show(ctx: typer.Context):
    """Show the resolved theme."""
    async def action(app_ctx: AppContext) -> None:
        _print_theme(app_ctx)

    _run(ctx, action)


@theme_app.command("toggle")
def theme_toggle(ctx: typer.Context):
    """Switch between light and dark."""
    async def action(app_ctx: AppContext) -> None:
        await app_ctx.theme.toggle_theme()
        _print_theme(app_ctx)

    _run(ctx, action)


@theme_app.command("set")
def theme_set(ctx: typer.Context, name: ColorScheme = typer.Argument(..., help="light or dark")):
    """Pin the theme."""
    async def action(app_ctx: AppContext) -> None:
        await app_ctx.theme.set_theme(name)
        _print_theme(app_ctx)

    _run(ctx, action)


@theme_app.command("reset")
def theme_reset(ctx: typer.Context):
    """Follow the system color scheme again."""
    async def action(app_ctx: AppContext) -> None:
        await app_ctx.theme.reset_to_system_theme()
        _print_theme(app_ctx)

    _run(ctx, action)


if __name__ == "__main__":
    app()
