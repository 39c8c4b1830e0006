"""
Aplicación CLI (trackerprovider).

Solo compone comandos y formatea salida; la lógica vive en core, providers y host.
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from trackerprovider import __version__
from trackerprovider.core.errors import ConfigError, TrackerProviderError
from trackerprovider.core.runtime.resolver import state_file
from trackerprovider.host.engine import ProjectEngine
from trackerprovider.host.loader import DEFAULT_CONFIG_FILE, DeclarativeLoader
from trackerprovider.host.store import StateStore
from trackerprovider.providers.client import DEFAULT_API_URL, DEFAULT_TIMEOUT, TrackerClient
from trackerprovider.providers.project import ProjectResource

# Cargar .env del directorio de trabajo
_env = Path.cwd() / ".env"
if _env.exists():
    load_dotenv(_env)

app = typer.Typer(
    name="trackerprovider",
    help="Gestión declarativa de proyectos Pivotal Tracker",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

ConfigOption = typer.Option(Path(DEFAULT_CONFIG_FILE), "--config", "-c", help="Archivo YAML con los proyectos deseados")
StateOption = typer.Option(None, "--state", "-s", help="Archivo de estado (por defecto TRACKER_STATE_ROOT/state.yaml)")
MockOption = typer.Option(False, "--mock", help="Simula la API en memoria (sin llamadas reales)")


def build_client(mock: bool = False) -> TrackerClient:
    """Cliente desde variables de entorno (TRACKER_API_TOKEN, TRACKER_API_URL, TRACKER_TIMEOUT)."""
    token = os.environ.get("TRACKER_API_TOKEN", "").strip()
    if not token and not mock:
        raise ConfigError("Falta TRACKER_API_TOKEN (variable de entorno o .env)")
    url = os.environ.get("TRACKER_API_URL", "").strip() or DEFAULT_API_URL
    timeout_raw = os.environ.get("TRACKER_TIMEOUT", "").strip()
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
    except ValueError:
        raise ConfigError(f"TRACKER_TIMEOUT inválido: {timeout_raw!r}")
    return TrackerClient(token=token, url=url, console=console, mock=mock, timeout=timeout)


def build_engine(state: Optional[Path], mock: bool) -> ProjectEngine:
    store = StateStore(state or state_file())
    return ProjectEngine(ProjectResource(build_client(mock)), store)


def _fail(error: Exception) -> None:
    console.print(f"[red]❌ {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


@app.command()
def plan(config: Path = ConfigOption, state: Optional[Path] = StateOption, mock: bool = MockOption):
    """Muestra qué cambios se aplicarían"""
    try:
        desired = DeclarativeLoader(config).load_all()
        result = build_engine(state, mock).plan(desired)
    except TrackerProviderError as e:
        _fail(e)

    console.print(Panel.fit(f"[bold cyan]Plan[/bold cyan] - {result.summary}", border_style="cyan"))
    for action in result.actions:
        console.print(f"  [yellow]•[/yellow] {escape(action)}")


@app.command()
def apply(config: Path = ConfigOption, state: Optional[Path] = StateOption, mock: bool = MockOption):
    """Reconcilia los proyectos declarados con Tracker"""
    try:
        desired = DeclarativeLoader(config).load_all()
        done = build_engine(state, mock).apply(desired)
    except TrackerProviderError as e:
        _fail(e)

    if not done:
        console.print("[green]✔ Sin cambios[/green]")
    for action in done:
        console.print(f"[green]✔ {action}[/green]")


@app.command()
def refresh(state: Optional[Path] = StateOption, mock: bool = MockOption):
    """Refresca el estado desde Tracker"""
    try:
        gone = build_engine(state, mock).refresh()
    except TrackerProviderError as e:
        _fail(e)

    for name in gone:
        console.print(f"[yellow]⚠️ {name} ya no existe en Tracker; eliminado del estado[/yellow]")
    console.print("[green]✔ Estado refrescado[/green]")


@app.command("import")
def import_project(
    name: str = typer.Argument(..., help="Nombre del recurso en projects.yaml"),
    project_id: str = typer.Argument(..., help="ID del proyecto en Tracker"),
    state: Optional[Path] = StateOption,
    mock: bool = MockOption,
):
    """Importa un proyecto existente por su ID"""
    try:
        record = build_engine(state, mock).import_project(name, project_id)
    except TrackerProviderError as e:
        _fail(e)

    console.print(f"[green]✔ Importado {name} (id={record.id})[/green]")


@app.command()
def destroy(
    name: str = typer.Argument(..., help="Nombre del recurso a eliminar"),
    state: Optional[Path] = StateOption,
    mock: bool = MockOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="No pedir confirmación"),
):
    """Elimina un proyecto de Tracker y del estado"""
    if not yes and not typer.confirm(f"¿Eliminar el proyecto '{name}' en Tracker?"):
        raise typer.Abort()
    try:
        build_engine(state, mock).destroy(name)
    except TrackerProviderError as e:
        _fail(e)

    console.print(f"[green]✔ Eliminado {name}[/green]")


@app.command()
def show(state: Optional[Path] = StateOption):
    """Muestra los registros guardados en el estado"""
    try:
        store = StateStore(state or state_file())
        names = store.names()
    except TrackerProviderError as e:
        _fail(e)

    if not names:
        console.print("[dim]Estado vacío[/dim]")
        return

    table = Table(title="Proyectos en estado", show_header=True, header_style="bold cyan")
    table.add_column("Recurso", style="cyan")
    table.add_column("ID", style="green")
    table.add_column("Nombre", style="yellow")
    table.add_column("Point scale", style="dim")
    for name in names:
        record = store.read_record(name)
        table.add_row(
            name,
            record.id or "-",
            str(record.attributes.get("name") or ""),
            str(record.attributes.get("point_scale") or ""),
        )
    console.print(table)


@app.command()
def version():
    """Muestra la versión"""
    console.print(Panel.fit(
        "[bold cyan]trackerprovider[/bold cyan]\n"
        "[dim]Recurso declarativo de proyectos Pivotal Tracker[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}\n"
        f"[bold]Estado:[/bold] {state_file()}",
        border_style="cyan"
    ))


def main():
    app()
