"""file-loader CLI - resolve file names from the command line."""

import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.table import Table

from .console import console
from .errors import ResolutionError
from .logging_setup import init_json_logging
from .models import LoadedFile
from .resolver import Resolver
from .settings import LoaderSettings
from .settings import SettingsManager
from .ui import display_resolution_error


async def _load_one(settings: LoaderSettings, file_name: str, root_file: str) -> LoadedFile:
    async with Resolver.from_settings(settings) as resolver:
        return await resolver.load_file(file_name, root_file)


@click.group()
@click.version_option(package_name="file-loader")
@click.option("--log-file", envvar="FILE_LOADER_LOG_PATH", default=None, help="JSONL log file path")
@click.option("--log-level", envvar="FILE_LOADER_LOG_LEVEL", default=None, help="Log level (DEBUG, INFO, ...)")
@click.pass_context
def cli(ctx, log_file, log_level):
    """file-loader - resolve file names from the web, a root file's directory, or the project."""
    ctx.ensure_object(dict)
    ctx.obj["log_file"] = log_file
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("name")
@click.option(
    "--root",
    "-r",
    "root_file",
    default="./",
    help="File that references NAME; its directory is searched first",
)
@click.option("--project", "-p", "project_root", type=click.Path(file_okay=False), help="Project root directory")
@click.option("--show-path", is_flag=True, help="Print the resolved path and source instead of the content")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def load(ctx, name, root_file, project_root, show_path, verbose):
    """Resolve NAME and print its content."""
    init_json_logging(ctx.obj.get("log_file"), "DEBUG" if verbose else ctx.obj.get("log_level"))

    try:
        settings = SettingsManager().get_loader_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {e}")
        sys.exit(1)

    if project_root:
        settings = settings.model_copy(update={"project_root": project_root})

    try:
        loaded = asyncio.run(_load_one(settings, name, root_file))
    except ResolutionError as e:
        display_resolution_error(console, e, verbose=verbose)
        sys.exit(1)

    if show_path:
        console.print(f"[green]✓[/green] {loaded.full_path} [dim]({loaded.source})[/dim]")
    else:
        click.echo(loaded.text, nl=not loaded.text.endswith("\n"))


@cli.group(invoke_without_command=True)
@click.pass_context
def config(ctx):
    """Show or change loader settings."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(config_show)


@config.command("show")
def config_show():
    """Show the effective loader settings."""
    try:
        settings = SettingsManager().get_loader_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid settings:[/red] {e}")
        sys.exit(1)

    table = Table(title="Loader Settings", show_header=True, header_style="bold cyan")
    table.add_column("Option", style="green")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--local", "scope_flag", flag_value="local", help="Set locally (just you)")
@click.option("--project", "scope_flag", flag_value="project", help="Set for project (team)")
@click.option("--global", "scope_flag", flag_value="user", help="Set globally (all projects)")
def config_set(key, value, scope_flag):
    """Set loader option KEY to VALUE."""
    scope = scope_flag or "local"
    manager = SettingsManager()

    try:
        manager.set_loader_value(key, value, scope=scope)
    except KeyError:
        valid = ", ".join(LoaderSettings.model_fields)
        console.print(f"[red]Unknown option:[/red] {key} [dim](valid: {valid})[/dim]")
        sys.exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid value for {key}:[/red] {e.errors()[0]['msg']}")
        sys.exit(1)

    console.print(f"[green]✓ Set {key} = {value} ({scope})[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
