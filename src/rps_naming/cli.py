"""Main CLI entry point for rps-naming."""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer
import yaml
from dotenv import load_dotenv
from rich.table import Table

from rps_naming.config.messages import ERROR_MESSAGES, HELP_TEXT, PROJECT_TAGLINE, PROJECT_URL
from rps_naming.config.settings import NamingSettings
from rps_naming.constants import JSON_INDENT, VERSION
from rps_naming.exceptions import ConfigurationError
from rps_naming.models.config import NamingConfig
from rps_naming.models.enums import AliasPreset
from rps_naming.naming import NameConverter
from rps_naming.utils import configure_logging, console, print_error, print_panel

logger = logging.getLogger(__name__)

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ".env", verbose=False)

app = typer.Typer(
    name="rps-name",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


@dataclass
class CliState:
    """Converter and config shared by every command of one invocation."""

    config: NamingConfig
    converter: NameConverter
    settings: NamingSettings


NAME_ARGUMENT = typer.Argument(..., help="Project name, e.g. dm-serializer_json")
JSON_OPTION = typer.Option(False, "--json", "-j", help="Print the result as JSON")


def _state(ctx: typer.Context) -> CliState:
    state: CliState = ctx.obj
    return state


def _load_config(
    config_path: Path | None, preset: str | None, settings: NamingSettings
) -> NamingConfig:
    """Resolve the naming config from --config, the settings default and --preset."""
    if config_path is not None and not config_path.exists():
        raise ConfigurationError("Config file not found", config_file=config_path)

    path = config_path or Path.cwd() / settings.config_file
    config = NamingConfig.load(path)

    if preset is not None:
        try:
            config = config.model_copy(update={"preset": AliasPreset(preset.lower())})
        except ValueError as e:
            raise ConfigurationError(
                ERROR_MESSAGES["unknown_preset"].format(
                    preset=preset, available=", ".join(AliasPreset.values())
                ),
                key="preset",
            ) from e
    return config


def _emit_list(values: list[str], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(values, indent=JSON_INDENT))
    else:
        for value in values:
            typer.echo(value)


@app.command("namespace")
def namespace(ctx: typer.Context, name: str = NAME_ARGUMENT) -> None:
    """Show the full module namespace of a project.

    Example: dm-serializer_json -> DataMapper::SerializerJson
    """
    typer.echo(_state(ctx).converter.namespace_of(name))


@app.command("modules")
def modules(ctx: typer.Context, name: str = NAME_ARGUMENT, as_json: bool = JSON_OPTION) -> None:
    """Show the module name of each namespace level."""
    _emit_list(_state(ctx).converter.modules_of(name), as_json)


@app.command("dirs")
def dirs(ctx: typer.Context, name: str = NAME_ARGUMENT, as_json: bool = JSON_OPTION) -> None:
    """Show the namespace directory of each namespace level."""
    _emit_list(_state(ctx).converter.namespace_dirs_of(name), as_json)


@app.command("path")
def path(ctx: typer.Context, name: str = NAME_ARGUMENT) -> None:
    """Show the namespace directory path within lib/."""
    typer.echo(_state(ctx).converter.namespace_path_of(name))


@app.command("underscore")
def underscore(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Camel-case name, e.g. FooBar"),
) -> None:
    """Convert a camel-case name to an underscored file name."""
    typer.echo(_state(ctx).converter.underscore(name))


@app.command("layout")
def layout(
    ctx: typer.Context,
    name: str = NAME_ARGUMENT,
    extension: str | None = typer.Option(
        None,
        "--extension",
        "-e",
        help="Extension of the namespace source file (default from RPS_NAMING_SOURCE_EXTENSION)",
    ),
    as_json: bool = JSON_OPTION,
) -> None:
    """Show the conventional directory layout of a project.

    Nothing is created on disk.
    """
    state = _state(ctx)
    project_layout = state.converter.project_layout(
        name, extension or state.settings.source_extension
    )

    if as_json:
        typer.echo(json.dumps(project_layout, indent=JSON_INDENT))
        return

    table = Table(title=f"Layout of {name}")
    table.add_column("Role", style="cyan")
    table.add_column("Path", style="green")
    for role, location in project_layout.items():
        table.add_row(role, location)
    console.print(table)


@app.command("config")
def show_config(ctx: typer.Context) -> None:
    """Show the effective naming config as YAML."""
    typer.echo(yaml.safe_dump(_state(ctx).config.to_dict(), sort_keys=False).rstrip())


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]rps-naming[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}\n\n"
        f"[dim]{PROJECT_URL}[/dim]",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Naming config YAML (default: .rps-naming.yaml in the current directory)",
    ),
    preset: str | None = typer.Option(
        None,
        "--preset",
        "-p",
        help=f"Lookup table preset: {', '.join(AliasPreset.values())}",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
) -> None:
    """rps-name - guess namespaces and directories from project names.

    Project names follow the Ruby Packaging Standard: hyphens separate
    namespace levels, underscores separate words.
    """
    settings = NamingSettings()
    configure_logging("DEBUG" if debug else settings.log_level)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()

    try:
        config = _load_config(config_path, preset, settings)
    except ConfigurationError as e:
        print_error(ERROR_MESSAGES["config_error"].format(error=str(e)))
        raise typer.Exit(code=1) from e

    logger.debug("Using preset %s", config.preset.value)
    ctx.obj = CliState(
        config=config,
        converter=NameConverter.from_config(config),
        settings=settings,
    )


def cli_main() -> None:
    """Entry point for the ``rps-name`` command.

    Configuration errors are reported by the app callback; Ctrl-C exits with 130.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
