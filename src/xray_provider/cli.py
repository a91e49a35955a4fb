"""CLI for xray-provider."""

import json
import sys
from pathlib import Path
from typing import Any

import click
import structlog

from xray_provider.config.logging import configure_logging
from xray_provider.core.exceptions import XrayProviderError
from xray_provider.core.models.state import Diagnostic, ResourceData
from xray_provider.resources import RESOURCE_TYPES

logger = structlog.get_logger(__name__)

resource_type_argument = click.argument("resource_type", type=click.Choice(sorted(RESOURCE_TYPES)))
config_file_argument = click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


def _load_tree(config_file: Path) -> dict[str, Any]:
    try:
        tree = json.loads(config_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        click.echo(f"Error: {config_file} is not valid JSON: {e}", err=True)
        sys.exit(1)

    if not isinstance(tree, dict):
        click.echo(f"Error: {config_file} must hold a JSON object, got {type(tree).__name__}", err=True)
        sys.exit(1)
    return tree


def _create_provider():
    from xray_provider.config.settings import get_settings
    from xray_provider.provider import XrayProvider

    return XrayProvider(get_settings())


def _report(data: ResourceData, diagnostics: list[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        click.echo(f"{diagnostic.severity.value.capitalize()}: {diagnostic.summary}", err=True)
        if diagnostic.detail:
            click.echo(f"  {diagnostic.detail}", err=True)
    click.echo(json.dumps({"id": data.id, "state": data.state}, indent=2))


def _run(operation) -> None:
    """Run a provider operation, turning provider errors into exit status 1."""
    try:
        operation()
    except XrayProviderError as e:
        logger.debug("Operation failed", error=type(e).__name__, details=e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """xray-provider: manage Xray repository configs and reports."""
    from xray_provider.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs or settings.is_production)


@cli.command()
@resource_type_argument
@config_file_argument
def validate(resource_type: str, config_file: Path) -> None:
    """Validate a configuration file without contacting Xray."""
    tree = _load_tree(config_file)

    def _validate():
        RESOURCE_TYPES[resource_type].validate(tree)
        click.echo(f"{config_file}: valid {resource_type} configuration")

    _run(_validate)


@cli.command()
@resource_type_argument
@config_file_argument
def render(resource_type: str, config_file: Path) -> None:
    """Print the request body a configuration file translates to."""
    tree = _load_tree(config_file)
    resource_class = RESOURCE_TYPES[resource_type]

    def _render():
        payload = resource_class.unpack(resource_class.validate(tree))
        click.echo(json.dumps(payload, indent=2))

    _run(_render)


@cli.command()
@resource_type_argument
@config_file_argument
@click.option("--id", "resource_id", default="", help="Identifier of an existing instance to update")
def apply(resource_type: str, config_file: Path, resource_id: str) -> None:
    """Create or update a resource from a configuration file."""
    tree = _load_tree(config_file)

    def _apply():
        with _create_provider() as provider:
            resource = provider.get_resource(resource_type)
            data = ResourceData(id=resource_id, config=tree)
            diagnostics = resource.update(data) if data.exists else resource.create(data)
            _report(data, diagnostics)

    _run(_apply)


@cli.command()
@resource_type_argument
@click.argument("resource_id")
def read(resource_type: str, resource_id: str) -> None:
    """Read the remote state of a resource."""
    def _read():
        with _create_provider() as provider:
            data = ResourceData(id=resource_id)
            diagnostics = provider.get_resource(resource_type).read(data)
            _report(data, diagnostics)

    _run(_read)


@cli.command()
@resource_type_argument
@click.argument("resource_id")
def delete(resource_type: str, resource_id: str) -> None:
    """Remove a resource from local state. Xray itself is left unchanged."""
    def _delete():
        with _create_provider() as provider:
            data = ResourceData(id=resource_id)
            diagnostics = provider.get_resource(resource_type).delete(data)
            _report(data, diagnostics)

    _run(_delete)


@cli.command("import")
@resource_type_argument
@click.argument("resource_id")
def import_(resource_type: str, resource_id: str) -> None:
    """Adopt an existing remote resource by its identifier."""
    def _import():
        with _create_provider() as provider:
            data = ResourceData()
            diagnostics = provider.get_resource(resource_type).import_state(data, resource_id)
            _report(data, diagnostics)

    _run(_import)


@cli.command()
def types() -> None:
    """List the supported resource types."""
    for type_name in sorted(RESOURCE_TYPES):
        click.echo(type_name)


if __name__ == "__main__":
    cli()
