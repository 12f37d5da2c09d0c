import dataclasses
import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from discoview.codegen.codegen import Codegen
from discoview.codegen.views import OutputUnit
from discoview.config import get_config

console = Console()
app = typer.Typer(
    name='discoview',
    help='Lower Google discovery documents into request message views',
    no_args_is_help=True,
)


def _units_table(source: str, units: list[OutputUnit]) -> Table:
    table = Table(title=source)
    table.add_column('Output path')
    table.add_column('Message')
    table.add_column('Properties', justify='right')
    table.add_column('Imports', justify='right')
    for unit in units:
        table.add_row(
            unit.output_path,
            unit.message_view.type_name,
            str(len(unit.message_view.properties)),
            str(len(unit.imports)),
        )
    return table


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option('--json', help='Print the output units as JSON instead of a table'),
    ] = False,
) -> None:
    """Build the request views of every configured discovery document.

    If no config file is specified, will look for discoview.yaml or
    discoview.yml in the current directory, then for a [tool.discoview]
    table in pyproject.toml.

    Examples:
        discoview generate
        discoview generate --config my-config.yaml
        discoview generate -c config.yaml --json
    """
    try:
        codegen_config = get_config(config)

        batches = []
        for document_config in codegen_config.documents:
            units = Codegen(document_config).generate()
            batches.append((document_config.source, units))

    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        raise typer.Exit(1)

    if as_json:
        payload = [
            {'source': source, 'units': [dataclasses.asdict(unit) for unit in units]}
            for source, units in batches
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    for source, units in batches:
        console.print(_units_table(source, units))
        console.print(
            f'[green]Generated {len(units)} request views for {source}[/green]'
        )


@app.command()
def version() -> None:
    """Show the version of discoview."""
    from discoview import __version__

    console.print(f'discoview version: {__version__}')


if __name__ == '__main__':
    app()
