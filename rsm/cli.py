"""Click-based CLI for RSM - Rime Schema Manager."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from rsm import __version__
from rsm.config import load_document, load_settings, read_config, save_document
from rsm.errors import RsmError
from rsm.operations import add_schemas, list_schemas, remove_schemas, set_default_schema, sync_schemas
from rsm.output import Console, create_console


def _fail(console: Console, error: RsmError) -> NoReturn:
    console.print_error(str(error))
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="rsm")
def cli() -> None:
    """RSM - Rime Schema Manager.

    Manage the input-method schemas enabled in the Rime configuration.
    The first schema in the list is the default one.

    \b
    Config:  /usr/share/rime-data/default.yaml  (override: RSM_CONFIG)
    Schemas: /usr/share/rime-data/*.schema.yaml (override: RSM_DATA_DIR)
    """
    pass


@cli.command()
@click.argument("inputs", metavar="INPUT...", nargs=-1, required=True)
def add(inputs: tuple[str, ...]) -> None:
    """Add the specified schemas to the configuration.

    Schemas are appended to the end of the list; ones already present are skipped.
    """
    console = create_console()
    settings = load_settings()

    try:
        source, document = read_config(settings.config_path)
        result = add_schemas(document, inputs)
        save_document(result.document, settings.config_path, source=source)
    except RsmError as e:
        _fail(console, e)

    console.print_batch_result(result)


@cli.command()
@click.argument("inputs", metavar="INPUT...", nargs=-1, required=True)
def remove(inputs: tuple[str, ...]) -> None:
    """Remove the specified schemas from the configuration."""
    console = create_console()
    settings = load_settings()

    try:
        source, document = read_config(settings.config_path)
        result = remove_schemas(document, inputs)
        save_document(result.document, settings.config_path, source=source)
    except RsmError as e:
        _fail(console, e)

    console.print_batch_result(result)


@cli.command("set-default")
@click.argument("schema", metavar="INPUT")
def set_default(schema: str) -> None:
    """Set the specified schema to be the default schema.

    The schema moves to the top of the list; the others keep their order.
    """
    console = create_console()
    settings = load_settings()

    try:
        source, document = read_config(settings.config_path)
        result = set_default_schema(document, schema)
        if result.found:
            save_document(result.document, settings.config_path, source=source)
    except RsmError as e:
        _fail(console, e)

    console.print_default_result(result)


@cli.command("list")
def list_command() -> None:
    """List the schemas in the configuration, default first."""
    console = create_console()
    settings = load_settings()

    try:
        names = list_schemas(load_document(settings.config_path))
    except RsmError as e:
        _fail(console, e)

    console.print_schema_names(names)


@cli.command()
def sync() -> None:
    """Synchronize the configuration with the installed schemas.

    Replaces the whole list with every *.schema.yaml found in the data directory.
    """
    console = create_console()
    settings = load_settings()

    try:
        source, document = read_config(settings.config_path)
        result = sync_schemas(document, settings.data_dir)
        save_document(result.document, settings.config_path, source=source)
    except RsmError as e:
        _fail(console, e)

    console.print_sync_result(result)


if __name__ == "__main__":
    cli()
