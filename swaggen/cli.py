"""CLI entry point for swaggen."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from swaggen.codegen import DEFAULT_OUTPUT_DIR, write_artifacts
from swaggen.loader import DocumentError, load_document
from swaggen.models import Document
from swaggen.naming import build_function_name
from swaggen.targets import Target, get_emitter


def _load(spec_path: Path) -> Document:
    try:
        return load_document(spec_path)
    except DocumentError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """swaggen: generate typed API clients from Swagger documents."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=DEFAULT_OUTPUT_DIR, envvar="SWAGGEN_OUTPUT", show_default=True, type=click.Path(file_okay=False, path_type=Path), help="Output directory for generated files.")
@click.option("--target", default=Target.TYPESCRIPT.value, envvar="SWAGGEN_TARGET", show_default=True, type=click.Choice([t.value for t in Target]), help="Output language.")
@click.option("--author", default=None, envvar="SWAGGEN_AUTHOR", help="Author named in file headers (defaults to info.contact.name).")
def generate(spec_path: Path, output: Path, target: str, author: str | None):
    """Generate type declarations and a service module."""
    click.echo(f"Parsing {spec_path}...")
    document = _load(spec_path)
    click.echo(f"Found {len(document.definitions)} definitions and {len(document.paths)} paths.")

    emitter = get_emitter(target, author=author)
    artifacts = emitter.emit(document)

    for file_path in write_artifacts(artifacts, output):
        click.echo(f"  Created {file_path}")

    click.echo(f"Generated {len(artifacts)} files in {output}")


@main.command("list-operations")
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_operations(spec_path: Path):
    """Print the function name derived for every operation."""
    document = _load(spec_path)
    for path, path_item in document.paths.items():
        for method, operation in path_item.operations():
            name = build_function_name(method, path, operation.operation_id)
            click.echo(f"{method.upper():6} {path} -> {name}")
