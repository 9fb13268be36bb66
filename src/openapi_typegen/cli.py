"""CLI entry point for openapi-typegen."""

from pathlib import Path

import click
from pydantic import ValidationError

from openapi_typegen.config import load_options, merge_options
from openapi_typegen.errors import TypegenError
from openapi_typegen.generator.declarations import emit_declarations
from openapi_typegen.parser.extractor import extract_schemas
from openapi_typegen.parser.loader import is_openapi, load_document


def _build_options(config_path: Path | None, indent: int | None):
    """Defaults < config file < command-line flags."""
    overrides = load_options(config_path) if config_path else {}
    if indent is not None:
        overrides["indent"] = indent
    try:
        return merge_options(overrides)
    except ValidationError as e:
        raise click.UsageError(f"Invalid options: {e}") from e


@click.group()
def main():
    """OpenAPI Typegen — generate TypeScript request and schema types from API docs."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path for the generated .ts file.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the declarations instead of writing a file.")
@click.option("--indent", default=None, type=int, help="Spaces per nesting level (default 2).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML file with generation options.")
def gen(doc_path: Path, output: Path | None, to_stdout: bool, indent: int | None, config_path: Path | None):
    """Generate TypeScript declarations from an OpenAPI document."""
    if output is None and not to_stdout:
        raise click.UsageError("Either -o/--output or --stdout is required.")

    try:
        options = _build_options(config_path, indent)

        if not to_stdout:
            click.echo(f"Parsing {doc_path}...")
        doc = load_document(doc_path)
        if not is_openapi(doc):
            click.echo(f"Warning: {doc_path} has no 'openapi' or 'swagger' key.", err=True)

        extracted = extract_schemas(doc)
        if not to_stdout:
            click.echo(
                f"Found {len(extracted.operations)} operations and "
                f"{len(extracted.components)} component schemas."
            )
        result = emit_declarations(extracted, options)
    except TypegenError as e:
        raise click.ClickException(str(e)) from e

    if to_stdout:
        click.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"Types saved to {output}")
