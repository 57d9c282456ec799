"""CLI entry point using Typer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from powerstrings.core.errors import DecodeError
from powerstrings.core.pipeline import Pipeline
from powerstrings.core.serialize import decode, import_pipeline
from powerstrings.transforms.catalog import CATALOG

app = typer.Typer(name="powerstrings", help="String and array transformation pipelines")

PIPELINE_ENVVAR = "POWERSTRINGS_PIPELINE"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every pipeline step"),
) -> None:
    """Run transformation pipelines over text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_pipeline(token: Optional[str], token_file: Optional[Path]) -> Pipeline:
    if token is not None and token_file is not None:
        typer.echo("Use either --pipeline or --pipeline-file, not both", err=True)
        raise typer.Exit(code=2)
    try:
        if token_file is not None:
            return import_pipeline(token_file)
        if token is not None:
            return decode(token)
    except DecodeError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)
    typer.echo(f"No pipeline given (use --pipeline, --pipeline-file or ${PIPELINE_ENVVAR})", err=True)
    raise typer.Exit(code=2)


def _read_input(input_path: Optional[Path]) -> str:
    if input_path is None or str(input_path) == "-":
        text = sys.stdin.read()
    else:
        text = input_path.read_text(encoding="utf-8")
    # Drop the single line break editors and shells append
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


@app.command("catalog")
def catalog(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the available transformers."""
    from powerstrings.reports.render import catalog_to_json, render_catalog_table

    if json_output:
        typer.echo(json.dumps(catalog_to_json(CATALOG), indent=2))
    else:
        render_catalog_table(CATALOG)


@app.command("show")
def show(
    token: str = typer.Argument(..., help="Pipeline token"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Decode a pipeline token and list its steps."""
    from powerstrings.reports.render import render_pipeline_table

    pipeline = _load_pipeline(token, None)

    if json_output:
        steps = [{"id": inv.transformer_id, "arguments": list(inv.arguments)} for inv in pipeline]
        typer.echo(json.dumps(steps, indent=2, ensure_ascii=False))
    else:
        render_pipeline_table(pipeline)


@app.command("run")
def run(
    input_path: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, allow_dash=True,
        help="Input text file (stdin when omitted or '-')",
    ),
    token: Optional[str] = typer.Option(
        None, "--pipeline", "-p", envvar=PIPELINE_ENVVAR, help="Pipeline token",
    ),
    token_file: Optional[Path] = typer.Option(
        None, "--pipeline-file", exists=True, dir_okay=False,
        help="File holding a pipeline token",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output the result as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any step failed"),
) -> None:
    """Run a pipeline over the input text and print the result."""
    from powerstrings.pipelines.chain import run_chain
    from powerstrings.reports.render import format_value, render_failures

    pipeline = _load_pipeline(token, token_file)
    result = run_chain(_read_input(input_path), pipeline)

    if json_output:
        typer.echo(json.dumps(result.value, indent=2, ensure_ascii=False))
    else:
        typer.echo(format_value(result.value))

    render_failures(result)
    if strict and not result.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
