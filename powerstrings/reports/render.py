"""Rich tables and text output for catalog, pipelines and chain results."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from powerstrings.core.pipeline import Pipeline
from powerstrings.core.value import Value, is_leaf
from powerstrings.pipelines.chain import ChainResult
from powerstrings.transforms.catalog import Catalog


def format_value(value: Value) -> str:
    """Strings print as-is; arrays print as indented JSON."""
    if is_leaf(value):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def catalog_to_json(catalog: Catalog) -> list[dict]:
    """Presentation metadata for every transformer, in display order."""
    return [
        {
            "id": d.id,
            "target": d.target.value,
            "returns": d.returns.value,
            "name": d.name,
            "description": d.description,
            "icon": d.icon,
            "args": [{"name": a.name, "placeholder": a.placeholder} for a in d.args],
        }
        for d in catalog.all()
    ]


def render_catalog_table(catalog: Catalog, console: Console | None = None) -> None:
    """Print a Rich table listing every transformer."""
    if console is None:
        console = Console()

    table = Table(title="Transformers")
    table.add_column("ID", style="bold")
    table.add_column("Shape")
    table.add_column("Arguments")
    table.add_column("Description", style="dim")

    for d in catalog.all():
        table.add_row(
            d.id,
            d.signature(),
            ", ".join(a.name for a in d.args) or "-",
            d.description,
        )

    console.print(table)


def render_pipeline_table(pipeline: Pipeline, console: Console | None = None) -> None:
    """Print the steps of a pipeline with their arguments."""
    if console is None:
        console = Console()

    table = Table(title=f"Pipeline ({len(pipeline)} step(s))")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Transformer", style="bold")
    table.add_column("Shape")
    table.add_column("Arguments")

    for i, inv in enumerate(pipeline):
        args = ", ".join(
            f"{spec.name}={value!r}"
            for spec, value in zip(inv.definition.args, inv.arguments)
        )
        table.add_row(str(i), inv.transformer_id, inv.definition.signature(), args or "-")

    console.print(table)


def render_failures(result: ChainResult, console: Console | None = None) -> None:
    """Print one line per skipped step. Prints nothing for a clean run."""
    if console is None:
        console = Console(stderr=True)

    for step in result.failures:
        console.print(
            f"[bold red]Step {step.index} ({step.transformer_id}) skipped:[/bold red] "
            f"{escape(str(step.error))}",
            highlight=False,
        )
