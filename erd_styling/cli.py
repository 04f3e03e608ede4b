"""CLI interface."""
from __future__ import annotations

import json
import logging
from typing import List, Optional

import typer

from erd_styling.clustering.cluster_style import style_for
from erd_styling.clustering.namespace_classifier import NamespaceClassifier
from erd_styling.highlight.color_matcher import colors_for, resolve_rules, table_color_for
from erd_styling.utils.config import ConfigurationError, load_settings

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log styling decisions.")):
    """Inspect ER diagram highlighting and clustering decisions."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def colors(
    column: List[str] = typer.Argument(..., help="Column names, in table order."),
    rules: Optional[str] = typer.Option(None, "--rules", "-r", help="Color rules JSON; defaults to ERD_COLORS."),
):
    """Show row colors per column and the resulting table color."""
    try:
        resolve_rules(rules)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--rules / ERD_COLORS") from exc
    result = {
        "columns": {name: colors_for(name, rules).to_dict() for name in column},
        "table_color": table_color_for(column, rules),
    }
    typer.echo(json.dumps(result, indent=2))


@app.command()
def namespace(
    path: str = typer.Argument(..., help="Source file path defining an entity."),
):
    """Classify a source file path and show its cluster style."""
    try:
        classifier = NamespaceClassifier.from_settings(lambda _name: path, load_settings())
        label = classifier.namespace_for(path)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps({"namespace": label, "style": style_for(label)}, indent=2))


if __name__ == "__main__":
    app()
