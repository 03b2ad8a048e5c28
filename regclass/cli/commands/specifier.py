"""
Specifier commands.

Thin wrappers around the specifier classifier configured in the CLI
callback.
"""
from typing import List

import typer
from rich.table import Table

from regclass.classifiers.specifier import SpecifierClassifier
from regclass.rich_utils.ui_helpers import get_console


def _classifier(ctx: typer.Context) -> SpecifierClassifier:
    if ctx.obj and "specifier_classifier" in ctx.obj:
        return ctx.obj["specifier_classifier"]
    return SpecifierClassifier()


def specifier_command(
    ctx: typer.Context,
    specifiers: List[str] = typer.Argument(..., help="Module specifiers as written in import statements"),
):
    """Show the dependency each module specifier requires."""
    classifier = _classifier(ctx)

    table = Table(title="Module specifiers")
    table.add_column("Specifier")
    table.add_column("Dependency")

    for specifier in specifiers:
        dependency = classifier.get_dependency(specifier)
        table.add_row(specifier, dependency if dependency and dependency.strip() else "-")

    get_console().print(table)


def deps_command(
    ctx: typer.Context,
    specifiers: List[str] = typer.Argument(..., help="Module specifiers as written in import statements"),
):
    """Print one dependency per line, suitable for a package manager."""
    for dependency in _classifier(ctx).collect_dependencies(specifiers):
        typer.echo(dependency)
