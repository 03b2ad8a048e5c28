"""Reference command implementation."""
from typing import List

import typer
from rich.table import Table

from regclass.classifiers.reference import ReferenceKind, classify_reference
from regclass.rich_utils.ui_helpers import get_console

KIND_LABELS = {
    ReferenceKind.URL: "url",
    ReferenceKind.LOCAL_FILE: "local file",
    ReferenceKind.REGISTRY_NAME: "registry name",
}


def reference_command(
    references: List[str] = typer.Argument(..., help="URLs, local .json paths or registry item names"),
):
    """Show whether references are URLs, local files or registry names."""
    table = Table(title="References")
    table.add_column("Reference")
    table.add_column("Kind")

    for reference in references:
        table.add_row(reference, KIND_LABELS[classify_reference(reference)])

    get_console().print(table)
