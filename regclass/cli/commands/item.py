"""
Item command implementation.

Loads a local registry item and reports whether it takes the universal
install path (copy every file to its target).
"""
import typer
from rich.markup import escape
from rich.table import Table

from regclass.classifiers.reference import is_local_file
from regclass.classifiers.registry_item import is_universal_registry_item
from regclass.exceptions import RegistryItemLoadError
from regclass.loader import load_registry_item
from regclass.rich_utils.ui_helpers import get_console


def item_command(
    path: str = typer.Argument(..., help="Path to a local registry item .json file"),
):
    """Check whether a local registry item is universal."""
    console = get_console()

    if not is_local_file(path):
        console.print(f"❌ Not a local registry item file: {path}", style="red")
        raise typer.Exit(code=1)

    try:
        item = load_registry_item(path)
    except RegistryItemLoadError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(code=1)

    table = Table(title=escape(str(item.name or path)))
    table.add_column("Path")
    table.add_column("Type")
    table.add_column("Target")
    for registry_file in item.files:
        table.add_row(
            escape(str(registry_file.path)),
            escape(str(registry_file.type)),
            escape(str(registry_file.target)) if registry_file.target not in (None, "") else "-",
        )
    console.print(table)

    if is_universal_registry_item(item):
        console.print("✅ Universal: every file is copied directly to its target", style="green")
    else:
        console.print("ℹ️ Not universal: install through the per-type pipeline", style="yellow")
