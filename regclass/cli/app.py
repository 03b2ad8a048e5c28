"""
Main CLI application for regclass.

Defines the Typer application structure and command routing. The callback
loads configuration and logging once and shares them through the context.
"""
from typing import Optional

import typer

from regclass.cli.commands.item import item_command
from regclass.cli.commands.reference import reference_command
from regclass.cli.commands.specifier import deps_command, specifier_command
from regclass.core.config_manager import ConfigManager
from regclass.exceptions import ConfigurationError
from regclass.log_setup import configure_logging
from regclass.rich_utils.ui_helpers import get_console


# Initialize Typer app
app = typer.Typer(help="regclass - classify registry references, import specifiers and registry items", no_args_is_help=True)

# Register commands
app.command("specifier", help="Show the dependency each module specifier requires.")(specifier_command)
app.command("deps", help="Print the unique dependencies required by module specifiers.")(deps_command)
app.command("reference", help="Show whether references are URLs, local files or registry names.")(reference_command)
app.command("item", help="Check whether a local registry item can be installed by copying files to their targets.")(item_command)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """regclass - classify registry references, import specifiers and registry items."""
    config_manager = ConfigManager()
    try:
        config = config_manager.discover_and_load_config(config_path)
    except ConfigurationError as e:
        get_console().print(f"❌ {e}", style="red")
        raise typer.Exit(code=1)

    logging_config = config.get("logging") or {}
    configure_logging(
        "DEBUG" if verbose else logging_config.get("level", "WARNING"),
        logging_config.get("file"),
    )

    ctx.obj = {
        "config": config,
        "specifier_classifier": config_manager.build_specifier_classifier(config),
    }
