import os
import sys

from rich.console import Console

def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )

def get_console() -> Console:
    """Plain console for CI and piped output, full Rich console otherwise."""
    if is_ci_environment():
        return Console(force_terminal=False, no_color=True, highlight=False)
    return Console()
