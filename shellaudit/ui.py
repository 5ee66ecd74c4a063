"""Central UI handler for shellaudit.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from shellaudit.ui import console, print_error

    console.print("[success]All scripts parsed[/success]")
    print_error("Script not found")
"""

import sys

from rich.console import Console
from rich.theme import Theme

SHELLAUDIT_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=SHELLAUDIT_THEME,
    force_terminal=sys.stdout.isatty()
)

# Diagnostics go to stderr so JSON on stdout stays clean
err_console = Console(
    theme=SHELLAUDIT_THEME,
    stderr=True,
)



def print_error(msg: str) -> None:
    """Print an error message in red on stderr."""
    err_console.print(f"[error]ERROR:[/error] {msg}", highlight=False)


def print_warning(msg: str) -> None:
    """Print a warning message in yellow on stderr."""
    err_console.print(f"[warning]WARNING:[/warning] {msg}", highlight=False)
