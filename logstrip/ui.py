"""Central UI handler for log-strip.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every module.

Usage:
    from logstrip.ui import console, print_warning

    console.print("[success]No debug statements found[/success]")
"""

import sys

from rich.console import Console
from rich.theme import Theme

LOGSTRIP_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "kind": "yellow",
    "kind.console": "bold yellow",
    "kind.debugger": "bold red",
    "kind.alert": "bold magenta",
    "cmd": "bold magenta",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=LOGSTRIP_THEME,
    force_terminal=sys.stdout.isatty(),
    highlight=False,
)


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {msg}")
