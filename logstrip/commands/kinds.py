"""List the debug statement kinds log-strip detects."""

import json

import click
from rich.table import Table

from logstrip.core import StatementKind, build_patterns
from logstrip.core.kinds import unknown_keep_names
from logstrip.ui import console, print_warning
from logstrip.utils.logging import logger


@click.command("kinds")
@click.option(
    "-k",
    "--keep",
    multiple=True,
    help="Console methods to keep (comma-separated), shown as KEEP",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def kinds(keep, as_json):
    """List every detectable statement kind and whether --keep preserves it.

    debugger and alert can never be kept.

    \b
    EXAMPLES:
      log-strip kinds
      log-strip kinds --keep error,warn
      log-strip kinds --json"""
    keep_names = [item.strip() for value in keep for item in value.split(",") if item.strip()]
    unknown = unknown_keep_names(keep_names)
    if unknown:
        message = f"Ignoring unknown console methods in --keep: {', '.join(unknown)}"
        if as_json:
            logger.warning(message)
        else:
            print_warning(message)

    patterns = build_patterns(keep_names)
    active = set(patterns.kinds())

    rows = [
        {
            "kind": kind.value,
            "keepable": kind.is_console,
            "status": "detect" if kind in active else "keep",
        }
        for kind in StatementKind
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Kind", style="kind")
    table.add_column("Keepable")
    table.add_column("Status")
    for row in rows:
        status = "[warning]DETECT[/warning]" if row["status"] == "detect" else "[success]KEEP[/success]"
        table.add_row(row["kind"], "yes" if row["keepable"] else "no", status)

    console.print(table)
    detected = sum(1 for row in rows if row["status"] == "detect")
    console.print(f"\n[dim]{detected} of {len(rows)} kinds detected[/dim]")
