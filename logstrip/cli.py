"""log-strip CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click
from rich.table import Table

from logstrip import __version__
from logstrip.ui import console
from logstrip.utils.logging import set_level


class CategorizedGroup(click.Group):
    """Help output grouped by what each command is for."""

    COMMAND_CATEGORIES = {
        "SCANNING": {
            "title": "SCANNING",
            "description": "Find and remove debug statements",
            "commands": ["scan"],
            "command_meta": {
                "scan": {"use_when": "Pre-commit hook, CI gate, one-off cleanup"},
            },
        },
        "REFERENCE": {
            "title": "REFERENCE",
            "description": "What log-strip detects",
            "commands": ["kinds"],
            "command_meta": {
                "kinds": {"use_when": "Checking what --keep will preserve"},
            },
        },
    }

    def format_commands(self, ctx, formatter):
        """Suppress the default listing (categorized listing in format_help)."""
        pass

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for category in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category['title']}[/bold cyan]")
            console.print(f"[dim]{category['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=10)
            table.add_column("Description", style="white")
            table.add_column("When", style="dim", width=40)

            for cmd_name in category["commands"]:
                if cmd_name not in registered:
                    continue
                cmd = registered[cmd_name]
                short_help = (cmd.help or "").split("\n")[0].strip().rstrip(".")
                meta = category.get("command_meta", {}).get(cmd_name, {})
                hint = f"USE: {meta['use_when']}" if "use_when" in meta else ""
                table.add_row(cmd_name, short_help, hint)

            console.print(table)

        console.print()
        console.rule()
        console.print("For detailed options: [cmd]log-strip <command> --help[/cmd]")


@click.group(cls=CategorizedGroup)
@click.version_option(version=__version__, prog_name="log-strip")
@click.help_option("-h", "--help")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level on stderr (default: LOGSTRIP_LOG_LEVEL or WARNING)",
)
def cli(log_level):
    """log-strip - Find and remove debug statements from your code

    \b
    QUICK START:
      log-strip scan                      # Scan current directory
      log-strip scan --fix                # Scan and auto-remove
      log-strip scan --fix -k error,warn  # Keep console.error and console.warn
      log-strip scan --staged --ci        # Pre-commit gate on staged files"""
    if log_level:
        set_level(log_level)


from logstrip.commands.kinds import kinds
from logstrip.commands.scan import scan

cli.add_command(scan)
cli.add_command(kinds)


def main():
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
