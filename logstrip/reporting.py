"""Human and JSON rendering of scan results (ASCII only, no emojis)."""

import json
import os
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape

from logstrip.core import FileOutcome, ScanSummary, StatementKind
from logstrip.utils.constants import DEFAULT_SNIPPET_CHARS


def display_path(file: str, cwd: str | None = None) -> str:
    """Path relative to cwd, falling back to the original on another drive."""
    try:
        return os.path.relpath(file, cwd or os.getcwd())
    except ValueError:
        return file


def plural(count: int, word: str, suffix: str = "s") -> str:
    return f"{count} {word}{'' if count == 1 else suffix}"


def kind_marker(kind: StatementKind) -> str:
    """Fixed-width marker for a match line."""
    if kind is StatementKind.DEBUGGER:
        return "[kind.debugger]\\[DBG][/kind.debugger]"
    if kind is StatementKind.ALERT:
        return "[kind.alert]\\[ALR][/kind.alert]"
    return "[kind.console]\\[CON][/kind.console]"


def truncate_snippet(content: str, limit: int = DEFAULT_SNIPPET_CHARS) -> str:
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def action_word(fix: bool, dry_run: bool) -> str:
    if not fix:
        return "found"
    return "would be removed" if dry_run else "removed"


def render_header(console: Console, keep: Iterable[str] = ()) -> None:
    console.print()
    console.print("[bold magenta]Log Strip[/bold magenta][dim] - Find debug statements in your code[/dim]")
    keep = list(keep)
    if keep:
        kept = ", ".join(f"console.{k}" for k in keep)
        console.print(f"  [dim]Keeping: {escape(kept)}[/dim]")


def render_scan_start(console: Console, file_count: int, staged: bool = False) -> None:
    noun = "staged file" if staged else "file"
    console.print(f"  [dim]Scanning {plural(file_count, noun)}...[/dim]")


def render_outcomes(
    console: Console,
    outcomes: list[FileOutcome],
    verbose: bool = False,
    snippet_chars: int = DEFAULT_SNIPPET_CHARS,
) -> None:
    """Per-file listing of matches."""
    for outcome in outcomes:
        if not outcome.matches:
            continue

        rel_path = escape(display_path(outcome.file))
        count = plural(len(outcome.matches), "match", "es")
        console.print()
        console.print(f"  [path]{rel_path}[/path] [dim]({count})[/dim]", soft_wrap=True)

        for match in outcome.matches:
            console.print(
                f"    {kind_marker(match.kind)} [dim]L{match.line}:{match.column}[/dim]"
                f"  [kind]{match.kind.value}[/kind]"
            )
            if verbose:
                snippet = escape(truncate_snippet(match.content, snippet_chars))
                console.print(f"      [dim]{snippet}[/dim]", soft_wrap=True)


def render_summary(
    console: Console,
    summary: ScanSummary,
    fix: bool = False,
    dry_run: bool = False,
    ci: bool = False,
) -> None:
    console.print()
    if summary.clean:
        console.print("  [success]OK[/success] No debug statements found. Your code is clean!")
        console.print()
        return

    statements = plural(summary.total_matches, "statement")
    files = plural(summary.files_with_matches, "file")
    console.print(
        f"  [warning]{statements}[/warning] {action_word(fix, dry_run)} across [bold]{files}[/bold]"
    )
    console.print()

    if not fix and not ci:
        console.print(
            "  [dim]Run with [cmd]--fix[/cmd] to auto-remove, or "
            "[cmd]--fix --keep error,warn[/cmd] to preserve those.[/dim]"
        )
        console.print()


def format_json(
    outcomes: list[FileOutcome],
    summary: ScanSummary,
    cwd: str | None = None,
) -> str:
    """JSON report for CI/CD consumption."""
    data = {
        "total": summary.total_matches,
        "files": [o.to_dict(display_path(o.file, cwd)) for o in outcomes if o.matches],
        "summary": {
            "files": summary.files_with_matches,
            "fixed": summary.files_fixed,
            "by_kind": summary.by_kind,
        },
    }
    return json.dumps(data, indent=2)
