"""Scan for debug statements and optionally remove them.

Usage: log-strip scan [PATHS]... [--fix] [--staged] [--ci]
"""

import click

from logstrip.config_runtime import load_runtime_config
from logstrip.core import build_patterns
from logstrip.core.kinds import unknown_keep_names
from logstrip.detector import DebugStatementDetector
from logstrip.discovery import collect_targets, get_staged_files, normalize_extensions
from logstrip.reporting import (
    format_json,
    render_header,
    render_outcomes,
    render_scan_start,
    render_summary,
)
from logstrip.ui import console, print_warning
from logstrip.utils.error_handler import handle_exceptions
from logstrip.utils.exit_codes import ExitCodes
from logstrip.utils.logging import logger


def _split_csv(values) -> list[str]:
    return [item.strip() for value in values for item in value.split(",") if item.strip()]


@click.command("scan")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("-f", "--fix", is_flag=True, help="Auto-remove found statements")
@click.option(
    "-k",
    "--keep",
    multiple=True,
    help="Keep specific console methods (comma-separated, e.g. error,warn)",
)
@click.option("-s", "--staged", is_flag=True, help="Only check git staged files")
@click.option("--ci", is_flag=True, help="CI mode: exit code 1 if statements found")
@click.option("--dry-run", is_flag=True, help="Show what --fix would do without changing files")
@click.option(
    "-e",
    "--ext",
    "extensions",
    multiple=True,
    help="File extensions to scan (default: .js,.jsx,.ts,.tsx,.mjs,.cjs,.vue,.svelte)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show each match with its source line")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option("-j", "--jobs", type=click.IntRange(min=1), default=None, help="Worker threads")
@click.option("--root", default=".", help="Directory holding .logstrip/config.json")
@handle_exceptions
def scan(paths, fix, keep, staged, ci, dry_run, extensions, verbose, as_json, jobs, root):
    """Find debug statements (console.*, debugger, alert) and optionally remove them.

    Scans the given files and directories (default: current directory), or
    only the files staged in git with --staged. Comment lines (starting with
    //, /* or *) are ignored. Removal works on whole lines: a line holding a
    debug statement is deleted, and a call whose arguments continue onto later
    lines is deleted together with those lines.

    \b
    DETECTS:
      console.log/debug/info/warn/error/trace/table/dir/time/timeEnd/
      timeLog/count/countReset/group/groupEnd/groupCollapsed/clear/
      assert/profile/profileEnd, debugger, alert()

    \b
    EXAMPLES:
      log-strip scan                        # Scan current directory
      log-strip scan --fix                  # Scan and auto-remove
      log-strip scan --fix --keep error,warn
      log-strip scan --staged               # Only git staged files
      log-strip scan --ci                   # Exit 1 if any found
      log-strip scan src/ lib/ -e ts,tsx
      log-strip scan --json > report.json

    \b
    EXIT CODES:
      0 = No debug statements found (or --ci not set)
      1 = Debug statements found AND --ci set
      2 = Usage error or command failure"""
    config = load_runtime_config(root)

    keep_names = list(dict.fromkeys(_split_csv(keep) if keep else config["scan"]["keep"]))
    unknown = unknown_keep_names(keep_names)
    if unknown:
        message = f"Ignoring unknown console methods in --keep: {', '.join(unknown)}"
        if as_json:
            logger.warning(message)
        else:
            print_warning(message)
    keep_names = [k for k in keep_names if k not in unknown]

    ext_list = normalize_extensions(extensions) if extensions else list(config["scan"]["extensions"])
    jobs = jobs or config["scan"]["jobs"]

    if not as_json:
        render_header(console, keep_names)

    if staged:
        files = get_staged_files(ext_list, root=root, timeout=config["git"]["timeout"])
    else:
        files = collect_targets(paths or ["."], ext_list, config["scan"]["skip_dirs"])

    if not as_json:
        render_scan_start(console, len(files), staged=staged)

    patterns = build_patterns(keep_names)
    detector = DebugStatementDetector(patterns, fix=fix, dry_run=dry_run, jobs=jobs)
    outcomes = detector.run(files)
    summary = detector.summary()

    if as_json:
        click.echo(format_json(outcomes, summary))
    else:
        render_outcomes(
            console,
            outcomes,
            verbose=verbose,
            snippet_chars=config["report"]["snippet_chars"],
        )
        render_summary(console, summary, fix=fix, dry_run=dry_run, ci=ci)

    exit_code = ExitCodes.for_scan(summary.total_matches, ci)
    if exit_code != ExitCodes.SUCCESS:
        raise click.exceptions.Exit(exit_code)
