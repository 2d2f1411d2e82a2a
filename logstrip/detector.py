"""Batch driver - runs the engine over files and writes fixes back."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from logstrip.core import (
    FileOutcome,
    PatternSet,
    ScanSummary,
    find_matches,
    remove_statements,
    summarize,
)
from logstrip.utils.logging import logger


def process_file(
    file_path: Path,
    patterns: PatternSet,
    fix: bool = False,
    dry_run: bool = False,
) -> FileOutcome | None:
    """Scan one file and optionally rewrite it.

    Returns None when the file cannot be read or decoded. Line endings are
    read and written untranslated. The file is only written after the full
    rewrite is computed, and only if it changed.
    """
    try:
        with open(file_path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping unreadable file {file_path}: {e}")
        return None

    file_str = str(file_path)
    matches = [m.with_file(file_str) for m in find_matches(content, patterns)]
    outcome = FileOutcome(file=file_str, matches=matches)

    if matches and fix and not dry_run:
        fixed = remove_statements(content, patterns)
        if fixed != content:
            try:
                with open(file_path, "w", encoding="utf-8", newline="") as f:
                    f.write(fixed)
            except OSError as e:
                logger.warning(f"Could not write {file_path}: {e}")
                return outcome
            outcome.fixed = True
            logger.debug(f"Rewrote {file_path} ({len(matches)} statements)")

    return outcome


class DebugStatementDetector:
    """Runs detection (and optional removal) over a list of files."""

    def __init__(
        self,
        patterns: PatternSet,
        fix: bool = False,
        dry_run: bool = False,
        jobs: int = 1,
    ):
        self.patterns = patterns
        self.fix = fix
        self.dry_run = dry_run
        self.jobs = max(1, jobs)
        self.outcomes: list[FileOutcome] = []

    def run(self, files: list[Path]) -> list[FileOutcome]:
        """Process files, keeping outcomes that have matches in input order."""
        if self.jobs == 1 or len(files) < 2:
            results = [process_file(f, self.patterns, self.fix, self.dry_run) for f in files]
        else:
            results = self._run_parallel(files)

        self.outcomes = [r for r in results if r is not None and r.has_matches]
        logger.info(
            f"Scanned {len(files)} files, {len(self.outcomes)} with debug statements"
        )
        return self.outcomes

    def _run_parallel(self, files: list[Path]) -> list[FileOutcome | None]:
        """One task per file; results re-ordered to match the input."""
        results: list[FileOutcome | None] = [None] * len(files)

        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            futures = {
                executor.submit(process_file, f, self.patterns, self.fix, self.dry_run): idx
                for idx, f in enumerate(files)
            }
            try:
                for future in as_completed(futures):
                    results[futures[future]] = future.result()
            except KeyboardInterrupt:
                for future in futures:
                    future.cancel()
                raise

        return results

    def summary(self) -> ScanSummary:
        return summarize(self.outcomes)
