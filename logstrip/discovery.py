"""File discovery - directory walking and git-staged file listing."""

import os
import platform
import subprocess
from collections.abc import Iterable
from pathlib import Path

from logstrip.utils.constants import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_SKIP_DIRS,
    GIT_STAGED_COMMAND,
)
from logstrip.utils.logging import logger

# Windows compatibility
IS_WINDOWS = platform.system() == "Windows"


def normalize_extensions(raw: Iterable[str]) -> list[str]:
    """Split comma lists and make sure every extension has a leading dot.

    >>> normalize_extensions(["js,.ts", "vue"])
    ['.js', '.ts', '.vue']
    """
    extensions: list[str] = []
    for chunk in raw:
        for ext in chunk.split(","):
            ext = ext.strip()
            if not ext:
                continue
            ext = ext if ext.startswith(".") else f".{ext}"
            if ext not in extensions:
                extensions.append(ext)
    return extensions


def walk_files(
    root: str | Path,
    extensions: Iterable[str],
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Recursively list files under root whose suffix is in extensions.

    Dot-prefixed entries and directories named in skip_dirs are never
    entered. Entries are visited in sorted order so results are stable.
    Unreadable directories are skipped.
    """
    wanted = set(extensions)
    skipped = set(skip_dirs)
    results: list[Path] = []

    def walk(directory: Path) -> None:
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Cannot read directory {directory}: {e}")
            return

        for entry in entries:
            if entry.name.startswith("."):
                continue

            full_path = Path(entry.path)
            try:
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in skipped:
                        walk(full_path)
                elif entry.is_file(follow_symlinks=False) and full_path.suffix in wanted:
                    results.append(full_path)
            except OSError as e:
                logger.debug(f"Cannot stat {full_path}: {e}")

    walk(Path(root))
    return results


def collect_targets(
    paths: Iterable[str | Path],
    extensions: Iterable[str],
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Resolve CLI path arguments into the list of files to scan.

    A file argument is taken as-is regardless of extension; a directory is
    walked. Missing paths are logged and skipped. Duplicates are dropped
    while keeping first-seen order.
    """
    extensions = list(extensions)
    skip_dirs = list(skip_dirs)
    files: list[Path] = []
    seen: set[Path] = set()

    for raw in paths:
        resolved = Path(raw).resolve()
        if resolved.is_file():
            candidates = [resolved]
        elif resolved.is_dir():
            candidates = walk_files(resolved, extensions, skip_dirs)
        else:
            logger.warning(f"Path not found, skipping: {raw}")
            continue

        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                files.append(candidate)

    return files


def _run_git(args: list[str], root: str | Path, timeout: int) -> str | None:
    """Run a git command, returning stdout or None on any failure."""
    try:
        result = subprocess.run(
            args,
            cwd=str(root),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            shell=IS_WINDOWS,  # Windows compatibility fix
        )
    except FileNotFoundError:
        logger.debug("git is not available")
        return None
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"git command failed: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"{' '.join(args)} exited {result.returncode}: {result.stderr.strip()}")
        return None
    return result.stdout


def get_staged_files(
    extensions: Iterable[str],
    root: str | Path = ".",
    timeout: int = DEFAULT_GIT_TIMEOUT,
) -> list[Path]:
    """Files staged for the next commit (added, copied, modified, renamed).

    Paths come back absolute, resolved against the repository top level.
    Returns an empty list when git is missing, root is not inside a
    repository, or the command fails.
    """
    toplevel = _run_git(["git", "rev-parse", "--show-toplevel"], root, timeout)
    if toplevel is None:
        return []

    output = _run_git(list(GIT_STAGED_COMMAND), root, timeout)
    if output is None:
        return []

    repo_root = Path(toplevel.strip())
    wanted = set(extensions)
    return [
        (repo_root / name).resolve()
        for name in output.strip().split("\n")
        if name and Path(name).suffix in wanted
    ]
