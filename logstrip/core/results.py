"""Per-file outcomes and batch totals."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from logstrip.core.scanner import Match


@dataclass
class FileOutcome:
    """Matches found in one file and whether it was rewritten."""

    file: str
    matches: list[Match] = field(default_factory=list)
    fixed: bool = False

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)

    def to_dict(self, display_path: str | None = None) -> dict[str, Any]:
        return {
            "file": display_path if display_path is not None else self.file,
            "matches": [m.to_dict() for m in self.matches],
            "fixed": self.fixed,
        }


@dataclass(frozen=True)
class ScanSummary:
    total_matches: int
    files_with_matches: int
    files_fixed: int
    by_kind: dict[str, int]

    @property
    def clean(self) -> bool:
        return self.total_matches == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total_matches,
            "files": self.files_with_matches,
            "fixed": self.files_fixed,
            "by_kind": dict(self.by_kind),
        }


def summarize(outcomes: list[FileOutcome]) -> ScanSummary:
    """Totals over a batch of outcomes."""
    by_kind: Counter[str] = Counter()
    total = 0
    with_matches = 0
    fixed = 0

    for outcome in outcomes:
        if outcome.matches:
            with_matches += 1
            total += len(outcome.matches)
            by_kind.update(m.kind.value for m in outcome.matches)
        if outcome.fixed:
            fixed += 1

    return ScanSummary(
        total_matches=total,
        files_with_matches=with_matches,
        files_fixed=fixed,
        by_kind=dict(sorted(by_kind.items())),
    )
