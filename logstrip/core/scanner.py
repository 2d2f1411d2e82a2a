"""Debug statement detection over file content."""

from dataclasses import dataclass, replace
from typing import Any

from logstrip.core.comments import is_commented
from logstrip.core.kinds import StatementKind
from logstrip.core.patterns import PatternSet


@dataclass(frozen=True)
class Match:
    """A single debug statement occurrence."""

    line: int
    column: int
    kind: StatementKind
    content: str
    file: str = ""

    def with_file(self, file: str) -> "Match":
        return replace(self, file=file)

    def to_dict(self) -> dict[str, Any]:
        """JSON shape used by the report (file is reported per outcome)."""
        return {
            "line": self.line,
            "column": self.column,
            "type": self.kind.value,
            "content": self.content,
        }


def find_matches(content: str, patterns: PatternSet) -> list[Match]:
    """Find every debug statement on live (non-comment) lines.

    Matches are ordered top-to-bottom and left-to-right within a line.
    ``file`` is left empty for the caller to fill in.
    """
    matches: list[Match] = []

    for line_idx, line in enumerate(content.split("\n")):
        if is_commented(line):
            continue

        trimmed = line.strip()
        found = []
        for matcher in patterns.matchers:
            for m in matcher.regex.finditer(line):
                found.append((m.start(), matcher.classify(m)))

        # Stable: equal columns keep matcher order
        found.sort(key=lambda item: item[0])
        for start, kind in found:
            matches.append(
                Match(line=line_idx + 1, column=start + 1, kind=kind, content=trimmed)
            )

    return matches
