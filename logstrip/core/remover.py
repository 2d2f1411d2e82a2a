"""Line-level removal of debug statements.

Removal never edits inside a line: a line is either kept verbatim or dropped.
A statement whose argument list opens on one line and closes later is removed
by tracking parenthesis balance across the following lines.

States:
    SCANNING             deciding line by line
    CONSUMING            dropping lines until paren depth returns to zero
    AWAITING_TERMINATOR  one-line lookahead for a dangling ``;``
"""

from enum import Enum

from logstrip.core.comments import is_commented
from logstrip.core.patterns import PatternSet


class RemovalState(Enum):
    SCANNING = "scanning"
    CONSUMING = "consuming"
    AWAITING_TERMINATOR = "awaiting_terminator"


class LineAction(Enum):
    KEEP = "keep"
    DROP = "drop"
    DROP_MULTILINE = "drop_multiline"


def paren_delta(line: str) -> int:
    """Opening minus closing parentheses, string contents included."""
    return line.count("(") - line.count(")")


def classify_line(line: str, patterns: PatternSet) -> LineAction:
    """Decide what to do with one line while scanning."""
    if is_commented(line):
        return LineAction.KEEP

    trimmed = line.strip()
    if not patterns.matches_any(trimmed):
        return LineAction.KEEP

    if not patterns.strip(trimmed):
        return LineAction.DROP

    # Statement mixed with other code, or a call left open. Either way the
    # whole line goes; an open call also takes its continuation lines.
    if paren_delta(line) > 0:
        return LineAction.DROP_MULTILINE
    return LineAction.DROP


class StatementRemover:
    """Single-pass state machine over the lines of one file."""

    def __init__(self, patterns: PatternSet):
        self.patterns = patterns
        self.state = RemovalState.SCANNING
        self.depth = 0
        self.kept: list[str] = []

    def feed(self, line: str) -> None:
        if self.state is RemovalState.CONSUMING:
            self.depth += paren_delta(line)
            if self.depth <= 0:
                self.state = RemovalState.AWAITING_TERMINATOR
            return

        if self.state is RemovalState.AWAITING_TERMINATOR:
            self.state = RemovalState.SCANNING
            if line.strip() == ";":
                return

        action = classify_line(line, self.patterns)
        if action is LineAction.KEEP:
            self.kept.append(line)
        elif action is LineAction.DROP_MULTILINE:
            self.depth = paren_delta(line)
            self.state = RemovalState.CONSUMING

    def result(self) -> str:
        return "\n".join(collapse_blank_lines(self.kept))


def collapse_blank_lines(lines: list[str]) -> list[str]:
    """Reduce every run of whitespace-only lines to its first line."""
    collapsed: list[str] = []
    previous_blank = False
    for line in lines:
        blank = not line.strip()
        if blank and previous_blank:
            continue
        collapsed.append(line)
        previous_blank = blank
    return collapsed


def remove_statements(content: str, patterns: PatternSet) -> str:
    """Return content with every matched debug statement line removed.

    Idempotent for a fixed PatternSet. Never raises; an unclosed call
    consumes the rest of the input.
    """
    remover = StatementRemover(patterns)
    for line in content.split("\n"):
        remover.feed(line)
    return remover.result()
